"""Groupers that gather assets into bursts, series and scan sets, and the pipeline chaining them."""