"""Photo library helpers: media types, file name analysis, grouping and filtering of assets."""

__version__ = "0.1.0"