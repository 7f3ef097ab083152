"""Small console helpers: sizes and yes/no questions."""

from __future__ import annotations

import math
import sys

_SUFFIXES = ("B", "KB", "MB", "GB")
_BASE = 1024.0


def format_bytes(s: int) -> str:
    """Format a size in bytes with a binary unit up to GB."""
    size = float(s)
    if size < _BASE:
        return f"{size:.0f} {_SUFFIXES[0]}"
    exp = 0
    while size >= _BASE and exp < len(_SUFFIXES) - 1:
        size /= _BASE
        exp += 1
    rounded = math.floor(size * 10 + 0.5) / 10
    return f"{rounded:.1f} {_SUFFIXES[exp]}"


def confirm_yes_no(prompt: str, default_answer: str) -> str:
    """Ask a yes/no question on the console and return "y" or "n".

    Characters other than y or n ask again; the end of input gives the default.
    """
    default_answer = default_answer.lower()
    other = "y" if default_answer == "n" else "n"
    while True:
        print(f"{prompt} [{default_answer}]/{other}: ", end="", flush=True)
        answer = sys.stdin.read(1).lower()
        if answer == "":
            return default_answer
        if answer in ("y", "n"):
            return answer