"""Lists of glob-like file name patterns used to ban unwanted files."""

from __future__ import annotations

import re
from typing import Iterable

_ESCAPED = ".^$()|"


def _pattern_to_re(pattern: str) -> re.Pattern[str]:
    """Turn a glob-styled pattern into a case-insensitive regular expression.

    A leading slash anchors the pattern to the start of a path element.
    """
    out = ["(?i)"]
    in_brackets = False
    first = True
    chars = iter(pattern)
    for c in chars:
        if c == "/":
            out.append("(^|/)" if first else "/")
        elif c == "*":
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c in _ESCAPED:
            out.append("\\" + c)
        elif c == "\\":
            nxt = next(chars, None)
            if nxt is None:
                raise ValueError(f"invalid file name pattern: {pattern}")
            out.append("\\" + nxt)
        elif c == "[":
            in_brackets = True
            out.append("[")
            for b in chars:
                if b == "]":
                    in_brackets = False
                    out.append("]")
                    break
                lower, upper = b.lower(), b.upper()
                out.append(lower)
                if len(upper) == 1 and upper != lower:
                    out.append(upper)
        else:
            out.append(c)
        first = False
    if in_brackets:
        raise ValueError(f"invalid file name pattern: {pattern}")
    try:
        return re.compile("".join(out))
    except re.error:
        raise ValueError(f"invalid file name pattern: {pattern}") from None


class NameList:
    """Patterns matched against file paths; a path matching any one is banned."""

    def __init__(self, *patterns: str) -> None:
        self._res: list[re.Pattern[str]] = []
        self._patterns: list[str] = []
        for pattern in patterns:
            self.add(pattern)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> NameList:
        return cls(*patterns)

    def add(self, pattern: str) -> None:
        """Add a pattern; an empty one is ignored, a malformed one raises ValueError."""
        if not pattern:
            return
        self._res.append(_pattern_to_re(pattern))
        self._patterns.append(pattern)

    def match(self, name: str) -> bool:
        return any(r.search(name) for r in self._res)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __str__(self) -> str:
        return ", ".join(f"'{p}'" for p in self._patterns)