"""Grouping of the scans produced by Epson FastFoto scanners."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from ..assets import Asset, Group, GroupBy
from ..filenames import Kind
from ..filetypes import TYPE_IMAGE

_EPSON_FASTFOTO_RE = re.compile(r"^(.*_\d+)(_[ab])?(\.[a-z]+)$", re.ASCII)


def _emit(batch: list[Asset], cover: int) -> list[Asset | Group]:
    if not batch:
        return []
    if len(batch) < 2:
        return [batch[0]]
    return [Group(GroupBy.OTHER, batch, cover_index=cover)]


def group(assets: Iterable[Asset]) -> Iterator[Asset | Group]:
    """Group a scan with its enhanced (_a) and back side (_b) versions.

    The enhanced version, when present, is the cover.
    """
    batch: list[Asset] = []
    radical = ""
    cover = 0
    for a in assets:
        m = _EPSON_FASTFOTO_RE.match(a.file.name)
        if m is None or a.type != TYPE_IMAGE or a.kind == Kind.BURST:
            yield from _emit(batch, cover)
            batch, radical, cover = [], "", 0
            yield a
            continue

        if m.group(1) != radical:
            yield from _emit(batch, cover)
            batch, radical, cover = [], "", 0
        batch.append(a)
        radical = m.group(1)
        if m.group(2) == "_a":
            cover = len(batch) - 1
    yield from _emit(batch, cover)