"""Grouping of images sharing the same name radical."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Iterator

from ..assets import Asset, Group, GroupBy
from ..filenames import Kind
from ..filetypes import TYPE_IMAGE, is_raw_file

THRESHOLD = timedelta(seconds=1)


def _capture_date(a: Asset) -> datetime | None:
    return a.capture_date if a.capture_date is not None else a.file_date


def _send_group(batch: list[Asset]) -> Iterator[Asset | Group]:
    if len(batch) < 2:
        yield from batch
        return

    grouping = GroupBy.OTHER
    got_jpg = got_raw = got_heic = got_mp4 = got_mov = False
    cover = 0
    for i, a in enumerate(batch):
        got_mp4 = got_mp4 or a.ext == ".mp4"
        got_mov = got_mov or a.ext == ".mov"
        got_jpg = got_jpg or a.ext == ".jpg"
        got_raw = got_raw or is_raw_file(a.ext)
        got_heic = got_heic or a.ext in (".heic", ".heif")
        if grouping == GroupBy.OTHER and a.kind == Kind.BURST:
            grouping = GroupBy.BURST
        if a.is_cover:
            cover = i

    if len(batch) == 2 and grouping == GroupBy.OTHER:
        if got_jpg and got_raw and not got_heic:
            grouping = GroupBy.RAW_JPG
        elif got_jpg and not got_raw and got_heic:
            grouping = GroupBy.HEIC_JPG
        elif (got_mp4 or got_mov) and (got_jpg or got_heic):
            grouping = GroupBy.NONE
    if grouping == GroupBy.NONE:
        yield from batch
        return

    yield Group(grouping, batch, cover_index=cover)


def group(assets: Iterable[Asset]) -> Iterator[Asset | Group]:
    """Group images with the same radical taken within THRESHOLD.

    The assets are expected sorted by radical, then by capture date.
    """
    current_radical = ""
    current_date: datetime | None = None
    current: list[Asset] = []
    for a in assets:
        cd = _capture_date(a)
        if (
            a.radical != current_radical
            or a.type != TYPE_IMAGE
            or cd is None
            or current_date is None
            or abs(cd - current_date) > THRESHOLD
        ):
            if current:
                yield from _send_group(current)
                current = []
            current_radical = a.radical
            current_date = cd
        current.append(a)
    if current:
        yield from _send_group(current)