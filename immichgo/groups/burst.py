"""Grouping of photos shot within a fraction of a second."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Iterator

from ..assets import Asset, Group, GroupBy
from ..filenames import Kind
from ..filetypes import TYPE_IMAGE

FRAME_INTERVAL = timedelta(milliseconds=500)


def _send(batch: list[Asset]) -> Iterator[Asset | Group]:
    if not batch:
        return
    if len(batch) < 2:
        yield batch[0]
        return
    yield Group(GroupBy.BURST, batch, cover_index=0)


def group(assets: Iterable[Asset]) -> Iterator[Asset | Group]:
    """Group images taken less than FRAME_INTERVAL apart.

    The assets are expected sorted by capture date. Non-images, edited
    images, images already known as bursts and images without a capture
    date are not grouped.
    """
    current: list[Asset] = []
    last_taken = None
    for a in assets:
        dont_group = (
            a.type != TYPE_IMAGE
            or a.capture_date is None
            or a.kind in (Kind.BURST, Kind.EDITED)
            or last_taken is None
            or abs(a.capture_date - last_taken) > FRAME_INTERVAL
        )
        if dont_group:
            yield from _send(current)
            current = [a]
        else:
            current.append(a)
        last_taken = a.capture_date
    yield from _send(current)