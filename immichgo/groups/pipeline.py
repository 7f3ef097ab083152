"""Chains of groupers that turn a stream of assets into groups."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator, Union

from ..assets import Asset, Group, GroupBy

GroupOrAsset = Union[Asset, Group]

# A grouper reads assets and yields the groups it detects, and the assets it
# leaves alone.
Grouper = Callable[[Iterable[Asset]], Iterator[GroupOrAsset]]


def _route(items: Iterator[GroupOrAsset], found: deque[Group]) -> Iterator[Asset]:
    """Pass assets on to the next stage and keep the groups aside."""
    for item in items:
        if isinstance(item, Group):
            found.append(item)
        else:
            yield item


class GrouperPipeline:
    """Groupers applied in sequence, the most specific one first.

    Assets left alone by a grouper are handed to the next one; what the last
    grouper leaves alone comes out as a group of a single asset.
    """

    def __init__(self, *groupers: Grouper) -> None:
        self.groupers: tuple[Grouper, ...] = groupers

    def pipe_grouper(self, assets: Iterable[Asset]) -> Iterator[Group]:
        """Yield the groups found in the assets, standalone assets included."""
        found: deque[Group] = deque()
        stream: Iterator[Asset] = iter(assets)
        for grouper in self.groupers:
            stream = _route(grouper(stream), found)

        for asset in stream:
            while found:
                yield found.popleft()
            yield Group(GroupBy.NONE, [asset])
        while found:
            yield found.popleft()