"""Filters applied to groups of assets according to user options."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .assets import Asset, Group, GroupBy
from .filetypes import is_raw_file

Filter = Callable[[Group], Group]


def _is_jpeg(a: Asset) -> bool:
    return a.ext in (".jpg", ".jpeg")


def _is_heic(a: Asset) -> bool:
    return a.ext == ".heic"


def _is_raw(a: Asset) -> bool:
    return is_raw_file(a.ext)


def _ungroup(g: Group, grouping: GroupBy) -> Group:
    if g.grouping == grouping:
        g.grouping = GroupBy.NONE
    return g


def _keep_only(
    g: Group, grouping: GroupBy, keep: Callable[[Asset], bool], reason: str
) -> Group:
    if g.grouping != grouping:
        return g
    removed = [a for a in g.assets if not keep(a)]
    if len(removed) < len(g.assets):
        for a in removed:
            g.remove_asset(a, reason)
    if len(g.assets) < 2:
        g.grouping = GroupBy.NONE
    return g


def _cover_first(g: Group, grouping: GroupBy, wanted: Callable[[Asset], bool]) -> Group:
    if g.grouping != grouping:
        return g
    g.cover_index = next(
        (i for i, a in enumerate(g.assets) if wanted(a)), g.cover_index
    )
    return g


def un_group_burst(g: Group) -> Group:
    return _ungroup(g, GroupBy.BURST)


def group_burst(g: Group) -> Group:
    return g


def group_burst_keep_raw(g: Group) -> Group:
    return _keep_only(g, GroupBy.BURST, _is_raw, "Keep only RAW files in burst")


def stack_burst_keep_jpeg(g: Group) -> Group:
    return _keep_only(g, GroupBy.BURST, _is_jpeg, "Keep only JPEG files in burst")


def un_group_heic_jpeg(g: Group) -> Group:
    return _ungroup(g, GroupBy.HEIC_JPG)


def group_heic_jpg_keep_heic(g: Group) -> Group:
    return _keep_only(
        g, GroupBy.HEIC_JPG, _is_heic, "Keep only HEIC files in HEIC/JPEG group"
    )


def group_heic_jpg_keep_jpg(g: Group) -> Group:
    return _keep_only(
        g, GroupBy.HEIC_JPG, _is_jpeg, "Keep only JPEG files in HEIC/JPEG group"
    )


def group_heic_jpg_stack_heic(g: Group) -> Group:
    return _cover_first(g, GroupBy.HEIC_JPG, _is_heic)


def group_heic_jpg_stack_jpg(g: Group) -> Group:
    return _cover_first(g, GroupBy.HEIC_JPG, _is_jpeg)


def un_group_raw_jpg_nothing(g: Group) -> Group:
    return _ungroup(g, GroupBy.RAW_JPG)


def group_raw_jpg_keep_raw(g: Group) -> Group:
    return _keep_only(
        g, GroupBy.RAW_JPG, _is_raw, "Keep only RAW files in RAW/JPEG group"
    )


def group_raw_jpg_keep_jpg(g: Group) -> Group:
    return _keep_only(
        g, GroupBy.RAW_JPG, _is_jpeg, "Keep only JPEG files in RAW/JPEG group"
    )


def group_raw_jpg_stack_raw(g: Group) -> Group:
    return _cover_first(g, GroupBy.RAW_JPG, _is_raw)


def group_raw_jpg_stack_jpg(g: Group) -> Group:
    return _cover_first(g, GroupBy.RAW_JPG, _is_jpeg)


def apply_filters(g: Group, *args: Filter) -> Group:
    """Run the filters in order on a group that is really grouped."""
    if g.grouping != GroupBy.NONE:
        for f in args:
            g = f(g)
    return g


class BurstFlag(IntEnum):
    NOTHING = 0
    STACK = 1
    KEEP_RAW = 2
    KEEP_JPEG = 3

    def group_filter(self) -> Filter:
        return _BURST_FILTERS[self]

    def __str__(self) -> str:
        return _BURST_LABELS[self]


class HeicJpgFlag(IntEnum):
    NOTHING = 0
    KEEP_HEIC = 1
    KEEP_JPG = 2
    STACK_HEIC = 3
    STACK_JPG = 4

    def group_filter(self) -> Filter:
        return _HEIC_FILTERS[self]

    def __str__(self) -> str:
        return _HEIC_LABELS[self]


class RawJpgFlag(IntEnum):
    NOTHING = 0
    KEEP_RAW = 1
    KEEP_JPG = 2
    STACK_RAW = 3
    STACK_JPG = 4

    def group_filter(self) -> Filter:
        return _RAW_FILTERS[self]

    def __str__(self) -> str:
        return _RAW_LABELS[self]


_BURST_FILTERS = {
    BurstFlag.NOTHING: un_group_burst,
    BurstFlag.STACK: group_burst,
    BurstFlag.KEEP_RAW: group_burst_keep_raw,
    BurstFlag.KEEP_JPEG: stack_burst_keep_jpeg,
}
_BURST_LABELS = {
    BurstFlag.NOTHING: "NoStack",
    BurstFlag.STACK: "Stack",
    BurstFlag.KEEP_RAW: "StackKeepRaw",
    BurstFlag.KEEP_JPEG: "StackKeepJPEG",
}

_HEIC_FILTERS = {
    HeicJpgFlag.NOTHING: un_group_heic_jpeg,
    HeicJpgFlag.KEEP_HEIC: group_heic_jpg_keep_heic,
    HeicJpgFlag.KEEP_JPG: group_heic_jpg_keep_jpg,
    HeicJpgFlag.STACK_HEIC: group_heic_jpg_stack_heic,
    HeicJpgFlag.STACK_JPG: group_heic_jpg_stack_jpg,
}
_HEIC_LABELS = {
    HeicJpgFlag.NOTHING: "NoStack",
    HeicJpgFlag.KEEP_HEIC: "KeepHeic",
    HeicJpgFlag.KEEP_JPG: "KeepJPG",
    HeicJpgFlag.STACK_HEIC: "StackCoverHeic",
    HeicJpgFlag.STACK_JPG: "StackCoverJPG",
}

_RAW_FILTERS = {
    RawJpgFlag.NOTHING: un_group_raw_jpg_nothing,
    RawJpgFlag.KEEP_RAW: group_raw_jpg_keep_raw,
    RawJpgFlag.KEEP_JPG: group_raw_jpg_keep_jpg,
    RawJpgFlag.STACK_RAW: group_raw_jpg_stack_raw,
    RawJpgFlag.STACK_JPG: group_raw_jpg_stack_jpg,
}
_RAW_LABELS = {
    RawJpgFlag.NOTHING: "NoStack",
    RawJpgFlag.KEEP_RAW: "KeepRaw",
    RawJpgFlag.KEEP_JPG: "KeepJPG",
    RawJpgFlag.STACK_RAW: "StackCoverRaw",
    RawJpgFlag.STACK_JPG: "StackCoverJPG",
}


def _parse(value: str, labels: dict, nothing, type_name: str):
    key = value.lower()
    if key == "":
        return nothing
    for flag, label in labels.items():
        if label.lower() == key:
            return flag
    raise ValueError(f'invalid value "{value}" for {type_name}')


def parse_burst_flag(value: str) -> BurstFlag:
    return _parse(value, _BURST_LABELS, BurstFlag.NOTHING, "BurstFlag")


def parse_heic_jpg_flag(value: str) -> HeicJpgFlag:
    return _parse(value, _HEIC_LABELS, HeicJpgFlag.NOTHING, "HeicJpgFlag")


def parse_raw_jpg_flag(value: str) -> RawJpgFlag:
    return _parse(value, _RAW_LABELS, RawJpgFlag.NOTHING, "RawJPGFlag")