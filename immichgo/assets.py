"""Assets and groups of assets that are handled together."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .filenames import Kind, NameInfo
from .fsname import FSAndName


class GroupBy(Enum):
    """Why assets are grouped together."""

    NONE = "none"
    BURST = "burst"
    RAW_JPG = "raw_jpg"
    HEIC_JPG = "heic_jpg"
    OTHER = "other"


@dataclass
class Asset:
    """A media file with the information taken from its name and dates."""

    file: FSAndName
    file_date: datetime | None = None
    capture_date: datetime | None = None
    name_info: NameInfo = field(default_factory=NameInfo)

    def set_name_info(self, info: NameInfo) -> None:
        self.name_info = info

    @property
    def radical(self) -> str:
        return self.name_info.radical

    @property
    def base(self) -> str:
        return self.name_info.base

    @property
    def ext(self) -> str:
        return self.name_info.ext

    @property
    def type(self) -> str:
        return self.name_info.type

    @property
    def kind(self) -> Kind:
        return self.name_info.kind

    @property
    def index(self) -> int:
        return self.name_info.index

    @property
    def is_cover(self) -> bool:
        return self.name_info.is_cover

    @property
    def taken(self) -> datetime | None:
        return self.name_info.taken


@dataclass
class Group:
    """Assets linked together, one of which is the cover."""

    grouping: GroupBy = GroupBy.NONE
    assets: list[Asset] = field(default_factory=list)
    cover_index: int = 0
    removed: list[tuple[Asset, str]] = field(default_factory=list)

    def remove_asset(self, asset: Asset, reason: str) -> None:
        """Take the asset out of the group and remember why."""
        for i, a in enumerate(self.assets):
            if a is asset:
                del self.assets[i]
                self.removed.append((asset, reason))
                if i < self.cover_index:
                    self.cover_index -= 1
                if self.cover_index >= len(self.assets):
                    self.cover_index = 0
                return

    def set_cover(self, index: int) -> Group:
        self.cover_index = index
        return self