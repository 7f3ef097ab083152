"""Information extracted from media file names."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Callable

from .filetypes import DEFAULT_SUPPORTED_MEDIA, SupportedMedia

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Kind(Enum):
    NONE = "none"
    BURST = "burst"
    EDITED = "edited"
    PORTRAIT = "portrait"
    NIGHT = "night"
    MOTION = "motion"
    LONG_EXPOSURE = "long_exposure"


@dataclass
class NameInfo:
    """What a file name tells about the file. A missing date is None."""

    base: str = ""
    radical: str = ""
    ext: str = ""
    type: str = ""
    kind: Kind = Kind.NONE
    is_cover: bool = False
    index: int = 0
    taken: datetime | None = None


def _localize(naive: datetime, tz: tzinfo | None) -> datetime:
    """Attach a zone to a wall-clock time; None means the local zone."""
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def _parse(text: str, fmt: str, tz: tzinfo | None) -> datetime | None:
    try:
        return _localize(datetime.strptime(text, fmt), tz)
    except ValueError:
        return None


def _parse_with_millis(digits: str, tz: tzinfo | None) -> datetime | None:
    if len(digits) != 17 or not digits.isdigit():
        return None
    t = _parse(digits[:14], "%Y%m%d%H%M%S", tz)
    if t is None:
        return None
    return t.replace(microsecond=int(digits[14:]) * 1000)


def _unix_millis(ms: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=ms)


def _path_base(name: str) -> str:
    stripped = name.rstrip("/")
    if not stripped:
        return "/" if name else "."
    return stripped.rsplit("/", 1)[-1]


def _path_ext(name: str) -> str:
    last = name.rsplit("/", 1)[-1]
    pos = last.rfind(".")
    return last[pos:] if pos >= 0 else ""


_TIME_RE = re.compile(
    r"(19[89]\d|20\d\d)\D?(0\d|1[0-2])\D?([0-3]\d)\D{0,1}([01]\d|2[0-4])?\D?([0-5]\d)?\D?([0-5]\d)?",
    re.ASCII,
)


def take_time_from_name(s: str, tz: tzinfo | None) -> datetime | None:
    """Find a date in a name; None when there is no valid one."""
    m = _TIME_RE.search(s)
    if m is None:
        return None
    values = [int(g) if g else 0 for g in m.groups()]
    try:
        naive = datetime(*values)
    except ValueError:
        return None
    t = _localize(naive, tz)
    if t - datetime.now(timezone.utc) > timedelta(hours=24):
        return None
    return t


def take_time_from_path(fullpath: str, tz: tzinfo | None) -> datetime | None:
    """Find a date in the file name, then in each folder from the end, then in the whole path."""
    for part in reversed(fullpath.split(os.sep)):
        t = take_time_from_name(part, tz)
        if t is not None:
            return t
    return take_time_from_name(fullpath, tz)


_HUAWEI_RE = re.compile(r"^(IMG_\d{8}_\d{6})_BURST(\d{3})(?:_(\w+))?(\..+)$", re.ASCII)
_NEXUS_RE = re.compile(r"^(\d+)\D+_\d+_(BURST\d+)(\D+)?(\..+)$", re.ASCII)
_PIXEL_RE = re.compile(r"^(PXL_\d{8}_\d{9})((.*)?(\d{2}))?(.*)?(\..*)$", re.ASCII)
_SAMSUNG_RE = re.compile(r"^(\d{8}_\d{6})_(\d{3})(\..+)$", re.ASCII)
_SONY_XPERIA_RE = re.compile(r"^DSC_(\d+)_BURST(\d+)(\D+)?(\..+)$", re.ASCII)

_PIXEL_KINDS = (
    ("PORTRAIT", Kind.PORTRAIT),
    ("NIGHT", Kind.NIGHT),
    ("LONG_EXPOSURE", Kind.LONG_EXPOSURE),
    ("MOTION", Kind.MOTION),
)


@dataclass
class InfoCollector:
    """Extracts NameInfo from file names; tz None means the local zone."""

    tz: tzinfo | None = None
    sm: SupportedMedia = field(default_factory=lambda: DEFAULT_SUPPORTED_MEDIA)

    def get_info(self, name: str) -> NameInfo:
        base = _path_base(name)
        matchers: tuple[Callable[[str], NameInfo | None], ...] = (
            self.pixel,
            self.samsung,
            self.nexus,
            self.huawei,
            self.sony_xperia,
        )
        for matcher in matchers:
            info = matcher(base)
            if info is not None:
                return info

        ext = _path_ext(base)
        return NameInfo(
            base=base,
            radical=base[: len(base) - len(ext)],
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            taken=take_time_from_path(name, self.tz),
        )

    def huawei(self, name: str) -> NameInfo | None:
        m = _HUAWEI_RE.match(name)
        if m is None:
            return None
        radical, index, suffix, ext = m.groups()
        return NameInfo(
            radical=radical,
            base=name,
            is_cover=(suffix or "").endswith("COVER"),
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            kind=Kind.BURST,
            index=int(index),
            taken=_parse(radical[4:19], "%Y%m%d_%H%M%S", self.tz),
        )

    def nexus(self, name: str) -> NameInfo | None:
        m = _NEXUS_RE.match(name)
        if m is None:
            return None
        index, radical, suffix, ext = m.groups()
        ts = radical[len("BURST"):]
        taken = None
        if len(ts) == 14:
            taken = _parse(ts, "%Y%m%d%H%M%S", self.tz)
        elif len(ts) == 13:
            taken = _unix_millis(int(ts))
        elif len(ts) == 17:
            taken = _parse_with_millis(ts, self.tz)
        return NameInfo(
            radical=radical,
            base=name,
            is_cover="COVER" in (suffix or ""),
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            kind=Kind.BURST,
            index=int(index),
            taken=taken,
        )

    def pixel(self, name: str) -> NameInfo | None:
        m = _PIXEL_RE.match(name)
        if m is None:
            return None
        radical = m.group(1)
        middle = m.group(3) or ""
        index = m.group(4) or ""
        suffix = m.group(5) or ""
        ext = m.group(6)
        kind = next((k for word, k in _PIXEL_KINDS if word in middle), Kind.NONE)
        return NameInfo(
            radical=radical,
            base=name,
            is_cover=suffix.endswith("COVER"),
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            kind=kind,
            index=int(index) if index else 0,
            taken=_parse(radical[4:19], "%Y%m%d_%H%M%S", timezone.utc),
        )

    def samsung(self, name: str) -> NameInfo | None:
        m = _SAMSUNG_RE.match(name)
        if m is None:
            return None
        radical, index, ext = m.groups()
        number = int(index)
        return NameInfo(
            radical=radical,
            base=name,
            is_cover=number == 1,
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            kind=Kind.BURST,
            index=number,
            taken=_parse(radical, "%Y%m%d_%H%M%S", self.tz),
        )

    def sony_xperia(self, name: str) -> NameInfo | None:
        m = _SONY_XPERIA_RE.match(name)
        if m is None:
            return None
        index, stamp, suffix, ext = m.groups()
        return NameInfo(
            radical="BURST" + stamp,
            base=name,
            is_cover="COVER" in (suffix or ""),
            ext=ext.lower(),
            type=self.sm.type_from_ext(ext),
            kind=Kind.BURST,
            index=int(index),
            taken=_parse_with_millis(stamp, self.tz),
        )