"""A file name bound to the file system that holds it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, BinaryIO


@dataclass(frozen=True)
class FSAndName:
    """A name inside a file system; the file system may be None."""

    fsys: Any
    name: str

    def full_name(self) -> str:
        """Return the name prefixed by the file system name when it has one."""
        fs_name = getattr(self.fsys, "name", None)
        if callable(fs_name):
            return f"{fs_name()}:{self.name}"
        return self.name

    def open(self) -> BinaryIO:
        """Open the file for reading from its file system."""
        if self.fsys is None:
            raise ValueError(f"no file system for {self.name!r}")
        return self.fsys.open(self.name)

    def stat(self) -> os.stat_result:
        """Return the file's status from its file system."""
        if self.fsys is None:
            raise ValueError(f"no file system for {self.name!r}")
        stat = getattr(self.fsys, "stat", None)
        if callable(stat):
            return stat(self.name)
        with self.fsys.open(self.name) as f:
            return os.fstat(f.fileno())

    def __str__(self) -> str:
        return self.full_name()