"""Keep the content of a stream in a file so that it can be read many times."""

from __future__ import annotations

import io
import logging
import os
import shutil
import sys
import tempfile
from typing import BinaryIO

_log = logging.getLogger(__name__)

_OS_FILE_TYPES = (io.FileIO, io.BufferedReader, io.BufferedRandom, io.BufferedWriter)


def _user_cache_dir() -> str:
    if sys.platform == "win32":
        d = os.environ.get("LOCALAPPDATA")
        if not d:
            raise OSError("LOCALAPPDATA is not defined")
        return d
    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Caches")
    d = os.environ.get("XDG_CACHE_HOME")
    if d:
        return d
    home = os.path.expanduser("~")
    if home == "~":
        raise OSError("no home directory")
    return os.path.join(home, ".cache")


def _temp_dir() -> str:
    d = os.environ.get("IMMICHGO_TEMPDIR", "")
    if not d:
        try:
            d = _user_cache_dir()
        except OSError:
            d = tempfile.gettempdir()
    d = os.path.join(d, "immich-go", "temp")
    try:
        os.makedirs(d, mode=0o700, exist_ok=True)
    except OSError:
        d = tempfile.gettempdir()
    return d


def _is_os_file(source: object) -> bool:
    name = getattr(source, "name", None)
    return (
        isinstance(source, _OS_FILE_TYPES)
        and isinstance(name, str)
        and os.path.isfile(name)
    )


class CacheReader:
    """The content of a stream, kept in a file.

    A file of the operating system is used as it is; any other stream is
    copied into a temporary file and closed. The temporary file is removed
    by close().
    """

    def __init__(self, name: str, source: BinaryIO) -> None:
        self.label = name
        self._should_remove = False
        if _is_os_file(source):
            self._file: BinaryIO = source
            self.name: str = source.name  # type: ignore[attr-defined]
            return

        fd, path = tempfile.mkstemp(prefix="immich-go_", dir=_temp_dir())
        tmp = os.fdopen(fd, "w+b")
        try:
            shutil.copyfileobj(source, tmp)
            tmp.flush()
        except BaseException:
            tmp.close()
            try:
                os.remove(path)
            except OSError:
                pass
            raise
        source.close()
        self._file = tmp
        self.name = path
        self._should_remove = True

    def open_file(self) -> BinaryIO:
        """Open a new independent reader on the cached content."""
        return open(self.name, "rb")

    def close(self) -> None:
        """Close the file, and remove it when it is a temporary one."""
        self._file.close()
        if self._should_remove:
            _log.debug("CacheReader: remove temporary file %s", self.name)
            os.remove(self.name)
            self._should_remove = False

    def __enter__(self) -> CacheReader:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()