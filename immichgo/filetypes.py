"""Media types known by file extension."""

from __future__ import annotations

TYPE_VIDEO = "video"
TYPE_IMAGE = "image"
TYPE_SIDECAR = "sidecar"
TYPE_USELESS = "useless"
TYPE_UNKNOWN = ""

_VIDEO_EXTENSIONS = (
    ".3gp", ".avi", ".flv", ".insv", ".m2ts", ".m4v", ".mkv", ".mov",
    ".mp4", ".mpg", ".mts", ".webm", ".wmv",
)

_IMAGE_EXTENSIONS = (
    ".3fr", ".ari", ".arw", ".avif", ".bmp", ".cap", ".cin", ".cr2", ".cr3",
    ".crw", ".dcr", ".dng", ".erf", ".fff", ".gif", ".heic", ".heif", ".hif",
    ".iiq", ".insp", ".jpe", ".jpeg", ".jpg", ".jxl", ".k25", ".kdc", ".mrw",
    ".nef", ".orf", ".ori", ".pef", ".png", ".psd", ".raf", ".raw", ".rw2",
    ".rwl", ".sr2", ".srf", ".srw", ".tif", ".tiff", ".webp", ".x3f",
)

RAW_EXTENSIONS = frozenset(
    {
        ".3fr", ".ari", ".arw", ".cap", ".cin", ".cr2", ".cr3", ".crw",
        ".dcr", ".dng", ".erf", ".fff", ".iiq", ".k25", ".kdc", ".mrw",
        ".nef", ".nrw", ".orf", ".ori", ".pef", ".psd", ".raf", ".raw",
        ".rw2", ".rwl", ".sr2", ".srf", ".srw", ".x3f",
    }
)


def _path_ext(name: str) -> str:
    """Return the extension of the last slash-separated element, dot included."""
    last = name.rsplit("/", 1)[-1]
    pos = last.rfind(".")
    return last[pos:] if pos >= 0 else ""


class SupportedMedia(dict):
    """Mapping of lower-case extensions (with dot) to a media type."""

    def type_from_name(self, name: str) -> str:
        pos = name.rfind(".")
        if pos < 0:
            raise ValueError(f"no extension in file name: {name!r}")
        return self.type_from_ext(name[pos:])

    def type_from_ext(self, ext: str) -> str:
        ext = ext.lower()
        if ext.startswith(".mp~"):
            ext = ".mp"
        return self.get(ext, TYPE_UNKNOWN)

    def is_media(self, ext: str) -> bool:
        return self.type_from_ext(ext) in (TYPE_VIDEO, TYPE_IMAGE)

    def is_extension_prefix(self, ext: str) -> bool:
        prefixes = {key[:-2] for key in self}
        return ext.lower() in prefixes

    def is_ignored_ext(self, ext: str) -> bool:
        return self.type_from_ext(ext) == TYPE_UNKNOWN

    def is_useless(self, name: str) -> bool:
        ext = _path_ext(name).lower()
        if self.is_ignored_ext(ext):
            return True
        # MVIMG* is the movie part of a motion photo
        is_video_part = ext == "" or self.type_from_ext(ext) == TYPE_VIDEO
        return is_video_part and name.upper().startswith("MVIMG")


DEFAULT_SUPPORTED_MEDIA = SupportedMedia(
    {
        **{ext: TYPE_VIDEO for ext in _VIDEO_EXTENSIONS},
        **{ext: TYPE_IMAGE for ext in _IMAGE_EXTENSIONS},
        ".xmp": TYPE_SIDECAR,
        ".json": TYPE_SIDECAR,
        ".mp": TYPE_USELESS,
    }
)


def is_raw_file(ext: str) -> bool:
    """Tell whether the extension is a RAW image format."""
    return ext.lower() in RAW_EXTENSIONS