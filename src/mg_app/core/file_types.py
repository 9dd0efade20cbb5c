# src/mg_app/core/file_types.py
from __future__ import annotations

import mimetypes
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path, PurePath
from types import MappingProxyType

from mg_app.core.config import get_settings

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Platform file-type table. Keys are lower-case extensions with the leading dot.
_PLATFORM_TYPES: dict[str, str] = {
    # Images
    ".bmp": "image/bmp",
    ".gif": "image/gif",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".jpe": "image/jpeg",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".svg": "image/svg+xml",
    # Videos
    ".mp4": "video/mp4",
    ".m4v": "video/mp4",
    ".flv": "video/x-flv",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".webm": "video/webm",
    # Audio
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".m4a": "audio/mp4",
    # Documents
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".html": "text/html",
    ".htm": "text/html",
    ".zip": "application/zip",
}


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


class FileTypeTable:
    """
    Extension -> content type lookup.

    Instances are immutable; `with_extra` derives a new table.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = MappingProxyType(
            {_normalize_ext(ext): ctype for ext, ctype in entries.items()}
        )

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def content_type_of(self, path: str | PurePath) -> str:
        """
        Content type for a file name or path, resolved from its extension.
        Falls back to the `mimetypes` database, then to application/octet-stream.
        """
        name = PurePath(path).name
        ctype = self._entries.get(PurePath(name).suffix.lower())
        if ctype:
            return ctype
        guessed, _ = mimetypes.guess_type(name, strict=False)
        return guessed or DEFAULT_CONTENT_TYPE

    def extensions_for(self, content_type: str) -> list[str]:
        return sorted(ext for ext, ctype in self._entries.items() if ctype == content_type)

    def with_extra(self, extra: Mapping[str, str] | None) -> FileTypeTable:
        if not extra:
            return self
        merged = dict(self._entries)
        merged.update({_normalize_ext(ext): ctype for ext, ctype in extra.items()})
        return FileTypeTable(merged)

    def __contains__(self, ext: object) -> bool:
        return isinstance(ext, str) and _normalize_ext(ext) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


PLATFORM_FILE_TYPES = FileTypeTable(_PLATFORM_TYPES)


def content_type_of(path: str | Path) -> str:
    """Module-level shortcut over the default platform table."""
    return PLATFORM_FILE_TYPES.content_type_of(path)


@lru_cache(maxsize=1)
def get_file_types() -> FileTypeTable:
    """
    Platform table extended with `MG_EXTRA_MIME_TYPES`. Cached for the process.
    """
    return PLATFORM_FILE_TYPES.with_extra(get_settings().EXTRA_MIME_TYPES)
