# src/mg_app/core/media_types.py
"""
Supported gallery media kinds and the content-type classifier.

Classification never raises: anything that cannot be resolved to a supported
kind comes back as ``None`` and callers decide whether that is an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from types import MappingProxyType

from mg_app.core.file_types import PLATFORM_FILE_TYPES, FileTypeTable


class MediaKind(str, Enum):
    BMP = "bmp"
    GIF = "gif"
    PNG = "png"
    JPG = "jpg"
    TIFF = "tiff"
    MP4 = "mp4"
    FLV = "flv"
    MP3 = "mp3"

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self]


PHOTOS: frozenset[MediaKind] = frozenset(
    {MediaKind.BMP, MediaKind.GIF, MediaKind.PNG, MediaKind.JPG, MediaKind.TIFF}
)
VIDEOS: frozenset[MediaKind] = frozenset({MediaKind.MP4, MediaKind.FLV})
SOUNDS: frozenset[MediaKind] = frozenset({MediaKind.MP3})
ALL_VALID: frozenset[MediaKind] = frozenset(MediaKind)

_READABLE_PHOTOS = frozenset({MediaKind.GIF, MediaKind.JPG, MediaKind.PNG, MediaKind.BMP})
_IPTC_CAPABLE = frozenset({MediaKind.GIF, MediaKind.JPG, MediaKind.TIFF})

# Uploads from old IE clients declare progressive JPEGs this way.
LEGACY_JPEG_CONTENT_TYPE = "image/pjpeg"

# Built once at import from the platform table; read-only afterwards.
_CONTENT_TYPES = MappingProxyType(
    {kind: PLATFORM_FILE_TYPES.content_type_of(f"file.{kind.value}") for kind in MediaKind}
)


def content_types() -> Mapping[MediaKind, str]:
    return _CONTENT_TYPES


def classify_content_type(content_type: str | None) -> MediaKind | None:
    """Exact, case-sensitive match against each kind's content type."""
    if not content_type:
        return None
    if content_type == LEGACY_JPEG_CONTENT_TYPE:
        return MediaKind.JPG
    for kind in MediaKind:
        if _CONTENT_TYPES[kind] == content_type:
            return kind
    return None


def classify_path(
    path: str | PurePath | None, table: FileTypeTable | None = None
) -> MediaKind | None:
    """Classify a file from its extension through the file-type table."""
    if path is None:
        return None
    return classify_content_type((table or PLATFORM_FILE_TYPES).content_type_of(path))


def is_photo(kind: MediaKind | None) -> bool:
    return kind in PHOTOS


def is_video(kind: MediaKind | None) -> bool:
    return kind in VIDEOS


def is_sound(kind: MediaKind | None) -> bool:
    return kind in SOUNDS


def is_readable_photo(kind: MediaKind | None) -> bool:
    """Photo kinds Pillow can decode for processing. TIFF is left out."""
    return kind in _READABLE_PHOTOS


def is_previewable_photo(kind: MediaKind | None) -> bool:
    """Photo kinds the gallery renders previews for."""
    return is_readable_photo(kind)


def supports_metadata_extraction(kind: MediaKind | None) -> bool:
    """Kinds that can carry IPTC metadata."""
    return kind in _IPTC_CAPABLE
