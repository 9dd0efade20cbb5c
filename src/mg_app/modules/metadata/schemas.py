# src/mg_app/modules/metadata/schemas.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from mg_app.core.media_types import MediaKind


class MetadataRequest(BaseModel):
    path: str = Field(
        ...,
        description="File to read IPTC metadata from. Must be a GIF, JPEG or TIFF.",
        examples=["/data/gallery/album/IMG_0001.jpg"],
    )


class IptcMetadata(BaseModel):
    path: str
    kind: MediaKind
    object_name: Optional[str] = None  # noqa: UP045
    urgency: Optional[str] = None  # noqa: UP045
    category: Optional[str] = None  # noqa: UP045
    supplemental_categories: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    special_instructions: Optional[str] = None  # noqa: UP045
    date_created: Optional[str] = None  # noqa: UP045
    byline: Optional[str] = None  # noqa: UP045
    byline_title: Optional[str] = None  # noqa: UP045
    city: Optional[str] = None  # noqa: UP045
    province_state: Optional[str] = None  # noqa: UP045
    country: Optional[str] = None  # noqa: UP045
    headline: Optional[str] = None  # noqa: UP045
    credit: Optional[str] = None  # noqa: UP045
    source: Optional[str] = None  # noqa: UP045
    copyright_notice: Optional[str] = None  # noqa: UP045
    caption: Optional[str] = None  # noqa: UP045
    writer: Optional[str] = None  # noqa: UP045
    raw: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Every dataset found, keyed `record:dataset`.",
        examples=[{"2:120": ["Sunset over the harbour"]}],
    )

    @property
    def is_empty(self) -> bool:
        return not self.raw
