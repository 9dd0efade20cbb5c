# src/mg_app/modules/classify/schemas.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, DirectoryPath, Field

from mg_app.core.media_types import MediaKind


class ClassifyRequest(BaseModel):
    """
    Classify one input. An explicit `content_type` wins over `path`;
    with neither, the result is unrecognized.
    """

    content_type: Optional[str] = Field(  # noqa: UP045
        None,
        description="Declared content type, matched exactly (case-sensitive).",
        examples=["image/png"],
    )
    path: Optional[str] = Field(  # noqa: UP045
        None,
        description="File name or path; only its extension is used.",
        examples=["/data/gallery/album/IMG_0001.jpg"],
    )


class MediaCapabilities(BaseModel):
    kind: Optional[MediaKind] = Field(  # noqa: UP045
        None,
        description="Recognized media kind, or null when unrecognized.",
        examples=["png"],
    )
    recognized: bool = Field(..., examples=[True])
    content_type: Optional[str] = Field(  # noqa: UP045
        None,
        description=(
            "Canonical content type of the recognized kind. "
            "For unrecognized input, the resolved input content type if any."
        ),
        examples=["image/png"],
    )
    is_photo: bool = False
    is_video: bool = False
    is_sound: bool = False
    readable_photo: bool = Field(False, description="Decodable for image processing.")
    previewable_photo: bool = Field(False, description="Eligible for preview generation.")
    metadata_extraction: bool = Field(False, description="Can carry IPTC metadata.")


class FileClassification(BaseModel):
    path: str = Field(..., examples=["/data/gallery/album/IMG_0001.jpg"])
    capabilities: MediaCapabilities


class FolderScanRequest(BaseModel):
    root: DirectoryPath = Field(..., examples=["/data/gallery"])
    recurse: bool = Field(True, description="Scan subfolders recursively.")
    only_recognized: bool = Field(
        False, description="If true, leave unrecognized files out of `items`."
    )


class FolderScanResponse(BaseModel):
    root: str
    total: int = Field(..., ge=0, description="Number of files scanned.")
    recognized: int = Field(..., ge=0)
    counts: dict[str, int] = Field(
        default_factory=dict,
        description="Files per media kind, plus an `unrecognized` bucket.",
        examples=[{"jpg": 12, "mp4": 2, "unrecognized": 3}],
    )
    items: list[FileClassification] = Field(default_factory=list)
