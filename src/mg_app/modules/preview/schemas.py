# src/mg_app/modules/preview/schemas.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, DirectoryPath, Field

from mg_app.core.media_types import MediaKind


class MediaResolution(str, Enum):
    original = "original"
    preview = "preview"


class PreviewRequest(BaseModel):
    """
    Generate JPEG previews for every previewable photo under media_root,
    mirroring the directory structure under preview_root.
    """

    media_root: Optional[DirectoryPath] = Field(  # noqa: UP045
        None,
        description="Gallery media root. Defaults to MG_MEDIA_ROOT.",
        examples=["/data/gallery"],
    )
    preview_root: Optional[str] = Field(  # noqa: UP045
        None,
        description="Where previews are written. Defaults to MG_PREVIEW_ROOT.",
        examples=["/data/previews"],
    )
    size: Optional[str] = Field(  # noqa: UP045
        None,
        pattern=r"^\d+x\d+$",
        description="Bounding box `WxH`. Defaults to MG_PREVIEW_SIZE.",
        examples=["600x400"],
    )
    quality: Optional[int] = Field(  # noqa: UP045
        None, ge=1, le=100, description="JPEG quality (1–100).", examples=[85]
    )
    overwrite: Optional[bool] = Field(  # noqa: UP045
        None,
        description="If true, regenerate previews that already exist. Defaults to MG_OVERWRITE.",
        examples=[False],
    )
    dry_run: Optional[bool] = Field(  # noqa: UP045
        None,
        description=(
            "If true, only report planned previews (no files are written). "
            "Defaults to MG_DRY_RUN_DEFAULT."
        ),
        examples=[True],
    )


class PreviewPair(BaseModel):
    src: str = Field(..., examples=["/data/gallery/album/IMG_0001.jpg"])
    dst: str = Field(..., examples=["/data/previews/album/IMG_0001.jpg_600x400.jpeg"])


class PreviewResult(PreviewPair):
    generated: bool = Field(
        ...,
        description=(
            "True if the preview was written (or would be, when dry_run=true). "
            "False if it was skipped."
        ),
        examples=[True],
    )
    reason: Optional[str] = Field(  # noqa: UP045
        None,
        description=(
            "Why a file was skipped or the status: `exists`, `dry_run`, "
            "`error:<ExceptionName>`. Null when the preview was written."
        ),
        examples=[None],
    )


class ResolvedMedia(BaseModel):
    path: str = Field(..., description="Physical file to read.")
    content_type: str = Field(..., examples=["image/jpeg"])
    resolution: MediaResolution
    kind: MediaKind = Field(..., description="Kind of the original media.")
