# src/mg_app/modules/preview/router.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Query

from mg_app.api.deps import SettingsDep
from mg_app.core.errors import to_http

from .schemas import (
    MediaResolution,
    PreviewPair,
    PreviewRequest,
    PreviewResult,
    ResolvedMedia,
)
from .service import PreviewService

router = APIRouter(prefix="/preview", tags=["preview"])


def _service(req: PreviewRequest, settings) -> PreviewService:
    return PreviewService.from_settings(
        settings,
        media_root=Path(req.media_root) if req.media_root else None,
        preview_root=Path(req.preview_root) if req.preview_root else None,
        size=req.size,
        quality=req.quality,
        overwrite=req.overwrite,
        dry_run=req.dry_run,
    )


@router.post(
    path="/plan",
    response_model=list[PreviewPair],
    summary="List the previews that would be generated",
)
def plan(req: PreviewRequest, settings: SettingsDep) -> list[PreviewPair]:
    try:
        return [
            PreviewPair(src=str(src), dst=str(dst))
            for src, dst in _service(req, settings).plan()
        ]
    except Exception as err:
        raise to_http(err) from err


@router.post(
    path="/apply",
    response_model=list[PreviewResult],
    summary="Generate JPEG previews for previewable photos",
    description=(
        "Only photos the gallery can preview (GIF, JPEG, PNG, BMP) are rendered; TIFF is skipped. "
        "Respects `overwrite` (skip when the preview exists unless true). "
        "When `dry_run` is true, no files are written and the planned results are returned."
    ),
)
def apply(req: PreviewRequest, settings: SettingsDep) -> list[PreviewResult]:
    try:
        return [
            PreviewResult(src=str(src), dst=str(dst), generated=ok, reason=reason)
            for src, dst, ok, reason in _service(req, settings).apply()
        ]
    except Exception as err:
        raise to_http(err) from err


@router.get(
    path="/resolve",
    response_model=ResolvedMedia,
    summary="Resolve a media file to the physical file for a resolution",
    description=(
        "`path` is relative to the media root. `original` returns the uploaded file and its "
        "content type; `preview` returns the generated JPEG preview at `size`."
    ),
)
def resolve(
    settings: SettingsDep,
    path: str = Query(..., description="Media path relative to the media root."),
    resolution: MediaResolution = Query(MediaResolution.preview),
    size: Optional[str] = Query(None, pattern=r"^\d+x\d+$"),  # noqa: UP045
) -> ResolvedMedia:
    try:
        return PreviewService.from_settings(settings).resolve(path, resolution, size)
    except Exception as err:
        raise to_http(err) from err
