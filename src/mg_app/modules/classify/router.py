# src/mg_app/modules/classify/router.py
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter

from mg_app.core.errors import to_http

from .schemas import (
    ClassifyRequest,
    FolderScanRequest,
    FolderScanResponse,
    MediaCapabilities,
)
from .service import ClassifyService

router = APIRouter(prefix="/classify", tags=["classify"])


@router.post(
    path="",
    response_model=MediaCapabilities,
    summary="Classify a content type or file name",
    description=(
        "Resolves `content_type` (exact match, `image/pjpeg` treated as JPEG) or, when absent, "
        "the extension of `path` to a supported media kind and reports its capabilities. "
        "Unrecognized input is not an error: `recognized` is false and `kind` is null."
    ),
)
def classify(req: ClassifyRequest) -> MediaCapabilities:
    try:
        return ClassifyService().classify(content_type=req.content_type, path=req.path)
    except Exception as err:
        raise to_http(err) from err


@router.post(
    path="/folder",
    response_model=FolderScanResponse,
    summary="Classify every file under a folder",
    description=(
        "Scans `root` (recursively unless `recurse` is false), classifies each file by extension "
        "and returns per-kind counts. Counts always include unrecognized files; "
        "`only_recognized` filters `items` only."
    ),
)
def classify_folder(req: FolderScanRequest) -> FolderScanResponse:
    try:
        svc = ClassifyService()
        items = svc.scan(Path(req.root), recurse=req.recurse)
        counts = svc.summarize(items)
        recognized = [i for i in items if i.capabilities.recognized]
        return FolderScanResponse(
            root=str(Path(req.root).resolve()),
            total=len(items),
            recognized=len(recognized),
            counts=counts,
            items=recognized if req.only_recognized else items,
        )
    except Exception as err:
        raise to_http(err) from err
