# src/mg_app/modules/metadata/router.py
from fastapi import APIRouter

from mg_app.core.errors import to_http

from .schemas import IptcMetadata, MetadataRequest
from .service import MetadataService

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.post(
    path="",
    response_model=IptcMetadata,
    summary="Read IPTC metadata from a photo",
    description=(
        "Only GIF, JPEG and TIFF files can carry IPTC metadata; other media yields 415. "
        "A capable file without an IPTC block returns an empty `raw` mapping."
    ),
)
def read_metadata(req: MetadataRequest) -> IptcMetadata:
    try:
        return MetadataService().extract(req.path)
    except Exception as err:
        raise to_http(err) from err
