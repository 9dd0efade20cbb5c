# src/mg_app/modules/metadata/service.py
from __future__ import annotations

from pathlib import Path

from PIL import Image, IptcImagePlugin, UnidentifiedImageError

from mg_app.core.errors import BadRequest, NotFound, UnsupportedMedia
from mg_app.core.file_types import FileTypeTable, get_file_types
from mg_app.core.logging import get_logger
from mg_app.core.media_types import classify_path, supports_metadata_extraction

from .schemas import IptcMetadata

log = get_logger(__name__)

# IPTC-IIM application record (2) datasets we expose by name.
IPTC_FIELDS: dict[tuple[int, int], str] = {
    (2, 5): "object_name",
    (2, 10): "urgency",
    (2, 15): "category",
    (2, 20): "supplemental_categories",
    (2, 25): "keywords",
    (2, 40): "special_instructions",
    (2, 55): "date_created",
    (2, 80): "byline",
    (2, 85): "byline_title",
    (2, 90): "city",
    (2, 95): "province_state",
    (2, 101): "country",
    (2, 105): "headline",
    (2, 110): "credit",
    (2, 115): "source",
    (2, 116): "copyright_notice",
    (2, 120): "caption",
    (2, 122): "writer",
}
REPEATABLE = {"keywords", "supplemental_categories"}


def _decode(value: bytes | list[bytes] | None) -> list[str]:
    if value is None:
        return []
    values = value if isinstance(value, list) else [value]
    return [v.decode("utf-8", errors="replace").strip("\x00 ") for v in values if v is not None]


class MetadataService:
    """Reads IPTC metadata from metadata-capable media files."""

    def __init__(self, table: FileTypeTable | None = None) -> None:
        self.table = table or get_file_types()

    @staticmethod
    def _read_iptc(path: Path) -> dict[tuple[int, int], bytes | list[bytes]]:
        try:
            with Image.open(path) as im:
                return IptcImagePlugin.getiptcinfo(im) or {}
        except UnidentifiedImageError as err:
            raise BadRequest(f"cannot decode image: {path}") from err
        except SyntaxError:
            # Pillow signals a malformed IPTC block this way
            log.warning("malformed IPTC block in %s", path)
            return {}

    def extract(self, path: str | Path) -> IptcMetadata:
        p = Path(path).expanduser()
        if not p.is_file():
            raise NotFound(f"file not found: {p}")

        kind = classify_path(p, self.table)
        if not supports_metadata_extraction(kind):
            raise UnsupportedMedia(
                f"{p.name}: {kind.value if kind else 'unrecognized'} media does not carry IPTC metadata"
            )

        info = self._read_iptc(p)
        fields: dict[str, object] = {}
        raw: dict[str, list[str]] = {}
        for (record, dataset), value in sorted(info.items()):
            decoded = _decode(value)
            raw[f"{record}:{dataset}"] = decoded
            name = IPTC_FIELDS.get((record, dataset))
            if name is None or not decoded:
                continue
            fields[name] = decoded if name in REPEATABLE else decoded[0]

        return IptcMetadata(path=str(p.resolve()), kind=kind, raw=raw, **fields)
