# src/mg_app/modules/classify/service.py
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

from mg_app.core.errors import BadRequest
from mg_app.core.file_types import FileTypeTable, get_file_types
from mg_app.core.logging import get_logger
from mg_app.core.media_types import (
    MediaKind,
    classify_content_type,
    classify_path,
    is_photo,
    is_previewable_photo,
    is_readable_photo,
    is_sound,
    is_video,
    supports_metadata_extraction,
)
from mg_app.core.progress import ProgressReporter

from .schemas import FileClassification, MediaCapabilities

log = get_logger(__name__)

UNRECOGNIZED_BUCKET = "unrecognized"


class ClassifyService:
    """Classification of single inputs and whole folder trees."""

    def __init__(self, table: FileTypeTable | None = None) -> None:
        self.table = table or get_file_types()

    # ---- single input -------------------------------------------------------

    @staticmethod
    def describe(kind: MediaKind | None, content_type: str | None = None) -> MediaCapabilities:
        return MediaCapabilities(
            kind=kind,
            recognized=kind is not None,
            content_type=kind.content_type if kind is not None else (content_type or None),
            is_photo=is_photo(kind),
            is_video=is_video(kind),
            is_sound=is_sound(kind),
            readable_photo=is_readable_photo(kind),
            previewable_photo=is_previewable_photo(kind),
            metadata_extraction=supports_metadata_extraction(kind),
        )

    def classify(
        self, content_type: str | None = None, path: str | Path | None = None
    ) -> MediaCapabilities:
        if content_type:
            return self.describe(classify_content_type(content_type), content_type)
        if path is not None:
            resolved = self.table.content_type_of(path)
            return self.describe(classify_path(path, self.table), resolved)
        return self.describe(None)

    # ---- folder scan --------------------------------------------------------

    @staticmethod
    def _iter_files(root: Path, recurse: bool) -> Iterator[Path]:
        it = root.rglob("*") if recurse else root.iterdir()
        return (p for p in it if p.is_file())

    def scan(
        self,
        root: Path,
        recurse: bool = True,
        only_recognized: bool = False,
        reporter: ProgressReporter | None = None,
    ) -> list[FileClassification]:
        root = Path(root).expanduser().resolve()
        if not root.is_dir():
            raise BadRequest(f"root does not exist or is not a directory: {root}")

        if reporter:
            reporter.start("scan", total=None, text="Discovering files…")
        files: list[Path] = []
        for p in self._iter_files(root, recurse):
            files.append(p)
            if reporter:
                reporter.update("scan", 1, text=p.name)
        if reporter:
            reporter.end("scan")

        files.sort()
        items: list[FileClassification] = []
        if reporter:
            reporter.start("classify", total=len(files))
        for p in files:
            caps = self.classify(path=p)
            if caps.recognized or not only_recognized:
                items.append(FileClassification(path=str(p), capabilities=caps))
            if reporter:
                reporter.update("classify", 1, text=p.name)
        if reporter:
            reporter.end("classify")

        log.debug("classified %d file(s) under %s", len(files), root)
        return items

    @staticmethod
    def summarize(items: Iterable[FileClassification]) -> dict[str, int]:
        """Files per kind value, plus the `unrecognized` bucket."""
        counts: Counter[str] = Counter()
        for item in items:
            kind = item.capabilities.kind
            counts[kind.value if kind is not None else UNRECOGNIZED_BUCKET] += 1
        return dict(sorted(counts.items()))
