# src/mg_app/modules/preview/service.py
from __future__ import annotations

import re
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from PIL import Image, ImageOps

from mg_app.core.config import Settings, get_settings
from mg_app.core.errors import BadRequest, NotFound, UnsupportedMedia
from mg_app.core.file_types import FileTypeTable, get_file_types
from mg_app.core.logging import get_logger
from mg_app.core.media_types import MediaKind, classify_path, is_previewable_photo
from mg_app.core.paths import ensure_within_root, mirrored_output_path, sanitize_filename
from mg_app.core.progress import ProgressReporter, get_worker_count

from .schemas import MediaResolution, ResolvedMedia

log = get_logger(__name__)

SIZE_RE = re.compile(r"^(\d+)x(\d+)$")
PREVIEW_SUFFIX = ".jpeg"


def parse_size(token: str) -> tuple[int, int]:
    """Parse a `WxH` size token."""
    m = SIZE_RE.match((token or "").strip().lower())
    if not m:
        raise BadRequest(f"invalid size token {token!r}; expected WxH, e.g. 600x400")
    width, height = int(m.group(1)), int(m.group(2))
    if width <= 0 or height <= 0:
        raise BadRequest(f"invalid size token {token!r}; dimensions must be positive")
    return width, height


def size_token(size: str) -> str:
    """Canonical `WxH` form of a size token, used in preview file names."""
    width, height = parse_size(size)
    return f"{width}x{height}"


class PreviewService:
    """
    Plan + parallel apply preview generation for previewable photos, and
    resolution of a media file to its original or preview rendition.
    """

    def __init__(
        self,
        media_root: Path,
        preview_root: Path,
        size: str = "600x400",
        quality: int = 85,
        overwrite: bool = False,
        dry_run: bool = True,
        table: FileTypeTable | None = None,
    ) -> None:
        self.media_root = Path(media_root).expanduser().resolve()
        self.preview_root = Path(preview_root).expanduser().resolve()
        self.size = size_token(size)
        self.dimensions = parse_size(size)
        self.quality = quality
        self.overwrite = overwrite
        self.dry_run = dry_run
        self.table = table or get_file_types()

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> PreviewService:
        s = settings or get_settings()
        opts = {
            "media_root": s.MEDIA_ROOT,
            "preview_root": s.PREVIEW_ROOT,
            "size": s.PREVIEW_SIZE,
            "quality": s.PREVIEW_QUALITY,
            "overwrite": s.OVERWRITE,
            "dry_run": s.DRY_RUN_DEFAULT,
        }
        opts.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**opts)

    # ---------- naming ----------
    def preview_path(self, src: Path, size: str | None = None) -> Path:
        token = size_token(size or self.size)
        new_name = f"{sanitize_filename(src.name)}_{token}{PREVIEW_SUFFIX}"
        return mirrored_output_path(src, self.media_root, self.preview_root, new_name)

    # ---------- planning ----------
    def _iter_previewable(self, reporter: ProgressReporter | None = None) -> Iterator[Path]:
        for p in sorted(self.media_root.rglob("*")):
            if not p.is_file():
                continue
            if self.preview_root in p.parents:
                continue
            if reporter:
                reporter.update("scan", 1, text=p.name)
            if is_previewable_photo(classify_path(p, self.table)):
                yield p

    def plan(self, reporter: ProgressReporter | None = None) -> list[tuple[Path, Path]]:
        """Previews to generate as (src, dst) pairs."""
        if not self.media_root.is_dir():
            raise BadRequest(f"media root does not exist or is not a directory: {self.media_root}")
        if reporter:
            reporter.start("scan", total=None, text="Discovering photos…")
        pairs = [(src, self.preview_path(src)) for src in self._iter_previewable(reporter)]
        if reporter:
            reporter.end("scan")
        return pairs

    # ---------- single rendition ----------
    def _render(self, src: Path, dst: Path) -> tuple[bool, str | None]:
        if dst.exists() and not self.overwrite:
            return False, "exists"
        if self.dry_run:
            return True, "dry_run"

        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            with Image.open(src) as im:
                exif_bytes = im.info.get("exif")
                im = ImageOps.exif_transpose(im)

                if im.mode in ("RGBA", "LA", "P"):
                    im = im.convert("RGBA")
                    bg = Image.new("RGB", im.size, (255, 255, 255))
                    bg.paste(im, mask=im.split()[-1])
                    im = bg
                else:
                    im = im.convert("RGB")

                im.thumbnail(self.dimensions, Image.Resampling.LANCZOS)

                save_kwargs: dict[str, object] = {
                    "format": "JPEG",
                    "quality": self.quality,
                    "optimize": True,
                    "progressive": True,
                }
                if exif_bytes:
                    save_kwargs["exif"] = exif_bytes
                im.save(dst, **save_kwargs)
            return True, None
        except Exception as e:
            log.warning("preview failed for %s: %s", src, e)
            return False, f"error:{e.__class__.__name__}"

    # ---------- apply ----------
    def iter_apply(
        self, reporter: ProgressReporter | None = None
    ) -> Iterator[tuple[Path, Path, bool, str | None]]:
        pairs = self.plan(reporter=reporter)
        if reporter:
            reporter.start("render", total=len(pairs))
        if not pairs:
            if reporter:
                reporter.end("render")
            return

        workers = min(get_worker_count(io_bound=True), len(pairs))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {pool.submit(self._render, src, dst): (src, dst) for src, dst in pairs}
            for fut in as_completed(futures):
                src, dst = futures[fut]
                ok, reason = fut.result()
                if reporter:
                    reporter.update("render", 1, text=src.name)
                yield src, dst, ok, reason
        if reporter:
            reporter.end("render")

    def apply(
        self, reporter: ProgressReporter | None = None
    ) -> list[tuple[Path, Path, bool, str | None]]:
        results = list(self.iter_apply(reporter=reporter))
        results.sort(key=lambda r: r[0])
        generated = sum(1 for r in results if r[2])
        log.info("previews: %d generated, %d skipped", generated, len(results) - generated)
        return results

    # ---------- resolution ----------
    def resolve(
        self,
        relative_path: str | Path,
        resolution: MediaResolution = MediaResolution.preview,
        size: str | None = None,
    ) -> ResolvedMedia:
        """Physical file and content type for a media file at a resolution."""
        src = ensure_within_root(self.media_root / relative_path, self.media_root)
        if not src.is_file():
            raise NotFound(f"media not found: {relative_path}")

        kind = classify_path(src, self.table)
        if kind is None:
            raise UnsupportedMedia(f"unrecognized media: {relative_path}")

        if resolution == MediaResolution.original:
            return ResolvedMedia(
                path=str(src), content_type=kind.content_type, resolution=resolution, kind=kind
            )

        if not is_previewable_photo(kind):
            raise UnsupportedMedia(f"{kind.value} media has no preview: {relative_path}")
        dst = self.preview_path(src, size)
        if not dst.is_file():
            raise NotFound(f"preview not generated for {relative_path} at {size or self.size}")
        return ResolvedMedia(
            path=str(dst),
            content_type=MediaKind.JPG.content_type,
            resolution=resolution,
            kind=kind,
        )
