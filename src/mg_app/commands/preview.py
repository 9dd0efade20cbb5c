# src/mg_app/commands/preview.py
from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mg_app.commands.common import fail, prompt_existing_dir, resolve_dry_run
from mg_app.core.config import get_settings
from mg_app.core.errors import MgAppError
from mg_app.core.rich_progress import make_phase_progress
from mg_app.modules.preview.schemas import MediaResolution
from mg_app.modules.preview.service import PreviewService

app = typer.Typer(help="Generate and resolve photo previews")


class _PreviewRunner:
    def __init__(
        self,
        media_root: Path,
        preview_root: Path | None,
        size: str | None,
        quality: int | None,
        overwrite: bool | None,
        dry_run: bool,
    ) -> None:
        self.media_root = media_root
        self.preview_root = preview_root
        self.size = size
        self.quality = quality
        self.overwrite = overwrite
        self.dry_run = dry_run
        self.console = Console()

    def _build_service(self, dry_run: bool) -> PreviewService:
        return PreviewService.from_settings(
            get_settings(),
            media_root=self.media_root,
            preview_root=self.preview_root,
            size=self.size,
            quality=self.quality,
            overwrite=self.overwrite,
            dry_run=dry_run,
        )

    def run(self) -> None:
        svc = self._build_service(self.dry_run)

        progress, reporter = make_phase_progress(self.console)
        with progress:
            pairs = svc.plan(reporter=reporter)
        total = len(pairs)
        if total == 0:
            typer.echo("No previewable photos found.")
            return

        for src, dst in pairs:
            typer.echo(f"{src} -> {dst}")
        typer.echo(f"[PLAN] Would render {total} preview(s).")

        do_apply = (not self.dry_run) or typer.confirm(
            "Render these previews now?", default=False
        )
        if not do_apply:
            return

        if self.dry_run:
            svc = self._build_service(dry_run=False)

        progress2, reporter2 = make_phase_progress(self.console)
        t0 = time.perf_counter()
        with progress2:
            results = svc.apply(reporter=reporter2)

        generated = sum(1 for _s, _d, ok, _r in results if ok)
        skipped = len(results) - generated
        elapsed = time.perf_counter() - t0

        skipped_rows = [(s, r) for s, _d, ok, r in results if not ok]
        if skipped_rows:
            table = Table(title="Skipped files", show_lines=False)
            table.add_column("Source", overflow="fold")
            table.add_column("Reason", overflow="fold")
            for s, reason in skipped_rows:
                table.add_row(str(s), reason or "")
            self.console.print(table)

        self.console.print(
            f"Rendered {generated} preview(s), skipped {skipped} out of {len(results)} in {elapsed:.2f}s.",
            style="bold green",
        )


@app.command("generate", help="Render JPEG previews for every previewable photo.")
def generate_cmd(
    media_root: Path | None = typer.Argument(
        None, exists=False, file_okay=False, dir_okay=True
    ),
    preview_root: Path | None = typer.Option(
        None, "--preview-root", "-d", help="Destination root (MG_PREVIEW_ROOT if omitted)."
    ),
    size: str | None = typer.Option(None, "--size", "-s", help="Bounding box WxH."),
    quality: int | None = typer.Option(
        None, "--quality", "-q", min=1, max=100, help="JPEG quality."
    ),
    overwrite: bool | None = typer.Option(
        None,
        "--overwrite/--no-overwrite",
        help="Regenerate existing previews (MG_OVERWRITE if omitted).",
    ),
    apply: bool = typer.Option(False, "--apply", help="Perform writes."),
    plan: bool = typer.Option(False, "--plan", help="Plan only (default)."),
):
    media_root = prompt_existing_dir(media_root, "media root")
    dry_run = resolve_dry_run(apply, plan)
    runner = _PreviewRunner(
        media_root=media_root,
        preview_root=preview_root,
        size=size,
        quality=quality,
        overwrite=overwrite,
        dry_run=dry_run,
    )
    try:
        runner.run()
    except MgAppError as err:
        fail(runner.console, err)


@app.command("resolve", help="Show the physical file and content type for a media resolution.")
def resolve_cmd(
    path: str = typer.Argument(..., help="Media path relative to the media root."),
    resolution: MediaResolution = typer.Option(
        MediaResolution.preview, "--resolution", "-r", case_sensitive=False
    ),
    size: str | None = typer.Option(None, "--size", "-s", help="Preview size WxH."),
    media_root: Path | None = typer.Option(None, "--media-root"),
    preview_root: Path | None = typer.Option(None, "--preview-root"),
):
    console = Console()
    try:
        svc = PreviewService.from_settings(
            get_settings(), media_root=media_root, preview_root=preview_root
        )
        resolved = svc.resolve(path, resolution, size)
    except MgAppError as err:
        fail(console, err)

    console.print(f"{resolved.path}")
    console.print(f"content-type: {resolved.content_type}", style="bold")
