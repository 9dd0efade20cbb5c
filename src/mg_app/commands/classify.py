# src/mg_app/commands/classify.py
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mg_app.commands.common import capability_flags, fail, prompt_existing_dir
from mg_app.core.errors import MgAppError
from mg_app.core.rich_progress import make_phase_progress
from mg_app.modules.classify.schemas import FileClassification, MediaCapabilities
from mg_app.modules.classify.service import ClassifyService

app = typer.Typer(help="Classify files and content types into gallery media kinds")


def _render_rows(console: Console, title: str, rows: list[tuple[str, MediaCapabilities]]) -> None:
    table = Table(title=title, show_lines=False)
    table.add_column("Input", overflow="fold")
    table.add_column("Kind")
    table.add_column("Content type", overflow="fold")
    table.add_column("Capabilities", overflow="fold")
    for label, caps in rows:
        table.add_row(
            label,
            caps.kind.value if caps.kind else "unrecognized",
            caps.content_type or "",
            capability_flags(caps),
        )
    console.print(table)


@app.command("file", help="Classify files by their extension.")
def classify_file_cmd(
    paths: list[Path] = typer.Argument(..., help="File names or paths."),
):
    console = Console()
    svc = ClassifyService()
    rows = [(str(p), svc.classify(path=p)) for p in paths]
    _render_rows(console, "Media kinds", rows)


@app.command("type", help="Classify declared content types (exact match).")
def classify_type_cmd(
    content_types: list[str] = typer.Argument(..., help="Content types, e.g. image/png."),
):
    console = Console()
    svc = ClassifyService()
    rows = [(ct, svc.classify(content_type=ct)) for ct in content_types]
    _render_rows(console, "Media kinds", rows)


@app.command("scan", help="Classify every file under a folder and summarize per kind.")
def classify_scan_cmd(
    root: Path | None = typer.Argument(
        None, exists=False, file_okay=False, dir_okay=True
    ),
    recurse: bool = typer.Option(True, "--recurse/--no-recurse", help="Scan subfolders."),
    only_recognized: bool = typer.Option(
        False, "--only-recognized", help="List recognized files only."
    ),
    details: bool = typer.Option(False, "--details", help="Print one row per file."),
):
    console = Console()
    root = prompt_existing_dir(root, "root")
    svc = ClassifyService()

    progress, reporter = make_phase_progress(console)
    try:
        with progress:
            items: list[FileClassification] = svc.scan(
                root, recurse=recurse, reporter=reporter
            )
    except MgAppError as err:
        fail(console, err)

    counts = svc.summarize(items)
    if details:
        listed = [i for i in items if i.capabilities.recognized or not only_recognized]
        _render_rows(console, "Files", [(i.path, i.capabilities) for i in listed])

    summary = Table(title="Summary", show_lines=False)
    summary.add_column("Kind")
    summary.add_column("Files", justify="right")
    for kind, n in counts.items():
        summary.add_row(kind, str(n))
    console.print(summary)

    recognized = sum(1 for i in items if i.capabilities.recognized)
    console.print(
        f"Scanned {len(items)} file(s), {recognized} recognized.", style="bold green"
    )
