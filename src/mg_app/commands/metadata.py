# src/mg_app/commands/metadata.py
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mg_app.commands.common import fail
from mg_app.core.errors import MgAppError
from mg_app.modules.metadata.service import IPTC_FIELDS, MetadataService

app = typer.Typer(help="Read IPTC metadata from photos")


@app.command("show", help="Print the IPTC metadata of a GIF, JPEG or TIFF file.")
def show_metadata_cmd(
    path: Path = typer.Argument(..., exists=False, dir_okay=False),
    raw: bool = typer.Option(False, "--raw", help="Also print every dataset found."),
):
    console = Console()
    try:
        meta = MetadataService().extract(path)
    except MgAppError as err:
        fail(console, err)

    if meta.is_empty:
        console.print(f"No IPTC metadata in {meta.path}", style="yellow")
        return

    table = Table(title=f"IPTC: {Path(meta.path).name}", show_lines=False)
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    for name in IPTC_FIELDS.values():
        value = getattr(meta, name)
        if value:
            table.add_row(name, ", ".join(value) if isinstance(value, list) else value)
    console.print(table)

    if raw:
        raw_table = Table(title="Raw datasets", show_lines=False)
        raw_table.add_column("Dataset")
        raw_table.add_column("Values", overflow="fold")
        for key, values in meta.raw.items():
            raw_table.add_row(key, " | ".join(values))
        console.print(raw_table)
