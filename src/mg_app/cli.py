# src/mg_app/cli.py
from __future__ import annotations

import typer

from mg_app.commands.classify import app as classify_app
from mg_app.commands.metadata import app as metadata_app
from mg_app.commands.preview import app as preview_app
from mg_app.core.config import get_settings
from mg_app.core.logging import configure_logging

app = typer.Typer(help="Media Gallery CLI")

app.add_typer(classify_app, name="classify")
app.add_typer(metadata_app, name="metadata")
app.add_typer(preview_app, name="preview")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
):
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.LOG_LEVEL, json=settings.LOG_JSON)


if __name__ == "__main__":
    app()
