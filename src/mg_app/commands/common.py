# src/mg_app/commands/common.py
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from mg_app.core.errors import MgAppError
from mg_app.modules.classify.schemas import MediaCapabilities


def resolve_dry_run(apply: bool, plan: bool) -> bool:
    """
    Standardize dry-run across commands.
    - default: dry-run (plan)
    - --apply => not dry-run
    - --plan  => force dry-run
    - both    => error
    """
    if apply and plan:
        raise typer.BadParameter("Use either --apply or --plan, not both.")
    return (not apply) or plan


def prompt_existing_dir(maybe_root: Path | None, prompt_label: str = "root") -> Path:
    root = maybe_root or Path(typer.prompt(f"{prompt_label} (folder)")).expanduser()
    if not root.exists() or not root.is_dir():
        raise typer.BadParameter(
            f"{prompt_label} does not exist or is not a directory: {root}"
        )
    return root


def fail(console: Console, err: MgAppError) -> None:
    """Print an application error and exit non-zero."""
    console.print(f"{err.__class__.__name__}: {err}", style="bold red")
    raise typer.Exit(code=1)


def capability_flags(caps: MediaCapabilities) -> str:
    flags = [
        name
        for name, on in (
            ("photo", caps.is_photo),
            ("video", caps.is_video),
            ("sound", caps.is_sound),
            ("readable", caps.readable_photo),
            ("previewable", caps.previewable_photo),
            ("iptc", caps.metadata_extraction),
        )
        if on
    ]
    return ", ".join(flags) or "-"
