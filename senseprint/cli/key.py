"""CLI for printing discovery keys."""
from __future__ import annotations

from pathlib import Path

import typer

from senseprint.cli.common import load_result
from senseprint.fingerprint.discovery import compute_discovery_key

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Print the discovery key of a fingerprint.",
)


@app.callback()
def key(
    file: Path = typer.Option(..., "--file", exists=True, readable=True, path_type=Path, help="Fingerprint JSON"),
) -> None:
    """Print the discovery key for ``file``."""

    typer.echo(compute_discovery_key(load_result(file)))


__all__ = ["app", "key"]
