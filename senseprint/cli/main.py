"""Root CLI entry point for SensePrint."""
from __future__ import annotations

from typing import Optional

import typer

from senseprint.utils.logging import setup_logging

from . import compare as compare_cli
from . import generate as generate_cli
from . import key as key_cli
from . import matrix as matrix_cli

app = typer.Typer(add_completion=False, help="SensePrint command line interface")
app.add_typer(generate_cli.app, name="generate", help="Generate a fingerprint with the hosted model")
app.add_typer(compare_cli.app, name="compare", help="Compare two fingerprints")
app.add_typer(matrix_cli.app, name="matrix", help="Compare every pair of fingerprints")
app.add_typer(key_cli.app, name="key", help="Print a fingerprint's discovery key")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default $SENSEPRINT_LOG_LEVEL)"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="text or json"),
) -> None:
    """Configure logging before running a subcommand."""

    setup_logging(log_level, log_format)


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
