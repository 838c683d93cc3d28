"""CLI for generating fingerprints through the hosted model."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from senseprint.fingerprint.discovery import compute_discovery_key
from senseprint.generator.client import GenerationError, generate_fingerprint
from senseprint.generator.config import GeneratorConfigError, load_generator_config
from senseprint.utils.io import write_json

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Generate a fingerprint for a word or definition.",
)


@app.callback()
def generate(
    definition: str = typer.Option(..., "--definition", help="Word or definition to fingerprint"),
    out: Path = typer.Option(..., "--out", path_type=Path, help="Destination fingerprint JSON"),
    context: Optional[str] = typer.Option(None, "--context", help="Optional context or description"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        readable=True,
        path_type=Path,
        help="Generator YAML config (defaults to $SENSEPRINT_CONFIG)",
    ),
) -> None:
    """Generate a fingerprint and persist it to ``out``."""

    try:
        generator_config = load_generator_config(config)
    except (GeneratorConfigError, OSError) as exc:
        typer.secho(f"[ERROR] Invalid generator config: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    try:
        result = generate_fingerprint(definition, generator_config, context=context)
    except GenerationError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    try:
        write_json(out, result.to_dict())
    except Exception as exc:
        typer.secho(f"[ERROR] Failed to write fingerprint: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.secho(
        f"Fingerprint written to {out} (words={len(result.fingerprint)}, key={compute_discovery_key(result)})",
        fg=typer.colors.GREEN,
    )


__all__ = ["app", "generate"]
