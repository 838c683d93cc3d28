"""Helpers shared by the SensePrint CLI commands."""
from __future__ import annotations

from pathlib import Path

import typer

from senseprint.fingerprint.classify import BUCKET_COLORS, classify_score
from senseprint.fingerprint.models import FingerprintResult
from senseprint.utils.io import read_json
from senseprint.utils.validate import SchemaValidationError, validate_fingerprint_payload

__all__ = ["echo_score", "load_result"]


def load_result(path: Path) -> FingerprintResult:
    """Read and validate a fingerprint JSON file or exit with code 1."""

    try:
        payload = read_json(path)
    except Exception as exc:
        typer.secho(f"[ERROR] Failed to load fingerprint '{path}': {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    try:
        validate_fingerprint_payload(payload)
    except SchemaValidationError as exc:
        typer.secho(f"[ERROR] Fingerprint '{path}' failed schema validation:", fg=typer.colors.RED)
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc

    return FingerprintResult.from_dict(payload)


def echo_score(prefix: str, score: float) -> None:
    bucket = classify_score(score)
    typer.secho(f"{prefix}{score * 100:.1f}% ({bucket.value})", fg=BUCKET_COLORS[bucket])
