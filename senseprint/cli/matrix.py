"""CLI for pairwise comparison of several fingerprints."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List

import typer

from senseprint.cli.common import echo_score, load_result
from senseprint.fingerprint.classify import classify_score
from senseprint.fingerprint.similarity import compare_pairs

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compare every pair of the given fingerprints.",
)


@app.callback()
def matrix(
    files: List[Path] = typer.Option(
        ..., "--file", exists=True, readable=True, path_type=Path, help="Fingerprint JSON (repeat for each input)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
) -> None:
    """Run the analyzer on all combinations of ``files``."""

    if len(files) < 2:
        raise typer.BadParameter("Provide at least two fingerprint files")

    results = [(path.stem, load_result(path)) for path in files]
    comparisons = compare_pairs(results)

    if json_output:
        rows = [
            {
                "a": entry.label_a,
                "b": entry.label_b,
                "score": entry.analysis.score,
                "bucket": classify_score(entry.analysis.score).value,
                "anchors": [match.word for match in entry.analysis.matches],
            }
            for entry in comparisons
        ]
        typer.echo(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    for entry in comparisons:
        echo_score(f"{entry.label_a} <-> {entry.label_b}: ", entry.analysis.score)
        anchors = ", ".join(match.word for match in entry.analysis.matches) or "none"
        typer.echo(f"  anchors: {anchors}")


__all__ = ["app", "matrix"]
