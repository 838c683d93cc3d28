"""CLI for comparing two SensePrint fingerprints."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List

import typer

from senseprint.cli.common import echo_score, load_result
from senseprint.fingerprint.classify import classify_score
from senseprint.fingerprint.models import SimilarityMatch
from senseprint.fingerprint.similarity import SIMILARITY_STRATEGIES, analyze_similarity, score_similarity

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compare two fingerprints and attribute the score to shared words.",
)


def _format_table(matches: List[SimilarityMatch]) -> str:
    header = "Word | Weight A | Weight B | Contribution | Bonus"
    separator = "---|---|---|---|---"
    body = "\n".join(
        f"{m.word} | {m.weight_a:.2f} | {m.weight_b:.2f} | {m.contribution:.3f} | "
        f"{m.bonus_type.value if m.bonus_type else '-'}"
        for m in matches
    )
    return f"{header}\n{separator}\n{body}" if body else f"{header}\n{separator}\n"


@app.callback()
def compare(
    a: Path = typer.Option(..., "--a", exists=True, readable=True, path_type=Path, help="First fingerprint JSON"),
    b: Path = typer.Option(..., "--b", exists=True, readable=True, path_type=Path, help="Second fingerprint JSON"),
    strategy: str = typer.Option("tiered", "--strategy", help="Scoring strategy name"),
    markdown: Path | None = typer.Option(
        None,
        "--markdown",
        path_type=Path,
        help="Optional Markdown output path (attribution table, or a score summary for other strategies)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit the analysis as JSON"),
) -> None:
    """Compare fingerprints ``a`` and ``b``."""

    if strategy not in SIMILARITY_STRATEGIES:
        raise typer.BadParameter(
            f"Unknown strategy '{strategy}' (choose from {', '.join(sorted(SIMILARITY_STRATEGIES))})",
            param_hint="--strategy",
        )

    fp_a = load_result(a)
    fp_b = load_result(b)

    if strategy != "tiered":
        score = score_similarity(fp_a, fp_b, strategy)
        if json_output:
            payload = {"strategy": strategy, "score": score, "bucket": classify_score(score).value}
            typer.echo(json.dumps(payload, indent=2))
        else:
            echo_score(f"Similarity [{strategy}]: ", score)
        report = f"Strategy | Score | Bucket\n---|---|---\n{strategy} | {score:.4f} | {classify_score(score).value}"
    else:
        analysis = analyze_similarity(fp_a, fp_b)
        if json_output:
            payload = analysis.to_dict()
            payload["bucket"] = classify_score(analysis.score).value
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            echo_score("Similarity: ", analysis.score)
            typer.echo(
                f"Intersection {analysis.intersection_sum:.3f} over totals "
                f"{analysis.total_weight_a:.3f} / {analysis.total_weight_b:.3f}"
            )
            if analysis.matches:
                typer.echo("Shared anchors:")
                for match in analysis.matches:
                    bonus = f" [{match.bonus_type.value}]" if match.bonus_type else ""
                    typer.echo(
                        f"  - {match.word}: {match.weight_a:.2f} / {match.weight_b:.2f} -> {match.contribution:.3f}{bonus}"
                    )
            else:
                typer.echo("No shared anchors.")
        report = _format_table(analysis.matches)

    if markdown is not None:
        markdown.parent.mkdir(parents=True, exist_ok=True)
        markdown.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Markdown report written to {markdown}", err=json_output)


def run() -> None:
    """Entrypoint for ``python -m senseprint.cli.compare`` usage."""

    app()


__all__ = ["app", "compare", "run"]
