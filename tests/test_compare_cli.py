from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from senseprint.cli import compare as compare_cli
from senseprint.cli import main as main_cli
from senseprint.utils.io import write_json

from helpers import bank_financial, bank_river, spring_season


@pytest.fixture
def bank_files(tmp_path: Path) -> tuple[Path, Path]:
    path_a = tmp_path / "bank_financial.json"
    path_b = tmp_path / "bank_river.json"
    write_json(path_a, bank_financial().to_dict())
    write_json(path_b, bank_river().to_dict())
    return path_a, path_b


def test_compare_cli_generates_report(tmp_path: Path, bank_files: tuple[Path, Path]) -> None:
    runner = CliRunner()
    markdown_path = tmp_path / "report.md"

    result = runner.invoke(
        compare_cli.app,
        ["--a", str(bank_files[0]), "--b", str(bank_files[1]), "--markdown", str(markdown_path)],
    )

    assert result.exit_code == 0
    assert "Similarity: 76.5% (medium)" in result.stdout
    assert "bank: 1.00 / 1.00 -> 1.300 [tier1]" in result.stdout
    assert markdown_path.exists()
    assert "bank | 1.00 | 1.00 | 1.300 | tier1" in markdown_path.read_text(encoding="utf-8")


def test_compare_cli_json_and_strategy(bank_files: tuple[Path, Path]) -> None:
    runner = CliRunner()

    result = runner.invoke(compare_cli.app, ["--a", str(bank_files[0]), "--b", str(bank_files[1]), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["bucket"] == "medium"
    assert payload["matches"][0]["bonus_type"] == "tier1"

    result = runner.invoke(
        compare_cli.app,
        ["--a", str(bank_files[0]), "--b", str(bank_files[1]), "--strategy", "weighted_jaccard"],
    )
    assert result.exit_code == 0
    assert "Similarity [weighted_jaccard]:" in result.stdout

    result = runner.invoke(compare_cli.app, ["--a", str(bank_files[0]), "--b", str(bank_files[1]), "--strategy", "nope"])
    assert result.exit_code != 0


def test_compare_cli_rejects_invalid_fingerprint(tmp_path: Path, bank_files: tuple[Path, Path]) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({"sense_description": "x", "fingerprint": [{"word": "bank"}]}), encoding="utf-8")

    result = CliRunner().invoke(compare_cli.app, ["--a", str(bank_files[0]), "--b", str(broken)])

    assert result.exit_code == 1
    assert "[ERROR]" in result.stdout


def test_root_cli_key_and_matrix(tmp_path: Path, bank_files: tuple[Path, Path]) -> None:
    runner = CliRunner()
    spring_path = tmp_path / "spring.json"
    write_json(spring_path, spring_season().to_dict())

    result = runner.invoke(main_cli.app, ["key", "--file", str(bank_files[0])])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 8

    result = runner.invoke(
        main_cli.app,
        ["matrix", "--file", str(bank_files[0]), "--file", str(bank_files[1]), "--file", str(spring_path), "--json"],
    )
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert [(row["a"], row["b"]) for row in rows] == [
        ("bank_financial", "bank_river"),
        ("bank_financial", "spring"),
        ("bank_river", "spring"),
    ]
    assert rows[0]["anchors"] == ["bank"]
    assert rows[1]["bucket"] == "low"


def test_root_cli_help_lists_commands() -> None:
    result = CliRunner().invoke(main_cli.app, ["--help"])

    assert result.exit_code == 0
    for name in ("generate", "compare", "matrix", "key"):
        assert name in result.stdout


def test_compare_cli_markdown_for_other_strategies(tmp_path: Path, bank_files: tuple[Path, Path]) -> None:
    markdown_path = tmp_path / "jaccard.md"

    result = CliRunner().invoke(
        compare_cli.app,
        [
            "--a",
            str(bank_files[0]),
            "--b",
            str(bank_files[1]),
            "--strategy",
            "weighted_jaccard",
            "--markdown",
            str(markdown_path),
        ],
    )

    assert result.exit_code == 0
    report = markdown_path.read_text(encoding="utf-8")
    assert "Strategy | Score | Bucket" in report
    assert "weighted_jaccard | 0.4167 | low" in report


def test_key_cli_accepts_infinite_weight(tmp_path: Path) -> None:
    path = tmp_path / "inf.json"
    path.write_text(
        '{"sense_description": "x", "fingerprint": [{"word": "bank", "weight": Infinity}]}',
        encoding="utf-8",
    )

    result = CliRunner().invoke(main_cli.app, ["key", "--file", str(path)])

    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 8
