from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from senseprint.cli import main as main_cli
from senseprint.utils.logging import JsonFormatter, setup_logging


def test_json_formatter_emits_one_object_per_record() -> None:
    record = logging.LogRecord("senseprint.test", logging.WARNING, __file__, 1, "score=%s", ("0.76",), None)

    body = json.loads(JsonFormatter().format(record))

    assert body["level"] == "WARNING"
    assert body["logger"] == "senseprint.test"
    assert body["msg"] == "score=0.76"
    assert "ts" in body


def test_setup_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENSEPRINT_LOG_LEVEL", "debug")
    monkeypatch.setenv("SENSEPRINT_LOG_FORMAT", "json")

    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_root_cli_log_format_json(tmp_path) -> None:
    path = tmp_path / "fp.json"
    path.write_text('{"sense_description": "x", "fingerprint": [{"word": "bank", "weight": 1.0}]}', encoding="utf-8")

    result = CliRunner().invoke(
        main_cli.app,
        ["--log-level", "INFO", "--log-format", "json", "key", "--file", str(path)],
    )

    assert result.exit_code == 0
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
