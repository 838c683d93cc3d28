"""Logging setup for SensePrint entry points."""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

__all__ = ["JsonFormatter", "setup_logging"]

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        body = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            body["exc"] = self.formatException(record.exc_info)
        return json.dumps(body, ensure_ascii=False)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure the root logger.

    ``level`` falls back to ``SENSEPRINT_LOG_LEVEL`` (default ``WARNING``) and
    ``fmt`` to ``SENSEPRINT_LOG_FORMAT`` (``text`` or ``json``).
    """

    level_name = (level or os.getenv("SENSEPRINT_LOG_LEVEL", "WARNING")).upper()
    fmt_name = (fmt or os.getenv("SENSEPRINT_LOG_FORMAT", "text")).lower()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    if fmt_name == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
