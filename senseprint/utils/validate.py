"""Schema validation helpers."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft7Validator

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SCHEMA_PATH = PACKAGE_ROOT / "schema" / "fingerprint_result.schema.json"


class SchemaValidationError(RuntimeError):
    """Raised when a fingerprint payload fails JSON Schema validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=1)
def load_fingerprint_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _build_validator() -> Draft7Validator:
    return Draft7Validator(load_fingerprint_schema())


def validate_fingerprint_payload(payload: Any) -> None:
    """Validate ``payload`` or raise :class:`SchemaValidationError`."""

    errors = sorted(_build_validator().iter_errors(payload), key=lambda err: [str(x) for x in err.path])
    if errors:
        formatted = "\n".join(
            f"{'/'.join(str(x) for x in error.path)}: {error.message}" if error.path else error.message
            for error in errors
        )
        raise SchemaValidationError(formatted)
