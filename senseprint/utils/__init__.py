"""Utility helpers for SensePrint."""

from .io import ensure_parent_dir, read_json, write_json
from .logging import setup_logging
from .mathx import format_one_decimal, ratio
from .validate import SchemaValidationError, validate_fingerprint_payload

__all__ = [
    "SchemaValidationError",
    "ensure_parent_dir",
    "format_one_decimal",
    "read_json",
    "ratio",
    "setup_logging",
    "validate_fingerprint_payload",
    "write_json",
]
