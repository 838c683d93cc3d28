"""Numeric helpers for SensePrint."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

__all__ = ["ratio", "format_one_decimal"]

_ONE_DECIMAL = Decimal("0.1")


def ratio(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator``, or ``0.0`` for a zero denominator."""

    if denominator == 0:
        return 0.0
    return float(numerator) / float(denominator)


def format_one_decimal(value: float) -> str:
    """Render ``value`` with exactly one decimal place.

    Rounds half away from zero on the exact binary value of ``value``, so
    ``0.25`` renders as ``0.3`` while ``0.35`` (stored as 0.34999...) renders
    as ``0.3``. Non-finite values render as ``NaN``, ``Infinity`` or
    ``-Infinity``.
    """

    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    quantized = Decimal(number).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:.1f}"
