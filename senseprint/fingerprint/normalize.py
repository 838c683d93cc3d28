"""Case-folding and weight bookkeeping for fingerprints."""
from __future__ import annotations

from typing import Dict, Iterable, Sequence, Union

from senseprint.fingerprint.models import FingerprintItem, FingerprintResult

FingerprintLike = Union[FingerprintResult, Sequence[FingerprintItem]]

__all__ = ["FingerprintLike", "fingerprint_items", "normalize_fingerprint", "total_weight"]


def fingerprint_items(value: FingerprintLike) -> Sequence[FingerprintItem]:
    """Return the raw item sequence of ``value``."""

    if isinstance(value, FingerprintResult):
        return value.fingerprint
    return value


def normalize_fingerprint(value: FingerprintLike) -> Dict[str, float]:
    """Map each lowercase word of ``value`` to its weight.

    When the same lowercase word appears more than once, the later item wins.
    """

    mapping: Dict[str, float] = {}
    for item in fingerprint_items(value):
        mapping[item.word.lower()] = float(item.weight)
    return mapping


def total_weight(items: Iterable[FingerprintItem]) -> float:
    """Sum raw item weights, duplicates included."""

    total = 0.0
    for item in items:
        total += float(item.weight)
    return total
