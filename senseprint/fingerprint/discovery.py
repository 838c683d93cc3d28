"""Discovery keys: short content hashes for fingerprint identity checks."""
from __future__ import annotations

from typing import List, Tuple

from senseprint.fingerprint.normalize import FingerprintLike, fingerprint_items
from senseprint.utils.mathx import format_one_decimal

KEY_SEPARATOR = "|"
_HASH_MULTIPLIER = 31
_HASH_MASK = 0xFFFFFFFF

__all__ = ["canonical_text", "compute_discovery_key", "rolling_hash", "same_sense"]


def canonical_text(value: FingerprintLike) -> str:
    """Return the order-independent text a discovery key is computed from."""

    entries: List[Tuple[str, str]] = [
        (item.word.lower(), format_one_decimal(item.weight)) for item in fingerprint_items(value)
    ]
    entries.sort()
    return KEY_SEPARATOR.join(f"{word}:{weight}" for word, weight in entries)


def rolling_hash(text: str) -> int:
    """Return the unsigned 32-bit ``h * 31 + c`` hash over UTF-16 code units of ``text``."""

    encoded = text.encode("utf-16-le")
    value = 0
    for offset in range(0, len(encoded), 2):
        unit = encoded[offset] | (encoded[offset + 1] << 8)
        value = (value * _HASH_MULTIPLIER + unit) & _HASH_MASK
    return value


def compute_discovery_key(value: FingerprintLike) -> str:
    """Return an 8 digit uppercase hex key identifying the content of ``value``.

    Two fingerprints share a key when they hold the same lowercase words with
    the same weights at one-decimal precision, regardless of item order.
    Not suitable for anything security related.
    """

    return f"{rolling_hash(canonical_text(value)):08X}"


def same_sense(a: FingerprintLike, b: FingerprintLike) -> bool:
    return compute_discovery_key(a) == compute_discovery_key(b)
