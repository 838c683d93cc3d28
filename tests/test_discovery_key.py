from __future__ import annotations

import re

from senseprint.fingerprint import compute_discovery_key, same_sense
from senseprint.fingerprint.discovery import canonical_text, rolling_hash
from senseprint.utils.mathx import format_one_decimal

from helpers import bank_financial, bank_river, make_result, spring_season


def test_key_matches_known_value() -> None:
    result = make_result([("a", 1.0)])

    assert canonical_text(result) == "a:1.0"
    assert compute_discovery_key(result) == "0572031A"


def test_key_format_is_eight_uppercase_hex_digits() -> None:
    key = compute_discovery_key(spring_season())

    assert re.fullmatch(r"[0-9A-F]{8}", key)
    assert compute_discovery_key(make_result([])) == "00000000"


def test_key_ignores_order_and_case() -> None:
    forward = make_result([("Spring", 1.0), ("season", 0.7), ("bloom", 0.3)])
    shuffled = make_result([("bloom", 0.3), ("SPRING", 1.0), ("Season", 0.7)])

    assert canonical_text(forward) == "bloom:0.3|season:0.7|spring:1.0"
    assert compute_discovery_key(forward) == compute_discovery_key(shuffled)
    assert same_sense(forward, shuffled)


def test_key_uses_one_decimal_precision() -> None:
    base = make_result([("bank", 1.0), ("river", 0.7)])
    jitter = make_result([("bank", 0.98), ("river", 0.71)])
    changed = make_result([("bank", 1.0), ("river", 0.6)])

    assert compute_discovery_key(base) == compute_discovery_key(jitter)
    assert compute_discovery_key(base) != compute_discovery_key(changed)


def test_key_ignores_sense_description() -> None:
    assert same_sense(spring_season("one"), spring_season("two"))
    assert not same_sense(bank_financial(), bank_river())


def test_rolling_hash_wraps_to_32_bits() -> None:
    value = rolling_hash("a much longer string that overflows thirty two bits many times")

    assert 0 <= value <= 0xFFFFFFFF


def test_rolling_hash_uses_utf16_code_units() -> None:
    # U+1F600 is a surrogate pair: 0xD83D, 0xDE00
    expected = (0xD83D * 31 + 0xDE00) & 0xFFFFFFFF

    assert rolling_hash("\U0001F600") == expected
    assert rolling_hash("é") == 0xE9


def test_one_decimal_formatting_rounds_exact_value_half_up() -> None:
    assert format_one_decimal(1.0) == "1.0"
    assert format_one_decimal(0.25) == "0.3"
    assert format_one_decimal(0.35) == "0.3"
    assert format_one_decimal(0.05) == "0.1"
    assert format_one_decimal(0.04) == "0.0"
    assert format_one_decimal(0) == "0.0"


def test_non_finite_weights_still_produce_a_key() -> None:
    assert format_one_decimal(float("inf")) == "Infinity"
    assert format_one_decimal(float("-inf")) == "-Infinity"
    assert format_one_decimal(float("nan")) == "NaN"

    unbounded = make_result([("bank", float("inf")), ("river", 0.7)])

    assert canonical_text(unbounded) == "bank:Infinity|river:0.7"
    assert re.fullmatch(r"[0-9A-F]{8}", compute_discovery_key(unbounded))
    assert compute_discovery_key(unbounded) != compute_discovery_key(make_result([("bank", 1.0), ("river", 0.7)]))
