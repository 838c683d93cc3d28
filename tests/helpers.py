from __future__ import annotations

from typing import Iterable, Tuple

from senseprint.fingerprint import FingerprintItem, FingerprintResult


def make_result(pairs: Iterable[Tuple[str, float]], sense: str = "test sense") -> FingerprintResult:
    return FingerprintResult(
        sense_description=sense,
        fingerprint=tuple(FingerprintItem(word=word, weight=weight) for word, weight in pairs),
    )


def bank_financial() -> FingerprintResult:
    return make_result([("bank", 1.0), ("finance", 0.7)], sense="financial institution")


def bank_river() -> FingerprintResult:
    return make_result([("bank", 1.0), ("river", 0.7)], sense="land beside a river")


def spring_season(sense: str = "season after winter") -> FingerprintResult:
    return make_result(
        [("spring", 1.0), ("season", 0.7), ("springtime", 0.7), ("bloom", 0.3), ("renewal", 0.3)],
        sense=sense,
    )
