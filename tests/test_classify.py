from __future__ import annotations

import pytest

from senseprint.fingerprint import BUCKET_COLORS, ScoreBucket, analyze_similarity, classify_score

from helpers import bank_financial, bank_river, make_result


@pytest.mark.parametrize(
    ("score", "bucket"),
    [
        (1.0, ScoreBucket.high),
        (0.8, ScoreBucket.high),
        (0.79999, ScoreBucket.medium),
        (0.5, ScoreBucket.medium),
        (0.49999, ScoreBucket.low),
        (0.0, ScoreBucket.low),
    ],
)
def test_bucket_boundaries(score: float, bucket: ScoreBucket) -> None:
    assert classify_score(score) is bucket


def test_scenarios_land_in_expected_buckets() -> None:
    spring = make_result([("spring", 1.0)])

    assert classify_score(analyze_similarity(bank_financial(), bank_river()).score) is ScoreBucket.medium
    assert classify_score(analyze_similarity(spring, spring).score) is ScoreBucket.high


def test_every_bucket_has_a_color() -> None:
    assert set(BUCKET_COLORS) == set(ScoreBucket)
    assert ScoreBucket.high.value == "high"
