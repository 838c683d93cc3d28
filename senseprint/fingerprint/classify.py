"""Qualitative buckets for similarity scores."""
from __future__ import annotations

from typing import Dict

from senseprint.fingerprint.models import ScoreBucket

HIGH_THRESHOLD = 0.8
MEDIUM_THRESHOLD = 0.5

BUCKET_COLORS: Dict[ScoreBucket, str] = {
    ScoreBucket.high: "green",
    ScoreBucket.medium: "yellow",
    ScoreBucket.low: "red",
}

__all__ = ["BUCKET_COLORS", "classify_score"]


def classify_score(score: float) -> ScoreBucket:
    """Bucket ``score``; lower bounds are inclusive."""

    if score >= HIGH_THRESHOLD:
        return ScoreBucket.high
    if score >= MEDIUM_THRESHOLD:
        return ScoreBucket.medium
    return ScoreBucket.low
