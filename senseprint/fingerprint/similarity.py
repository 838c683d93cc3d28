"""Similarity scoring and attribution for SensePrint fingerprints."""
from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from senseprint.fingerprint.models import (
    BonusType,
    FingerprintResult,
    PairComparison,
    SimilarityAnalysis,
    SimilarityMatch,
)
from senseprint.fingerprint.normalize import (
    FingerprintLike,
    fingerprint_items,
    normalize_fingerprint,
    total_weight,
)
from senseprint.utils.mathx import ratio

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 0.001
TIER1_THRESHOLD = 0.9
CROSS_TIER_MULTIPLIER = 1.2
TIER1_MULTIPLIER = 1.3
FLAT_BONUS_MULTIPLIER = 1.3

Labelled = Union[Mapping[str, FingerprintResult], Sequence[Tuple[str, FingerprintResult]]]

__all__ = [
    "SIMILARITY_STRATEGIES",
    "analyze_similarity",
    "compare_pairs",
    "flat_bonus_score",
    "score_similarity",
    "shared_words",
    "weighted_jaccard_score",
]


def shared_words(map_a: Mapping[str, float], map_b: Mapping[str, float]) -> List[str]:
    """Return words carrying a positive weight on both sides, in A's order."""

    all_words = list(map_a)
    all_words.extend(word for word in map_b if word not in map_a)
    return [word for word in all_words if map_a.get(word, 0.0) > 0 and map_b.get(word, 0.0) > 0]


def analyze_similarity(a: FingerprintLike, b: FingerprintLike) -> SimilarityAnalysis:
    """Score ``a`` against ``b`` and attribute the score to shared words.

    Each shared word contributes the average of its two weights. Words whose
    weights differ across fingerprints earn the cross-tier multiplier; words
    both sides rate as core earn the tier-1 multiplier. The sum is divided by
    the smaller raw total weight and clamped to ``1.0``.
    """

    map_a = normalize_fingerprint(a)
    map_b = normalize_fingerprint(b)

    matches: List[SimilarityMatch] = []
    intersection_sum = 0.0
    for word in shared_words(map_a, map_b):
        match = _score_match(word, map_a[word], map_b[word])
        intersection_sum += match.contribution
        matches.append(match)

    total_a = total_weight(fingerprint_items(a))
    total_b = total_weight(fingerprint_items(b))
    min_total = min(total_a, total_b)
    score = min(1.0, ratio(intersection_sum, min_total))

    matches.sort(key=lambda match: match.contribution, reverse=True)
    logger.debug(
        "similarity score=%.4f shared=%d totals=(%.3f, %.3f)",
        score,
        len(matches),
        total_a,
        total_b,
    )
    return SimilarityAnalysis(
        score=score,
        intersection_sum=intersection_sum,
        total_weight_a=total_a,
        total_weight_b=total_b,
        matches=matches,
    )


def flat_bonus_score(a: FingerprintLike, b: FingerprintLike) -> float:
    """Intersection over the smaller total with one flat bonus for every shared word."""

    map_a = normalize_fingerprint(a)
    map_b = normalize_fingerprint(b)
    intersection_sum = 0.0
    for word in shared_words(map_a, map_b):
        intersection_sum += ((map_a[word] + map_b[word]) / 2) * FLAT_BONUS_MULTIPLIER

    min_total = min(total_weight(fingerprint_items(a)), total_weight(fingerprint_items(b)))
    return min(1.0, ratio(intersection_sum, min_total))


def weighted_jaccard_score(a: FingerprintLike, b: FingerprintLike) -> float:
    """Sum of per-word minimum weights over the sum of per-word maximum weights."""

    map_a = normalize_fingerprint(a)
    map_b = normalize_fingerprint(b)
    numerator = 0.0
    denominator = 0.0
    for word in set(map_a) | set(map_b):
        weight_a = map_a.get(word, 0.0)
        weight_b = map_b.get(word, 0.0)
        numerator += min(weight_a, weight_b)
        denominator += max(weight_a, weight_b)
    return ratio(numerator, denominator)


SIMILARITY_STRATEGIES: Dict[str, Callable[[FingerprintLike, FingerprintLike], float]] = {
    "tiered": lambda a, b: analyze_similarity(a, b).score,
    "flat_bonus": flat_bonus_score,
    "weighted_jaccard": weighted_jaccard_score,
}


def score_similarity(a: FingerprintLike, b: FingerprintLike, strategy: str = "tiered") -> float:
    """Return the score of ``a`` against ``b`` under the named ``strategy``."""

    try:
        scorer = SIMILARITY_STRATEGIES[strategy]
    except KeyError as exc:
        known = ", ".join(sorted(SIMILARITY_STRATEGIES))
        raise ValueError(f"Unknown similarity strategy '{strategy}' (expected one of: {known})") from exc
    return scorer(a, b)


def compare_pairs(results: Labelled) -> List[PairComparison]:
    """Analyze every unordered pair of labelled results, in input order."""

    entries = list(results.items()) if isinstance(results, Mapping) else list(results)
    comparisons: List[PairComparison] = []
    for (label_a, result_a), (label_b, result_b) in itertools.combinations(entries, 2):
        comparisons.append(
            PairComparison(
                label_a=label_a,
                label_b=label_b,
                analysis=analyze_similarity(result_a, result_b),
            )
        )
    return comparisons


def _score_match(word: str, weight_a: float, weight_b: float) -> SimilarityMatch:
    average = (weight_a + weight_b) / 2
    bonus: Optional[BonusType] = None
    if abs(weight_a - weight_b) > WEIGHT_TOLERANCE:
        contribution = average * CROSS_TIER_MULTIPLIER
        bonus = BonusType.cross
    elif min(weight_a, weight_b) >= TIER1_THRESHOLD:
        contribution = average * TIER1_MULTIPLIER
        bonus = BonusType.tier1
    else:
        contribution = average
    return SimilarityMatch(
        word=word,
        weight_a=weight_a,
        weight_b=weight_b,
        contribution=contribution,
        is_bonus=bonus is not None,
        bonus_type=bonus,
    )
