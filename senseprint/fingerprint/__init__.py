"""Fingerprint normalization, comparison and identity utilities."""

from .classify import BUCKET_COLORS, classify_score
from .discovery import compute_discovery_key, same_sense
from .models import (
    BonusType,
    FingerprintItem,
    FingerprintResult,
    PairComparison,
    ScoreBucket,
    SimilarityAnalysis,
    SimilarityMatch,
)
from .normalize import normalize_fingerprint, total_weight
from .similarity import SIMILARITY_STRATEGIES, analyze_similarity, compare_pairs, score_similarity

__all__ = [
    "BUCKET_COLORS",
    "BonusType",
    "FingerprintItem",
    "FingerprintResult",
    "PairComparison",
    "SIMILARITY_STRATEGIES",
    "ScoreBucket",
    "SimilarityAnalysis",
    "SimilarityMatch",
    "analyze_similarity",
    "classify_score",
    "compare_pairs",
    "compute_discovery_key",
    "normalize_fingerprint",
    "same_sense",
    "score_similarity",
    "total_weight",
]
