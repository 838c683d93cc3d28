"""SensePrint: weighted semantic fingerprints and their comparison."""

from senseprint.fingerprint import (
    FingerprintItem,
    FingerprintResult,
    ScoreBucket,
    SimilarityAnalysis,
    SimilarityMatch,
    analyze_similarity,
    classify_score,
    compute_discovery_key,
)

__version__ = "0.1.0"

__all__ = [
    "FingerprintItem",
    "FingerprintResult",
    "ScoreBucket",
    "SimilarityAnalysis",
    "SimilarityMatch",
    "__version__",
    "analyze_similarity",
    "classify_score",
    "compute_discovery_key",
]
