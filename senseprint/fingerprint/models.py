"""Value types shared by the SensePrint fingerprint utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

__all__ = [
    "BonusType",
    "FingerprintItem",
    "FingerprintResult",
    "PairComparison",
    "ScoreBucket",
    "SimilarityAnalysis",
    "SimilarityMatch",
]


class BonusType(str, Enum):
    cross = "cross"
    tier1 = "tier1"


class ScoreBucket(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


@dataclass(frozen=True)
class FingerprintItem:
    word: str
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "weight": self.weight}


@dataclass(frozen=True)
class FingerprintResult:
    """The extracted sense of one input.

    ``fingerprint`` keeps generation order and may contain the same word more
    than once; deduplication happens during normalization.
    """

    sense_description: str
    fingerprint: Tuple[FingerprintItem, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FingerprintResult":
        """Build a result from its JSON shape without range validation."""

        items = tuple(
            FingerprintItem(word=str(entry.get("word", "")), weight=float(entry.get("weight", 0.0)))
            for entry in data.get("fingerprint", []) or []
        )
        return cls(sense_description=str(data.get("sense_description", "")), fingerprint=items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sense_description": self.sense_description,
            "fingerprint": [item.to_dict() for item in self.fingerprint],
        }


@dataclass(frozen=True)
class SimilarityMatch:
    word: str
    weight_a: float
    weight_b: float
    contribution: float
    is_bonus: bool
    bonus_type: Optional[BonusType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "weight_a": self.weight_a,
            "weight_b": self.weight_b,
            "contribution": self.contribution,
            "is_bonus": self.is_bonus,
            "bonus_type": self.bonus_type.value if self.bonus_type else None,
        }


@dataclass(frozen=True)
class SimilarityAnalysis:
    score: float
    intersection_sum: float
    total_weight_a: float
    total_weight_b: float
    matches: List[SimilarityMatch] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "intersection_sum": self.intersection_sum,
            "total_weight_a": self.total_weight_a,
            "total_weight_b": self.total_weight_b,
            "matches": [match.to_dict() for match in self.matches],
        }


@dataclass(frozen=True)
class PairComparison:
    label_a: str
    label_b: str
    analysis: SimilarityAnalysis
