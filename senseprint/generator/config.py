"""Generator configuration: model, target word count and relevance tiers."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_WORD_COUNT = 5
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "DEFAULT_TIERS",
    "GeneratorConfig",
    "GeneratorConfigError",
    "TierSpec",
    "load_generator_config",
]


class GeneratorConfigError(ValueError):
    """Raised when a generator configuration breaks its invariants."""


@dataclass(frozen=True)
class TierSpec:
    label: str
    weight: float
    description: str


DEFAULT_TIERS: Tuple[TierSpec, ...] = (
    TierSpec("Core", 1.0, "Essential meaning"),
    TierSpec("Strong", 0.7, "Very close nuance"),
    TierSpec("Related", 0.3, "Broad semantic field"),
)


@dataclass(frozen=True)
class GeneratorConfig:
    model: str = DEFAULT_MODEL
    word_count: int = DEFAULT_WORD_COUNT
    tiers: Tuple[TierSpec, ...] = field(default=DEFAULT_TIERS)
    api_key: Optional[str] = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.model:
            raise GeneratorConfigError("Generator model must not be empty")
        if self.word_count < 1:
            raise GeneratorConfigError(f"word_count must be at least 1, got {self.word_count}")
        if not self.tiers:
            raise GeneratorConfigError("At least one tier is required")
        for tier in self.tiers:
            if not 0.0 <= tier.weight <= 1.0:
                raise GeneratorConfigError(f"Tier '{tier.label}' weight {tier.weight} is outside [0, 1]")
        if self.timeout_seconds <= 0:
            raise GeneratorConfigError("timeout_seconds must be positive")


def load_generator_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load a :class:`GeneratorConfig` from YAML and the environment.

    ``path`` defaults to ``SENSEPRINT_CONFIG``; without either, built-in
    defaults are used. Environment variables override file values.
    """

    config_path = path or os.getenv("SENSEPRINT_CONFIG")
    data: Dict[str, Any] = {}
    if config_path:
        data = _read_yaml(Path(config_path))

    config = GeneratorConfig(**_parse_fields(data))
    return replace(config, **_env_overrides())


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not data:
        return {}
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"Config file '{path}' must define a mapping")
    return data


def _parse_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    if "model" in data:
        fields["model"] = str(data["model"])
    if "word_count" in data:
        fields["word_count"] = _to_int(data["word_count"], "word_count")
    if "api_key" in data and data["api_key"]:
        fields["api_key"] = str(data["api_key"])
    if "endpoint" in data:
        fields["endpoint"] = str(data["endpoint"]).rstrip("/")
    if "timeout_seconds" in data:
        fields["timeout_seconds"] = _to_float(data["timeout_seconds"], "timeout_seconds")
    if "tiers" in data:
        fields["tiers"] = _parse_tiers(data["tiers"])
    return fields


def _parse_tiers(raw: Any) -> Tuple[TierSpec, ...]:
    if not isinstance(raw, list):
        raise GeneratorConfigError("'tiers' must be a list of {label, weight, description} entries")
    tiers: List[TierSpec] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise GeneratorConfigError(f"Tier #{idx} must be a mapping")
        if "weight" not in entry:
            raise GeneratorConfigError(f"Tier #{idx} is missing a weight")
        tiers.append(
            TierSpec(
                label=str(entry.get("label") or f"Tier {idx + 1}"),
                weight=_to_float(entry["weight"], f"tiers[{idx}].weight"),
                description=str(entry.get("description", "")),
            )
        )
    return tuple(tiers)


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    model = os.getenv("SENSEPRINT_MODEL")
    if model:
        overrides["model"] = model
    word_count = os.getenv("SENSEPRINT_WORD_COUNT")
    if word_count:
        overrides["word_count"] = _to_int(word_count, "SENSEPRINT_WORD_COUNT")
    api_key = os.getenv("SENSEPRINT_API_KEY") or os.getenv("GEMINI_API_KEY")
    if api_key:
        overrides["api_key"] = api_key
    endpoint = os.getenv("SENSEPRINT_ENDPOINT")
    if endpoint:
        overrides["endpoint"] = endpoint.rstrip("/")
    return overrides


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise GeneratorConfigError(f"Invalid integer for '{name}': {value!r}") from exc


def _to_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise GeneratorConfigError(f"Invalid number for '{name}': {value!r}") from exc
