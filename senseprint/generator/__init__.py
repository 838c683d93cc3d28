"""Boundary to the external generative model that produces fingerprints."""

from .client import GenerationError, generate_fingerprint
from .config import DEFAULT_TIERS, GeneratorConfig, GeneratorConfigError, TierSpec, load_generator_config

__all__ = [
    "DEFAULT_TIERS",
    "GenerationError",
    "GeneratorConfig",
    "GeneratorConfigError",
    "TierSpec",
    "generate_fingerprint",
    "load_generator_config",
]
