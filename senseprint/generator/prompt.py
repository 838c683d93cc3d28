"""Prompt text sent to the generative model."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from senseprint.generator.config import GeneratorConfig, TierSpec

__all__ = ["build_response_schema", "build_system_instruction", "build_user_prompt"]


def build_system_instruction(config: GeneratorConfig) -> str:
    """Render the fingerprint protocol for ``config``."""

    tier_lines = "\n".join(
        f"   - Tier {idx} ({tier.label}): {tier.weight:.1f} ({tier.description})"
        for idx, tier in enumerate(config.tiers, start=1)
    )
    example = {
        "sense_description": "Briefly describe the identified sense",
        "fingerprint": [
            {"word": f"word{idx}", "weight": weight}
            for idx, weight in enumerate(_example_weights(config.tiers, config.word_count), start=1)
        ],
    }
    return "\n".join(
        [
            "# Role",
            "You are a Semantic Fingerprint Generator for a linguistic engine. Your task is to extract",
            'the core "Sense" (the underlying concept) from any input and represent it as a structured fingerprint.',
            "",
            "# Fingerprint Protocol",
            "1. Identify the unique Semantic Sense of the input.",
            f"2. Generate EXACTLY {config.word_count} English synonyms/related words that define this specific sense.",
            "3. Assign a Relevance Tier to each word:",
            tier_lines,
            "4. Constraints:",
            "   - Only output English words for the fingerprint, regardless of input language.",
            "   - Be highly specific to the context/sense provided.",
            "   - Use Lemma form (e.g., 'jump' instead of 'jumping').",
            "",
            "# Output Format (JSON)",
            json.dumps(example, indent=2),
        ]
    )


def build_user_prompt(definition: str, context: Optional[str] = None) -> str:
    prompt = f"Input: {definition}"
    if context:
        prompt += f"\nContext/Description: {context}"
    return prompt


def build_response_schema() -> Dict[str, Any]:
    """Structured-output schema in the generateContent request dialect."""

    return {
        "type": "OBJECT",
        "properties": {
            "sense_description": {"type": "STRING"},
            "fingerprint": {
                "type": "ARRAY",
                "items": {
                    "type": "OBJECT",
                    "properties": {
                        "word": {"type": "STRING"},
                        "weight": {"type": "NUMBER"},
                    },
                    "required": ["word", "weight"],
                },
            },
        },
        "required": ["sense_description", "fingerprint"],
    }


def _example_weights(tiers: Tuple[TierSpec, ...], word_count: int) -> List[float]:
    # one word for the first tier, the rest spread evenly over the remaining tiers in order
    if len(tiers) == 1 or word_count == 1:
        return [tiers[0].weight] * word_count
    weights = [tiers[0].weight]
    rest = tiers[1:]
    remaining = word_count - 1
    for idx, tier in enumerate(rest):
        share = remaining // (len(rest) - idx)
        weights.extend([tier.weight] * share)
        remaining -= share
    return weights
