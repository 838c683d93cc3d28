"""HTTP client for the hosted fingerprint generator."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from senseprint.fingerprint.models import FingerprintResult
from senseprint.generator.config import GeneratorConfig
from senseprint.generator.prompt import build_response_schema, build_system_instruction, build_user_prompt
from senseprint.utils.validate import SchemaValidationError, validate_fingerprint_payload

logger = logging.getLogger(__name__)

__all__ = ["GenerationError", "build_request_body", "generate_fingerprint"]


class GenerationError(RuntimeError):
    """Raised when the generator cannot produce a usable fingerprint."""


def build_request_body(definition: str, config: GeneratorConfig, context: Optional[str] = None) -> Dict[str, Any]:
    return {
        "systemInstruction": {"parts": [{"text": build_system_instruction(config)}]},
        "contents": [{"role": "user", "parts": [{"text": build_user_prompt(definition, context)}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": build_response_schema(),
        },
    }


def generate_fingerprint(
    definition: str,
    config: GeneratorConfig,
    *,
    context: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> FingerprintResult:
    """Ask the model configured in ``config`` for the fingerprint of ``definition``.

    The response is only checked for structure; word counts and tier order
    are accepted as returned.
    """

    if not config.api_key:
        raise GenerationError("No API key configured (set SENSEPRINT_API_KEY or GEMINI_API_KEY)")

    url = f"{config.endpoint}/models/{config.model}:generateContent"
    body = build_request_body(definition, config, context)
    headers = {"x-goog-api-key": config.api_key, "Content-Type": "application/json"}

    owns_client = client is None
    http = client or httpx.Client(timeout=config.timeout_seconds)
    try:
        response = http.post(url, json=body, headers=headers)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        logger.error("Generator request to %s failed: %s", config.model, exc)
        raise GenerationError(f"Generator request failed: {exc}") from exc
    except ValueError as exc:
        logger.error("Generator returned a non-JSON envelope: %s", exc)
        raise GenerationError("Generator returned a non-JSON envelope") from exc
    finally:
        if owns_client:
            http.close()

    text = _extract_text(payload)
    if not text:
        logger.error("Generator response for %r had no text", definition)
        raise GenerationError("No response text")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Generator text is not valid JSON: %s", exc)
        raise GenerationError(f"Generator text is not valid JSON: {exc}") from exc

    try:
        validate_fingerprint_payload(data)
    except SchemaValidationError as exc:
        logger.error("Generator output failed schema validation: %s", exc.message)
        raise GenerationError(f"Generator output failed schema validation:\n{exc.message}") from exc

    result = FingerprintResult.from_dict(data)
    logger.info("Generated %d fingerprint words with %s", len(result.fingerprint), config.model)
    return result


def _extract_text(payload: Any) -> str:
    if not isinstance(payload, Mapping):
        return ""
    candidates = payload.get("candidates") or []
    if not candidates or not isinstance(candidates[0], Mapping):
        return ""
    content = candidates[0].get("content") or {}
    parts = (content.get("parts") or []) if isinstance(content, Mapping) else []
    return "".join(str(part.get("text", "")) for part in parts if isinstance(part, Mapping))
