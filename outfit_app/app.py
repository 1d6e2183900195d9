"""Outfit generator app bootstrap."""

from __future__ import annotations

import random
from typing import Any, Dict

from pydantic import ValidationError

from logic.outfit_builder import generate_outfit
from logic.validation import GenerationRequestPayload, validation_failure
from models.generation import Failure, GenerationResult
from outfit_app.config import GeneratorConfig
from outfit_app.logging_config import configure_logging, generation_context
from tools.observability import instrument_operation


def _on_invalid_request(exc: ValidationError) -> Dict[str, Any]:
    return validation_failure("Invalid outfit generation request", exc)


def serialize_result(result: GenerationResult) -> Dict[str, Any]:
    """Render a generation result as a JSON-friendly payload."""

    if isinstance(result, Failure):
        return {
            "status": "failed",
            "reason": result.reason.value,
            "message": result.message,
            "remediations": [remediation.value for remediation in result.remediations],
            "attempts": result.attempts,
        }
    return {
        "status": "ok",
        "attempts": result.attempts,
        "outfit": result.outfit.to_dict(),
        "items": [
            {
                "slot": slot,
                "item_id": item.item_id,
                "category": item.category,
                "color": item.color,
                "image_ref": item.image_ref,
            }
            for slot, item in result.outfit.slots().items()
            if item is not None
        ],
    }


class OutfitGeneratorApp:
    """Wires configuration and logging around the outfit generator."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig.from_env()
        configure_logging(self.config.log_level)

    def _rng_for(self, seed: int | None, fresh_sequence: bool = False) -> random.Random:
        if seed is None and not fresh_sequence:
            seed = self.config.random_seed
        return random.Random(seed)

    def generate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a raw request payload and return the serialized result."""

        return self._run(payload, fresh_sequence=False)

    def regenerate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Run a request again on a fresh random sequence.

        Both the payload seed and ``GeneratorConfig.random_seed`` are ignored, so
        an ``exhausted`` failure is not simply replayed.
        """

        return self._run({**payload, "seed": None}, fresh_sequence=True)

    def proceed_without_outerwear(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Re-run a request with the weather outerwear requirement relaxed."""

        return self.generate({**payload, "ignore_outerwear_requirement": True})

    def _run(self, payload: Dict[str, Any], fresh_sequence: bool) -> Dict[str, Any]:
        with generation_context(payload.get("vibe"), payload.get("weather")) as trace:
            response = self._generate(payload=payload, fresh_sequence=fresh_sequence)
            trace.record(response)
            return response

    @instrument_operation(
        "generate_outfit",
        input_model=GenerationRequestPayload,
        on_validation_error=_on_invalid_request,
    )
    def _generate(self, payload: GenerationRequestPayload, fresh_sequence: bool = False) -> Dict[str, Any]:
        result = generate_outfit(
            payload.to_request(),
            rng=self._rng_for(payload.seed, fresh_sequence),
            max_attempts=self.config.max_attempts,
        )
        return serialize_result(result)


__all__ = ["OutfitGeneratorApp", "serialize_result"]
