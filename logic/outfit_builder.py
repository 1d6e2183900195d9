"""Outfit assembly and the end-to-end generation pipeline."""
from __future__ import annotations

import logging
import random
from typing import Dict, Optional

from logic.candidate_sampler import MAX_ATTEMPTS, Candidate, sample_candidate
from logic.contextual_filtering import filter_by_vibe, partition
from logic.weather_policy import requires_outerwear
from models.clothing_item import ClothingItem
from models.color_theory import DEFAULT_ORACLE, ColorCompatibilityOracle
from models.generation import Failure, FailureReason, GenerationRequest, GenerationResult, Success
from models.outfit import DressOutfit, Outfit, OutfitShape, SeparatesOutfit

logger = logging.getLogger(__name__)


def assemble(shape: OutfitShape, chosen: Dict[str, ClothingItem]) -> Outfit:
    """Map an accepted slot assignment onto the matching outfit shape."""

    if shape is OutfitShape.DRESS:
        return DressOutfit(
            dress=chosen["dress"],
            outerwear=chosen.get("outerwear"),
            footwear=chosen.get("footwear"),
        )
    return SeparatesOutfit(
        top=chosen["top"],
        bottom=chosen["bottom"],
        outerwear=chosen.get("outerwear"),
        footwear=chosen.get("footwear"),
    )


def generate_outfit(
    request: GenerationRequest,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    oracle: ColorCompatibilityOracle = DEFAULT_ORACLE,
) -> GenerationResult:
    """Run vibe filtering, bucketing and sampling for one request.

    Pass a seeded ``rng`` for reproducible results; without one a fresh
    unseeded generator is used for this call only.
    """

    if rng is None:
        rng = random.Random()
    matched = filter_by_vibe(request.items, request.vibe)
    if not matched:
        logger.info("No items tagged with vibe '%s'", request.vibe)
        return Failure(FailureReason.NO_MATCHING_VIBE)

    buckets = partition(matched)
    outerwear_required = requires_outerwear(request.weather) and not request.ignore_outerwear_requirement
    logger.info(
        "Sampling outfit for vibe=%s weather=%s outerwear_required=%s buckets=%s",
        request.vibe,
        request.weather,
        outerwear_required,
        buckets.counts(),
    )
    sampled = sample_candidate(buckets, outerwear_required, rng, max_attempts=max_attempts, oracle=oracle)
    if isinstance(sampled, Failure):
        return sampled
    return _to_success(sampled)


def _to_success(candidate: Candidate) -> Success:
    return Success(outfit=assemble(candidate.shape, candidate.slots), attempts=candidate.attempts)


__all__ = ["assemble", "generate_outfit"]
