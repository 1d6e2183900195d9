"""Bounded randomized search for a color-compatible outfit candidate.

The closet for a single vibe is small, so instead of enumerating every
combination the sampler draws random candidates and stops at the first one
whose colors all agree. ``max_attempts`` caps the work: the sampler can report
``EXHAUSTED`` even though a rare compatible combination exists, and a fresh
call may then succeed.

Randomness always comes from the ``random.Random`` passed in, so a seeded
generator replays the same attempt sequence.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Union

from logic.contextual_filtering import CategoryBuckets
from models.clothing_item import ClothingItem
from models.color_theory import DEFAULT_ORACLE, ColorCompatibilityOracle
from models.generation import Failure, FailureReason
from models.outfit import OutfitShape

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100
DRESS_PROBABILITY = 0.5


@dataclass(frozen=True)
class Candidate:
    """An accepted slot assignment and the attempt it was found on."""

    shape: OutfitShape
    slots: Dict[str, ClothingItem]
    attempts: int


def _choose_shape(buckets: CategoryBuckets, rng: random.Random) -> OutfitShape:
    if buckets.dresses and rng.random() < DRESS_PROBABILITY:
        return OutfitShape.DRESS
    return OutfitShape.SEPARATES


def sample_candidate(
    buckets: CategoryBuckets,
    outerwear_required: bool,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
    oracle: ColorCompatibilityOracle = DEFAULT_ORACLE,
) -> Union[Candidate, Failure]:
    """Search for a compatible candidate within ``max_attempts`` draws."""

    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if outerwear_required and not buckets.outerwear:
        logger.info("Outerwear required but none available")
        return Failure(FailureReason.MISSING_REQUIRED_OUTERWEAR)

    for attempt in range(1, max_attempts + 1):
        shape = _choose_shape(buckets, rng)
        slots: Dict[str, ClothingItem] = {}
        if shape is OutfitShape.DRESS:
            slots["dress"] = rng.choice(buckets.dresses)
        else:
            if not buckets.tops or not buckets.bottoms:
                logger.debug("Attempt %s: separates shape unavailable", attempt)
                continue
            slots["top"] = rng.choice(buckets.tops)
            slots["bottom"] = rng.choice(buckets.bottoms)
        if buckets.footwear:
            slots["footwear"] = rng.choice(buckets.footwear)
        if outerwear_required:
            slots["outerwear"] = rng.choice(buckets.outerwear)

        if oracle.all_compatible(slots.values()):
            logger.info("Accepted %s candidate on attempt %s", shape.value, attempt)
            return Candidate(shape=shape, slots=slots, attempts=attempt)
        logger.debug("Attempt %s: %s candidate rejected", attempt, shape.value)

    logger.info("No compatible candidate after %s attempts", max_attempts)
    return Failure(FailureReason.EXHAUSTED, attempts=max_attempts)


__all__ = ["Candidate", "MAX_ATTEMPTS", "DRESS_PROBABILITY", "sample_candidate"]
