"""Canonical taxonomy definitions for closet items and generation requests.

This module centralises the fixed enumerations shared by clothing items and
generation requests: garment categories, the color palette, vibes and weather
tags. Helper functions keep validation consistent between the storage-row
factories and the request payload schemas.
"""

from typing import Dict, List


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


CATEGORIES: List[str] = ["top", "bottom", "dress", "outerwear", "footwear"]

# Stored inventory rows are tagged by garment type rather than category.
GARMENT_TYPES: Dict[str, str] = {
    "tshirt": "top",
    "jeans": "bottom",
    "dress": "dress",
    "jacket": "outerwear",
    "shoes": "footwear",
}

COLORS: List[str] = ["black", "white", "red", "blue", "green", "pink", "yellow"]
VIBES: List[str] = ["fancy", "casual", "comfy", "professional", "sporty", "edgy", "work", "workout"]
WEATHER: List[str] = ["rainy", "sunny", "windy", "cold", "hot", "snowy"]


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Garment types (``tshirt``, ``jacket`` ...) are accepted and mapped to their
    category. Raises a :class:`ValueError` for anything else.
    """

    key = _normalize_key(value)
    key = GARMENT_TYPES.get(key, key)
    if key not in CATEGORIES:
        raise ValueError(
            f"Unsupported category '{value}'. Allowed: {CATEGORIES} or types {sorted(GARMENT_TYPES)}"
        )
    return key


def _validate_member(kind: str, value: str, allowed: List[str]) -> str:
    key = _normalize_key(value)
    if key not in allowed:
        raise ValueError(f"Unsupported {kind} '{value}'. Allowed: {allowed}")
    return key


def validate_color(value: str) -> str:
    return _validate_member("color", value, COLORS)


def validate_vibe(value: str) -> str:
    return _validate_member("vibe", value, VIBES)


def validate_weather(value: str) -> str:
    return _validate_member("weather", value, WEATHER)


__all__ = [
    "CATEGORIES",
    "GARMENT_TYPES",
    "COLORS",
    "VIBES",
    "WEATHER",
    "validate_category",
    "validate_color",
    "validate_vibe",
    "validate_weather",
]
