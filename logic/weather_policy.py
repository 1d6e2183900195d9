"""Weather-driven completeness rules."""
from __future__ import annotations

from typing import FrozenSet

OUTERWEAR_WEATHER: FrozenSet[str] = frozenset({"rainy", "windy", "cold", "snowy"})


def requires_outerwear(weather: str) -> bool:
    """Return True when the weather tag calls for a jacket."""

    return weather.strip().lower() in OUTERWEAR_WEATHER


__all__ = ["OUTERWEAR_WEATHER", "requires_outerwear"]
