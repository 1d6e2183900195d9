"""Color compatibility relation used to validate candidate outfits."""
from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import COLORS

logger = logging.getLogger(__name__)

# Adjacency as tagged by the closet app. Not every row lists its reverse
# (pink -> blue has no blue -> pink), so the oracle closes it.
COMPATIBILITY_TABLE: Dict[str, Tuple[str, ...]] = {
    "black": ("white", "red", "blue", "green", "pink", "yellow", "black"),
    "white": ("black", "red", "blue", "green", "pink", "yellow", "white"),
    "red": ("black", "white", "blue", "red"),
    "blue": ("white", "black", "red", "yellow", "blue"),
    "green": ("black", "white", "yellow", "green"),
    "pink": ("black", "white", "blue", "pink"),
    "yellow": ("black", "white", "blue", "green", "yellow"),
}


class ColorCompatibilityOracle:
    """Symmetric, reflexive compatibility relation over the color palette.

    The relation is built once from an adjacency table and never mutated, so a
    single instance can be shared by every generation request.
    """

    def __init__(self, table: Mapping[str, Iterable[str]], palette: Iterable[str] = COLORS) -> None:
        pairs = set()
        for color in palette:
            pairs.add(frozenset((color,)))
        for color, partners in table.items():
            for partner in partners:
                pairs.add(frozenset((color, partner)))
        self._pairs: FrozenSet[FrozenSet[str]] = frozenset(pairs)

    def compatible(self, color1: str, color2: str) -> bool:
        """Return True when the two colors may be worn together."""

        return color1 == color2 or frozenset((color1, color2)) in self._pairs

    def all_compatible(self, items: Iterable[ClothingItem]) -> bool:
        """Return True when every pair of items has compatible colors."""

        for first, second in combinations(list(items), 2):
            if not self.compatible(first.color, second.color):
                logger.debug(
                    "color clash %s(%s) / %s(%s)", first.item_id, first.color, second.item_id, second.color
                )
                return False
        return True


DEFAULT_ORACLE = ColorCompatibilityOracle(COMPATIBILITY_TABLE)


def compatible(color1: str, color2: str) -> bool:
    return DEFAULT_ORACLE.compatible(color1, color2)


__all__ = ["COMPATIBILITY_TABLE", "ColorCompatibilityOracle", "DEFAULT_ORACLE", "compatible"]
