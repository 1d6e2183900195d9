"""Deterministic filtering and bucketing of closet items before sampling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from models.clothing_item import ClothingItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryBuckets:
    """Vibe-matched items split by category, input order preserved."""

    tops: List[ClothingItem] = field(default_factory=list)
    bottoms: List[ClothingItem] = field(default_factory=list)
    dresses: List[ClothingItem] = field(default_factory=list)
    outerwear: List[ClothingItem] = field(default_factory=list)
    footwear: List[ClothingItem] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {
            "tops": len(self.tops),
            "bottoms": len(self.bottoms),
            "dresses": len(self.dresses),
            "outerwear": len(self.outerwear),
            "footwear": len(self.footwear),
        }


_BUCKET_FOR_CATEGORY = {
    "top": "tops",
    "bottom": "bottoms",
    "dress": "dresses",
    "outerwear": "outerwear",
    "footwear": "footwear",
}


def filter_by_vibe(items: Iterable[ClothingItem], vibe: str) -> List[ClothingItem]:
    """Return the items tagged with ``vibe`` in their original order."""

    items = list(items)
    kept = [item for item in items if item.vibe == vibe]
    logger.debug("Vibe filter '%s' kept %s of %s items", vibe, len(kept), len(items))
    return kept


def partition(items: Iterable[ClothingItem]) -> CategoryBuckets:
    """Split items into disjoint category buckets."""

    grouped: Dict[str, List[ClothingItem]] = {bucket: [] for bucket in _BUCKET_FOR_CATEGORY.values()}
    for item in items:
        bucket = _BUCKET_FOR_CATEGORY.get(item.category)
        if bucket is None:
            logger.warning("Skipping item %s with unknown category %s", item.item_id, item.category)
            continue
        grouped[bucket].append(item)
    buckets = CategoryBuckets(**grouped)
    logger.debug("Partitioned items -> %s", buckets.counts())
    return buckets


__all__ = ["CategoryBuckets", "filter_by_vibe", "partition"]
