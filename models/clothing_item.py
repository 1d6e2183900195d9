"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from models.taxonomy import validate_category, validate_color, validate_vibe


@dataclass(frozen=True)
class ClothingItem:
    """An immutable item from the user's closet.

    ``image_ref`` is owned by the image store and is carried through untouched.
    """

    item_id: str
    category: str
    color: str
    vibe: str
    image_ref: str = ""


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from loose metadata.

    Either ``category`` or a garment ``type`` may be supplied.
    """

    if not metadata.get("category") and metadata.get("type"):
        metadata = {**metadata, "category": metadata["type"]}
    required_fields = ["item_id", "category", "color", "vibe"]
    missing = [field for field in required_fields if not metadata.get(field)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=str(metadata["item_id"]),
        category=validate_category(str(metadata["category"])),
        color=validate_color(str(metadata["color"])),
        vibe=validate_vibe(str(metadata["vibe"])),
        image_ref=str(metadata.get("image_ref") or ""),
    )


def from_storage_row(row: Dict[str, Any]) -> ClothingItem:
    """Map a ``clothing_item`` storage row onto a :class:`ClothingItem`."""

    return from_raw_metadata(
        {
            "item_id": row.get("clothing_id"),
            "type": row.get("type"),
            "color": row.get("color"),
            "vibe": row.get("vibe"),
            "image_ref": row.get("photo_url"),
        }
    )


__all__ = ["ClothingItem", "from_raw_metadata", "from_storage_row"]
