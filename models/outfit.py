"""Outfit shapes produced by the generator."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from models.clothing_item import ClothingItem


class OutfitShape(str, Enum):
    DRESS = "dress"
    SEPARATES = "separates"


@dataclass(frozen=True)
class DressOutfit:
    """A dress with optional outerwear and footwear."""

    dress: ClothingItem
    outerwear: Optional[ClothingItem] = None
    footwear: Optional[ClothingItem] = None

    shape = OutfitShape.DRESS

    def slots(self) -> Dict[str, Optional[ClothingItem]]:
        return {"dress": self.dress, "outerwear": self.outerwear, "footwear": self.footwear}

    def items(self) -> List[ClothingItem]:
        return [item for item in self.slots().values() if item is not None]

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"shape": self.shape.value}
        payload.update({slot: item.item_id for slot, item in self.slots().items() if item is not None})
        return payload


@dataclass(frozen=True)
class SeparatesOutfit:
    """A top and bottom pair with optional outerwear and footwear."""

    top: ClothingItem
    bottom: ClothingItem
    outerwear: Optional[ClothingItem] = None
    footwear: Optional[ClothingItem] = None

    shape = OutfitShape.SEPARATES

    def slots(self) -> Dict[str, Optional[ClothingItem]]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "outerwear": self.outerwear,
            "footwear": self.footwear,
        }

    def items(self) -> List[ClothingItem]:
        return [item for item in self.slots().values() if item is not None]

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"shape": self.shape.value}
        payload.update({slot: item.item_id for slot, item in self.slots().items() if item is not None})
        return payload


Outfit = Union[DressOutfit, SeparatesOutfit]

__all__ = ["OutfitShape", "DressOutfit", "SeparatesOutfit", "Outfit"]
