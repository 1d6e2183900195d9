"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, from_raw_metadata, from_storage_row
from models.generation import Failure, FailureReason, GenerationRequest, Success
from models.outfit import DressOutfit, OutfitShape, SeparatesOutfit

__all__ = [
    "ClothingItem",
    "from_raw_metadata",
    "from_storage_row",
    "GenerationRequest",
    "Success",
    "Failure",
    "FailureReason",
    "DressOutfit",
    "SeparatesOutfit",
    "OutfitShape",
]
