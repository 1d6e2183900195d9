"""Pydantic schemas for validating generation payloads at the boundary."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.clothing_item import ClothingItem
from models.generation import GenerationRequest
from models.taxonomy import validate_category, validate_color, validate_vibe, validate_weather


class ClothingItemPayload(BaseModel):
    """Input contract for a single closet item.

    Enumerated fields go through the taxonomy validators, so the boundary
    accepts exactly what ``ClothingItem.from_raw_metadata`` accepts.
    """

    item_id: str = Field(min_length=1)
    category: str
    color: str
    vibe: str
    image_ref: str = ""

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        return validate_category(value)

    @field_validator("color")
    @classmethod
    def _known_color(cls, value: str) -> str:
        return validate_color(value)

    @field_validator("vibe")
    @classmethod
    def _known_vibe(cls, value: str) -> str:
        return validate_vibe(value)

    def to_item(self) -> ClothingItem:
        return ClothingItem(
            item_id=self.item_id,
            category=self.category,
            color=self.color,
            vibe=self.vibe,
            image_ref=self.image_ref,
        )


class GenerationRequestPayload(BaseModel):
    """Envelope for one outfit generation call."""

    vibe: str
    weather: str
    items: List[ClothingItemPayload] = []
    seed: Optional[int] = None
    ignore_outerwear_requirement: bool = False

    @field_validator("vibe")
    @classmethod
    def _known_vibe(cls, value: str) -> str:
        return validate_vibe(value)

    @field_validator("weather")
    @classmethod
    def _known_weather(cls, value: str) -> str:
        return validate_weather(value)

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            vibe=self.vibe,
            weather=self.weather,
            items=tuple(item.to_item() for item in self.items),
            ignore_outerwear_requirement=self.ignore_outerwear_requirement,
        )


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "ClothingItemPayload",
    "GenerationRequestPayload",
    "ValidationResult",
    "validation_failure",
]
