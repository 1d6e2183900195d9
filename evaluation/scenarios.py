"""Evaluation scenarios covering vibe, weather and color-clash outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    vibe: str
    weather: str
    closet_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    ignore_outerwear_requirement: bool = False
    seed: int = 7


def _item(item_id: str, garment_type: str, color: str, vibe: str) -> Dict[str, object]:
    return {
        "clothing_id": item_id,
        "type": garment_type,
        "color": color,
        "vibe": vibe,
        "photo_url": f"https://example.com/{item_id}.jpg",
    }


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="casual_sunny_separates",
        description="Black tee, white jeans and black shoes make a complete casual outfit.",
        vibe="casual",
        weather="sunny",
        closet_items=[
            _item("tee_black", "tshirt", "black", "casual"),
            _item("jeans_white", "jeans", "white", "casual"),
            _item("shoes_black", "shoes", "black", "casual"),
        ],
        expectations={"status": "ok", "slots": {"top": "tee_black", "bottom": "jeans_white", "footwear": "shoes_black"}},
    ),
    EvaluationScenario(
        name="no_matching_vibe",
        description="Nothing in the closet is tagged casual.",
        vibe="casual",
        weather="sunny",
        closet_items=[
            _item("dress_black", "dress", "black", "fancy"),
            _item("tee_red", "tshirt", "red", "edgy"),
        ],
        expectations={"status": "failed", "reason": "no_matching_vibe"},
    ),
    EvaluationScenario(
        name="rainy_without_jacket",
        description="Rain needs a jacket but the casual closet has none.",
        vibe="casual",
        weather="rainy",
        closet_items=[
            _item("tee_black", "tshirt", "black", "casual"),
            _item("jeans_white", "jeans", "white", "casual"),
            _item("jacket_blue", "jacket", "blue", "fancy"),
        ],
        expectations={"status": "failed", "reason": "missing_required_outerwear"},
    ),
    EvaluationScenario(
        name="rainy_proceed_without_jacket",
        description="Caller chose to go out without a jacket anyway.",
        vibe="casual",
        weather="rainy",
        closet_items=[
            _item("tee_black", "tshirt", "black", "casual"),
            _item("jeans_white", "jeans", "white", "casual"),
        ],
        ignore_outerwear_requirement=True,
        expectations={"status": "ok", "slots": {"top": "tee_black", "bottom": "jeans_white"}},
    ),
    EvaluationScenario(
        name="edgy_color_clash",
        description="A red tee and green jeans never agree, so sampling runs out.",
        vibe="edgy",
        weather="sunny",
        closet_items=[
            _item("tee_red", "tshirt", "red", "edgy"),
            _item("jeans_green", "jeans", "green", "edgy"),
        ],
        expectations={"status": "failed", "reason": "exhausted", "attempts": 100},
    ),
    EvaluationScenario(
        name="fancy_dress",
        description="A black dress with white shoes.",
        vibe="fancy",
        weather="sunny",
        closet_items=[
            _item("dress_black", "dress", "black", "fancy"),
            _item("shoes_white", "shoes", "white", "fancy"),
        ],
        expectations={"status": "ok", "slots": {"dress": "dress_black", "footwear": "shoes_white"}},
    ),
    EvaluationScenario(
        name="snowy_dress_with_jacket",
        description="Snow adds the only fancy jacket on top of the dress.",
        vibe="fancy",
        weather="snowy",
        closet_items=[
            _item("dress_black", "dress", "black", "fancy"),
            _item("jacket_white", "jacket", "white", "fancy"),
        ],
        expectations={"status": "ok", "slots": {"dress": "dress_black", "outerwear": "jacket_white"}},
    ),
]

__all__ = ["EvaluationScenario", "SCENARIOS"]
