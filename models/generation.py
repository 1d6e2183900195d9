"""Request and result values for a single outfit generation call."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from models.clothing_item import ClothingItem
from models.outfit import Outfit


class FailureReason(str, Enum):
    NO_MATCHING_VIBE = "no_matching_vibe"
    MISSING_REQUIRED_OUTERWEAR = "missing_required_outerwear"
    EXHAUSTED = "exhausted"


class Remediation(str, Enum):
    ADD_ITEMS = "add_items"
    CHANGE_VIBE = "change_vibe"
    PROCEED_WITHOUT_OUTERWEAR = "proceed_without_outerwear"
    REGENERATE = "regenerate"


_REMEDIATIONS: Dict[FailureReason, Tuple[Remediation, ...]] = {
    FailureReason.NO_MATCHING_VIBE: (Remediation.ADD_ITEMS, Remediation.CHANGE_VIBE),
    FailureReason.MISSING_REQUIRED_OUTERWEAR: (
        Remediation.ADD_ITEMS,
        Remediation.CHANGE_VIBE,
        Remediation.PROCEED_WITHOUT_OUTERWEAR,
    ),
    FailureReason.EXHAUSTED: (Remediation.ADD_ITEMS, Remediation.CHANGE_VIBE, Remediation.REGENERATE),
}

_MESSAGES: Dict[FailureReason, str] = {
    FailureReason.NO_MATCHING_VIBE: "No closet items carry the requested vibe.",
    FailureReason.MISSING_REQUIRED_OUTERWEAR: "The weather calls for outerwear but none matches the requested vibe.",
    FailureReason.EXHAUSTED: "Could not find matching colors for an outfit.",
}


@dataclass(frozen=True)
class GenerationRequest:
    """Everything a generation call needs besides randomness.

    ``ignore_outerwear_requirement`` is the caller's explicit opt-out after a
    ``MISSING_REQUIRED_OUTERWEAR`` failure; the generator never sets it itself.
    """

    vibe: str
    weather: str
    items: Tuple[ClothingItem, ...] = ()
    ignore_outerwear_requirement: bool = False


@dataclass(frozen=True)
class Success:
    outfit: Outfit
    attempts: int

    ok = True


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    attempts: int = 0

    ok = False

    @property
    def remediations(self) -> Tuple[Remediation, ...]:
        return _REMEDIATIONS[self.reason]

    @property
    def message(self) -> str:
        return _MESSAGES[self.reason]


GenerationResult = Union[Success, Failure]

__all__ = [
    "FailureReason",
    "Remediation",
    "GenerationRequest",
    "Success",
    "Failure",
    "GenerationResult",
]
