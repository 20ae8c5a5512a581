"""zoom-ease - Penner easing curves addressed by ``family:qualifier`` names."""
from __future__ import annotations

from zoom_ease.easing import EaseFn
from zoom_ease.registry import (
    EASINGS,
    FAMILIES,
    QUALIFIERS,
    EasingCurve,
    EasingError,
    EasingFormatError,
    UnknownFamilyError,
    UnknownQualifierError,
    get_easing,
)

__all__ = [
    "EASINGS",
    "FAMILIES",
    "QUALIFIERS",
    "EaseFn",
    "EasingCurve",
    "EasingError",
    "EasingFormatError",
    "UnknownFamilyError",
    "UnknownQualifierError",
    "get_easing",
]
