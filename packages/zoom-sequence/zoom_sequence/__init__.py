"""zoom-sequence - Eased value sequences paced in real time."""
from __future__ import annotations

from zoom_sequence.phases import TwoPhaseRunner, run_two_phase
from zoom_sequence.sequencer import apply_paced, expand, run_phase
from zoom_sequence.types import (
    ParameterSetter,
    Phase,
    SetterError,
    Transition,
    TwoPhaseAnimation,
    ValueProvider,
)

__all__ = [
    "ParameterSetter",
    "Phase",
    "SetterError",
    "Transition",
    "TwoPhaseAnimation",
    "TwoPhaseRunner",
    "ValueProvider",
    "apply_paced",
    "expand",
    "run_phase",
    "run_two_phase",
]
