"""Shared types and protocols for the zoom sequencer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from zoom_ease import EasingCurve

Sleep = Callable[[float], None]


class SetterError(Exception):
    """Raised by a ParameterSetter when a value cannot be applied."""


@runtime_checkable
class ParameterSetter(Protocol):
    """Applies a value to the driven parameter, synchronously.

    Implementations raise on failure; the sequencer treats any exception as
    fatal to the running animation.
    """

    def set(self, value: float) -> None:
        ...


@runtime_checkable
class ValueProvider(Protocol):
    """Reports the parameter's current value."""

    def get_current(self) -> float:
        ...


@dataclass(frozen=True)
class Transition:
    """One sweep from ``start`` to ``end`` in ``steps`` discrete values."""

    start: float
    end: float
    steps: int
    curve: EasingCurve

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")


@dataclass(frozen=True)
class Phase:
    """A transition paced over ``duration`` seconds."""

    transition: Transition
    duration: float


@dataclass(frozen=True)
class TwoPhaseAnimation:
    """Zoom in, hold for ``hold`` seconds, zoom out."""

    phase_in: Phase
    hold: float
    phase_out: Phase
