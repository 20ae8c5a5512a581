"""Command configuration: defaults, argument parsers and config dataclasses."""
from __future__ import annotations

import argparse
import logging
import math
import re
from dataclasses import dataclass, field

from zoom_ease import EasingCurve, EasingError
from zoom_sequence import Phase, Transition, TwoPhaseAnimation

MIN_STEPS = 1  # instant, no animation
MIN_DURATION = 0.001
MIN_DURATION_TEXT = "1ms"

DEFAULT_STEPS = 15
DEFAULT_DURATION = "250ms"
DEFAULT_HOLD = "1s"
DEFAULT_EASE = "quad:in"
DEFAULT_OUT_EASE = "quad:out"
DEFAULT_LOG_LEVEL = "info"

LOG_LEVELS: dict[str, int] = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "sec": 1.0,
    "secs": 1.0,
    "second": 1.0,
    "seconds": 1.0,
    "m": 60.0,
    "min": 60.0,
    "mins": 60.0,
    "minute": 60.0,
    "minutes": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
    "hour": 3600.0,
    "hours": 3600.0,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_BARE = re.compile(_NUMBER)
# every term of a compound duration needs a unit
_TERM = re.compile(rf"\s*({_NUMBER})\s*([a-zµ]+)\s*")


def parse_steps(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid steps, must be number: {text}"
        ) from None
    if value < MIN_STEPS:
        raise argparse.ArgumentTypeError(
            f"invalid steps, must be at least {MIN_STEPS}: {text}"
        )
    return value


def _duration_seconds(text: str) -> float:
    s = text.strip().lower()
    if not s:
        raise ValueError("empty duration")
    if _BARE.fullmatch(s):
        return float(s)
    total = 0.0
    pos = 0
    while pos < len(s):
        m = _TERM.match(s, pos)
        if m is None:
            raise ValueError(f"unexpected input at {s[pos:]!r}")
        number, unit = m.groups()
        if unit not in _UNITS:
            raise ValueError(f"unknown unit {unit!r}")
        total += float(number) * _UNITS[unit]
        pos = m.end()
    return total


def parse_zoom(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid zoom, must be number: {text}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"invalid zoom, must be finite: {text}")
    return value


def parse_duration(text: str) -> float:
    """Parse a duration like ``250ms``, ``1.5s`` or ``1m 30s`` into seconds."""
    try:
        seconds = _duration_seconds(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid duration format: {err}") from None
    # 1e-12 absorbs unit-conversion rounding, e.g. "1000us"
    if seconds < MIN_DURATION - 1e-12:
        raise argparse.ArgumentTypeError(
            f"Duration must be at least {MIN_DURATION_TEXT}, got {text}"
        )
    return seconds


def parse_ease(text: str) -> EasingCurve:
    try:
        return EasingCurve.parse(text)
    except EasingError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def parse_log_level(text: str) -> int:
    try:
        return LOG_LEVELS[text.strip().lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"invalid log level: {text}") from None


@dataclass(frozen=True)
class ZoomConfig:
    """Settings for ``zoom``: one transition from the current value to target."""

    target: float
    steps: int = DEFAULT_STEPS
    duration: float = 0.25
    ease: EasingCurve = field(default_factory=lambda: EasingCurve.parse(DEFAULT_EASE))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ZoomConfig:
        return cls(
            target=args.ztarget,
            steps=args.steps,
            duration=args.duration,
            ease=args.ease,
        )

    def phase(self, current: float) -> Phase:
        return Phase(
            Transition(current, self.target, self.steps, self.ease),
            self.duration,
        )


@dataclass(frozen=True)
class InOutConfig:
    """Settings for ``inout``: zinit -> target, hold, target -> zinit.

    ``zinit`` is None when the initial value should be read from Hyprland.
    """

    target: float
    steps: int = DEFAULT_STEPS
    duration: float = 0.25
    zinit: float | None = None
    in_ease: EasingCurve = field(default_factory=lambda: EasingCurve.parse(DEFAULT_EASE))
    out_ease: EasingCurve = field(
        default_factory=lambda: EasingCurve.parse(DEFAULT_OUT_EASE)
    )
    zduration: float = 1.0

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> InOutConfig:
        return cls(
            target=args.ztarget,
            steps=args.steps,
            duration=args.duration,
            zinit=args.zinit,
            in_ease=args.in_ease,
            out_ease=args.out_ease,
            zduration=args.zduration,
        )

    def animation(self, zinit: float) -> TwoPhaseAnimation:
        return TwoPhaseAnimation(
            phase_in=Phase(
                Transition(zinit, self.target, self.steps, self.in_ease),
                self.duration,
            ),
            hold=self.zduration,
            phase_out=Phase(
                Transition(self.target, zinit, self.steps, self.out_ease),
                self.duration,
            ),
        )
