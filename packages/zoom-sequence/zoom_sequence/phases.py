"""Two-phase (in, hold, out) animation state machine."""
from __future__ import annotations

import logging
import time
from typing import Callable

from zoom_sequence.sequencer import run_phase
from zoom_sequence.types import ParameterSetter, Sleep, TwoPhaseAnimation

_log = logging.getLogger(__name__)

IDLE = "idle"
PHASE_IN = "phase_in"
HOLDING = "holding"
PHASE_OUT = "phase_out"
DONE = "done"
FAILED = "failed"


class TwoPhaseRunner:
    """Runs a TwoPhaseAnimation through its states strictly in order.

    ``idle -> phase_in -> holding -> phase_out -> done``.  A setter failure in
    either phase moves the runner to ``failed`` and re-raises; later states
    never execute.  ``on_transition(old, new)`` is called on every change.
    """

    def __init__(
        self,
        animation: TwoPhaseAnimation,
        setter: ParameterSetter,
        sleep: Sleep | None = None,
        on_transition: Callable[[str, str], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._animation = animation
        self._setter = setter
        self._sleep = sleep or time.sleep
        self._on_transition = on_transition
        self._log = logger or _log
        self._state = IDLE

    @property
    def state(self) -> str:
        return self._state

    def _enter(self, state: str) -> None:
        old = self._state
        self._state = state
        self._log.debug("two-phase state: %s -> %s", old, state)
        if self._on_transition is not None:
            self._on_transition(old, state)

    def run(self) -> None:
        if self._state != IDLE:
            raise RuntimeError(f"TwoPhaseRunner already ran (state {self._state!r})")

        anim = self._animation
        try:
            self._enter(PHASE_IN)
            run_phase(anim.phase_in, self._setter, sleep=self._sleep, logger=self._log)

            self._enter(HOLDING)
            self._log.info("zoom-in phase completed, sleeping for %.3fs", anim.hold)
            self._sleep(anim.hold)

            self._enter(PHASE_OUT)
            self._log.info("starting zoom-out phase")
            run_phase(anim.phase_out, self._setter, sleep=self._sleep, logger=self._log)
        except Exception:
            failed_in = self._state
            self._enter(FAILED)
            self._log.error("two-phase animation failed during %s", failed_in)
            raise

        self._enter(DONE)


def run_two_phase(
    animation: TwoPhaseAnimation,
    setter: ParameterSetter,
    sleep: Sleep | None = None,
    on_transition: Callable[[str, str], None] | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Run ``animation`` to completion or to the first setter failure."""
    TwoPhaseRunner(
        animation, setter, sleep=sleep, on_transition=on_transition, logger=logger
    ).run()
