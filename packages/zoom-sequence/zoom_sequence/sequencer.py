"""Value expansion and paced application."""
from __future__ import annotations

import logging
import time
from typing import Sequence

from zoom_ease import EaseFn
from zoom_sequence.types import ParameterSetter, Phase, Sleep

_log = logging.getLogger(__name__)


def expand(
    start: float,
    end: float,
    steps: int,
    curve: EaseFn,
    logger: logging.Logger | None = None,
) -> list[float]:
    """Sample ``curve`` at ``steps`` evenly spaced points from start to end.

    ``steps == 0`` yields ``[]`` and ``steps == 1`` yields ``[start]``; the
    curve and end value are not consulted in either case.  Otherwise the curve
    is evaluated over ``0..steps-1`` with ``steps - 1`` as its total, so the
    first value is ``start`` and the last is ``end``.
    """
    log = logger or _log
    log.debug("calculating ease range: start=%s, end=%s, steps=%d", start, end, steps)

    if steps == 0:
        log.warning("expand called with 0 steps, returning empty sequence")
        return []
    if steps == 1:
        log.debug("expand called with 1 step, returning start value only")
        return [start]

    delta = end - start
    total = float(steps - 1)
    values = [curve(float(i), start, delta, total) for i in range(steps)]
    log.debug("generated %d eased values", len(values))
    return values


def apply_paced(
    values: Sequence[float],
    duration: float,
    setter: ParameterSetter,
    sleep: Sleep | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Apply ``values`` in order, sleeping ``duration / len(values)`` after each.

    A setter exception propagates at once and the remaining values are not
    applied.  Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("apply_paced requires at least one value")

    log = logger or _log
    pause = sleep or time.sleep
    count = len(values)
    interval = duration / count
    log.info("applying %d zoom steps over %.3fs", count, duration)
    log.debug("interval per step: %.6fs", interval)

    for i, value in enumerate(values, start=1):
        log.debug("step %d/%d: setting zoom factor to %.4f", i, count, value)
        setter.set(value)
        pause(interval)

    log.info("all zoom steps applied successfully")


def run_phase(
    phase: Phase,
    setter: ParameterSetter,
    sleep: Sleep | None = None,
    logger: logging.Logger | None = None,
) -> list[float]:
    """Expand a phase's transition and pace it through ``setter``.

    Returns the applied values.  A transition with zero steps applies nothing.
    """
    tr = phase.transition
    values = expand(tr.start, tr.end, tr.steps, tr.curve, logger=logger)
    if values:
        apply_paced(values, phase.duration, setter, sleep=sleep, logger=logger)
    return values
