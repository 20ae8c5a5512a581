"""Tests for the two-phase runner."""

import pytest

from zoom_ease import EasingCurve
from zoom_sequence import (
    Phase,
    SetterError,
    Transition,
    TwoPhaseAnimation,
    TwoPhaseRunner,
    run_two_phase,
)
from zoom_sequence.phases import DONE, FAILED, HOLDING, IDLE, PHASE_IN, PHASE_OUT


class Recorder:
    """Shared event log for setter calls and sleeps."""

    def __init__(self, fail_at: float | None = None) -> None:
        self.events: list[tuple[str, float]] = []
        self.fail_at = fail_at

    def set(self, value: float) -> None:
        if self.fail_at is not None and value == pytest.approx(self.fail_at):
            raise SetterError(f"rejected {value}")
        self.events.append(("set", value))

    def sleep(self, seconds: float) -> None:
        self.events.append(("sleep", seconds))

    def sets(self) -> list[float]:
        return [v for kind, v in self.events if kind == "set"]


def _animation(
    zinit: float = 1.0,
    target: float = 2.0,
    steps: int = 5,
    duration: float = 0.25,
    hold: float = 1.0,
    in_ease: str = "lin:in",
    out_ease: str = "lin:in",
) -> TwoPhaseAnimation:
    return TwoPhaseAnimation(
        phase_in=Phase(Transition(zinit, target, steps, EasingCurve.parse(in_ease)), duration),
        hold=hold,
        phase_out=Phase(Transition(target, zinit, steps, EasingCurve.parse(out_ease)), duration),
    )


class TestSequencing:
    """Phases execute in order: in, hold, out."""

    def test_full_run(self):
        rec = Recorder()
        run_two_phase(_animation(), rec, sleep=rec.sleep)
        assert rec.sets() == [1.0, 1.25, 1.5, 1.75, 2.0, 2.0, 1.75, 1.5, 1.25, 1.0]

    def test_hold_has_no_setter_calls(self):
        rec = Recorder()
        run_two_phase(_animation(steps=3, duration=0.3, hold=1.0), rec, sleep=rec.sleep)
        hold_index = rec.events.index(("sleep", 1.0))
        # last phase-in pause, then the hold, then the first phase-out value
        assert rec.events[hold_index - 1] == ("sleep", pytest.approx(0.1))
        assert rec.events[hold_index + 1] == ("set", 2.0)
        assert rec.events.count(("sleep", 1.0)) == 1

    def test_event_order(self):
        rec = Recorder()
        run_two_phase(_animation(steps=2, duration=0.2, hold=0.5), rec, sleep=rec.sleep)
        assert rec.events == [
            ("set", 1.0), ("sleep", 0.1), ("set", 2.0), ("sleep", 0.1),
            ("sleep", 0.5),
            ("set", 2.0), ("sleep", 0.1), ("set", 1.0), ("sleep", 0.1),
        ]

    def test_phases_use_their_own_curves_and_durations(self):
        rec = Recorder()
        anim = TwoPhaseAnimation(
            phase_in=Phase(Transition(0.0, 4.0, 3, EasingCurve.parse("quad:in")), 0.3),
            hold=0.0,
            phase_out=Phase(Transition(4.0, 0.0, 2, EasingCurve.parse("quad:out")), 1.0),
        )
        run_two_phase(anim, rec, sleep=rec.sleep)
        assert rec.sets() == pytest.approx([0.0, 1.0, 4.0, 4.0, 0.0])
        sleeps = [v for kind, v in rec.events if kind == "sleep"]
        assert sleeps == pytest.approx([0.1, 0.1, 0.1, 0.0, 0.5, 0.5])

    def test_single_step_phases(self):
        """One step per phase applies each phase's start value."""
        rec = Recorder()
        run_two_phase(_animation(steps=1), rec, sleep=rec.sleep)
        assert rec.sets() == [1.0, 2.0]


class TestFailure:
    """A setter failure stops the run."""

    def test_phase_in_failure_skips_hold_and_phase_out(self):
        rec = Recorder(fail_at=1.5)
        with pytest.raises(SetterError):
            run_two_phase(_animation(), rec, sleep=rec.sleep)
        assert rec.sets() == [1.0, 1.25]
        assert ("sleep", 1.0) not in rec.events
        assert len([e for e in rec.events if e[0] == "sleep"]) == 2

    def test_phase_out_failure(self):
        rec = Recorder(fail_at=1.75)
        anim = _animation(steps=5)
        anim = TwoPhaseAnimation(
            phase_in=Phase(Transition(1.0, 2.0, 2, EasingCurve.parse("lin:in")), 0.2),
            hold=1.0,
            phase_out=anim.phase_out,
        )
        runner = TwoPhaseRunner(anim, rec, sleep=rec.sleep)
        with pytest.raises(SetterError):
            runner.run()
        assert runner.state == FAILED
        assert rec.sets() == [1.0, 2.0, 2.0]
        assert ("sleep", 1.0) in rec.events


class TestStates:
    """State transitions and callbacks."""

    def test_initial_state(self):
        rec = Recorder()
        runner = TwoPhaseRunner(_animation(), rec, sleep=rec.sleep)
        assert runner.state == IDLE

    def test_transitions_on_success(self):
        rec = Recorder()
        seen = []
        runner = TwoPhaseRunner(
            _animation(), rec, sleep=rec.sleep,
            on_transition=lambda old, new: seen.append((old, new)),
        )
        runner.run()
        assert runner.state == DONE
        assert seen == [
            (IDLE, PHASE_IN),
            (PHASE_IN, HOLDING),
            (HOLDING, PHASE_OUT),
            (PHASE_OUT, DONE),
        ]

    def test_transitions_on_phase_in_failure(self):
        rec = Recorder(fail_at=1.0)
        seen = []
        runner = TwoPhaseRunner(
            _animation(), rec, sleep=rec.sleep,
            on_transition=lambda old, new: seen.append((old, new)),
        )
        with pytest.raises(SetterError):
            runner.run()
        assert seen == [(IDLE, PHASE_IN), (PHASE_IN, FAILED)]

    def test_runner_runs_once(self):
        rec = Recorder()
        runner = TwoPhaseRunner(_animation(), rec, sleep=rec.sleep)
        runner.run()
        with pytest.raises(RuntimeError):
            runner.run()

    def test_failed_runner_does_not_rerun(self):
        rec = Recorder(fail_at=1.0)
        runner = TwoPhaseRunner(_animation(), rec, sleep=rec.sleep)
        with pytest.raises(SetterError):
            runner.run()
        assert runner.state == FAILED
        with pytest.raises(RuntimeError, match="'failed'"):
            runner.run()
        assert rec.sets() == []
