"""
Builders for era summaries and time interpreters used across tests.

The two-era chain used throughout looks like this::

    era 0: 20s slots, 10 slots/epoch   era 1: 1s slots, 100 slots/epoch
    |---------------------------------|--------------------------------| horizon
    slot 0, epoch 0, t=0s             slot 20, epoch 2, t=400s         slot 220, epoch 4, t=600s
"""

from __future__ import annotations

from datetime import UTC, datetime

from era_clock.subspecs.hardfork import (
    EpochNo,
    EpochSize,
    EraInterpreter,
    EraParams,
    Summary,
    mk_interpreter,
)
from era_clock.subspecs.interpreter import TimeInterpreter, Tracer, raise_past_horizon
from era_clock.subspecs.time import SlotLength, StartTime

GENESIS_TIME = StartTime(datetime(2020, 7, 29, 21, 44, 51, tzinfo=UTC))
"""Start time shared by test chains."""

ERA_0_PARAMS = EraParams(epoch_size=EpochSize(10), slot_length=SlotLength.from_seconds(20))
"""Slow first era."""

ERA_1_PARAMS = EraParams(epoch_size=EpochSize(100), slot_length=SlotLength.from_seconds(1))
"""Fast second era."""


def make_two_era_summary(bounded: bool = True) -> Summary:
    """
    Build the two-era summary drawn above.

    Args:
        bounded: End the second era at epoch 4. If False, it never ends.
    """
    return Summary.from_transitions(
        [
            (ERA_0_PARAMS, EpochNo(2)),
            (ERA_1_PARAMS, EpochNo(4) if bounded else None),
        ]
    )


def make_two_era_interpreter(bounded: bool = True) -> EraInterpreter:
    """Era interpreter over the two-era summary."""
    return mk_interpreter(make_two_era_summary(bounded))


def make_time_interpreter(
    era_interpreter: EraInterpreter | None = None,
    tracer: Tracer | None = None,
    start: StartTime = GENESIS_TIME,
) -> TimeInterpreter:
    """Propagating time interpreter over a fixed era interpreter."""
    era = era_interpreter if era_interpreter is not None else make_two_era_interpreter()
    return TimeInterpreter(
        interpreter=lambda: era,
        blockchain_start_time=start,
        tracer=tracer if tracer is not None else RecordingTracer(),
        handle_result=raise_past_horizon,
    )


class RecordingTracer:
    """Tracer that keeps every diagnostic it receives."""

    def __init__(self) -> None:
        """Initialize with no messages."""
        self.messages: list = []

    def __call__(self, msg: object) -> None:
        """Record a diagnostic."""
        self.messages.append(msg)


class CountingAccessor:
    """Era interpreter accessor that counts how often it is called."""

    def __init__(self, era_interpreter: EraInterpreter) -> None:
        """Wrap a fixed era interpreter."""
        self.era_interpreter = era_interpreter
        self.calls = 0

    def __call__(self) -> EraInterpreter:
        """Return the wrapped interpreter."""
        self.calls += 1
        return self.era_interpreter
