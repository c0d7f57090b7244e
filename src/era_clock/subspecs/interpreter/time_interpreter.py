"""
Time Interpreter
================

A handle for running era-spanning queries.

What It Bundles
---------------
1. **Accessor**: returns the current era interpreter. The instance behind it
   may be replaced at any time as more chain history becomes known.
2. **Start time**: fixed for the lifetime of the handle.
3. **Tracer**: receives a diagnostic whenever a query fails past the horizon.
4. **Result handler**: decides what a horizon failure turns into.

Failure Policies
----------------
The result handler is only called when a query fails. What it does is the
policy of the handle:

- `raise_past_horizon` (default): re-raise the `PastHorizonError`. The
  caller is expected to handle it.
- `never_fails`: raise `UnexpectedPastHorizonError` instead. Used where the
  caller knows failure cannot happen, e.g. a chain that never forks. If it
  happens anyway, that knowledge was wrong and the process must not carry on
  with a made-up answer.
- `maybe_time_interpreter`: return None instead of raising.

Effect Transforms
-----------------
`hoist_time_interpreter` rewraps every effectful part of a handle (accessor,
tracer, result handler) with a transform. A transform takes a zero-argument
action, runs it, and returns its result in a new context: catching a
failure, converting it, adding a lock, and so on. Start time and query
semantics never change.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, NoReturn, TypeVar

from era_clock.subspecs import metrics
from era_clock.subspecs.hardfork import (
    EpochSize,
    EraInterpreter,
    mk_interpreter,
    never_forks_summary,
)
from era_clock.subspecs.query import Query, run_query
from era_clock.subspecs.time import RelativeTime, SlotLength, StartTime, WallClock, utc_now
from era_clock.types import PastHorizonError, UnexpectedPastHorizonError

from .log import TimeInterpreterLog, Tracer, log_time_interpreter_msg

T = TypeVar("T")

EffectTransform = Callable[[Callable[[], Any]], Any]
"""Runs a zero-argument action in another context and returns its result."""

ResultHandler = Callable[[PastHorizonError], Any]
"""Turns a horizon failure into the handle's result (or raises)."""


def raise_past_horizon(error: PastHorizonError) -> NoReturn:
    """Default result handler: propagate the failure to the caller."""
    raise error


@dataclass(frozen=True, slots=True)
class TimeInterpreter:
    """
    A way to run `Query` values with a chain start time as context.

    Handles are long-lived and shared. They hold no mutable state of their
    own; concurrent calls to `interpret` are independent.
    """

    interpreter: Callable[[], EraInterpreter]
    """Accessor for the current era interpreter."""

    blockchain_start_time: StartTime
    """When the chain started."""

    tracer: Tracer = log_time_interpreter_msg
    """Sink for horizon failure diagnostics."""

    handle_result: ResultHandler = raise_past_horizon
    """Policy applied to horizon failures."""

    def interpret(self, query: Query[T]) -> T:
        """Run a query. See `interpret_query`."""
        return interpret_query(self, query)


def interpret_query(ti: TimeInterpreter, query: Query[T]) -> T:
    """
    Run a query against the current era interpreter.

    The accessor is called exactly once. The instance it returns is used for
    every leaf of the query, even if the accessor's source changes meanwhile.

    On a horizon failure, the failure is counted in the metrics registry, the
    diagnostic goes to the tracer and the failure to the result handler. The
    handler's return value (if any) becomes the result.

    Raises:
        PastHorizonError: With the default result handler.
    """
    era_interpreter = ti.interpreter()
    try:
        return run_query(ti.blockchain_start_time, era_interpreter, query)
    except PastHorizonError as e:
        error = e

    metrics.past_horizon_total.inc()
    ti.tracer(TimeInterpreterLog(reason=None, start_time=ti.blockchain_start_time, error=error))
    return ti.handle_result(error)


def hoist_time_interpreter(transform: EffectTransform, ti: TimeInterpreter) -> TimeInterpreter:
    """
    Change the context the effects of a TimeInterpreter run in.

    Args:
        transform: Runs an action in the new context.
        ti: Handle to adapt.

    Returns:
        A handle whose accessor, tracer and result handler all run through
        `transform`. The start time is carried over unchanged.
    """

    def interpreter() -> EraInterpreter:
        return transform(ti.interpreter)

    def tracer(msg: TimeInterpreterLog) -> None:
        transform(lambda: ti.tracer(msg))

    def handle_result(error: PastHorizonError) -> Any:
        return transform(lambda: ti.handle_result(error))

    return TimeInterpreter(
        interpreter=interpreter,
        blockchain_start_time=ti.blockchain_start_time,
        tracer=tracer,
        handle_result=handle_result,
    )


def never_fails(reason: str, ti: TimeInterpreter) -> TimeInterpreter:
    """
    Declare that queries run through a handle can never fail past the horizon.

    Unexpected failures are traced with `reason` attached (error severity with
    the default tracer), then raised as `UnexpectedPastHorizonError`. The
    returned handle never hands a `PastHorizonError` to its caller.

    Args:
        reason: Why the failure should be impossible.
        ti: Handle whose failures propagate as `PastHorizonError`.
    """

    def escalate(action: Callable[[], Any]) -> Any:
        try:
            return action()
        except PastHorizonError as e:
            raise UnexpectedPastHorizonError(reason, e) from e

    hoisted = hoist_time_interpreter(escalate, ti)

    def tracer(msg: TimeInterpreterLog) -> None:
        hoisted.tracer(replace(msg, reason=reason))

    return replace(hoisted, tracer=tracer)


def expect_horizon_as_none(action: Callable[[], Any]) -> Any:
    """Effect transform mapping horizon failures to None."""
    try:
        return action()
    except PastHorizonError:
        return None


def maybe_time_interpreter(ti: TimeInterpreter) -> TimeInterpreter:
    """Adapt a handle so that horizon failures yield None instead of raising."""
    return hoist_time_interpreter(expect_horizon_as_none, ti)


def mk_time_interpreter(
    start: StartTime,
    epoch_size: EpochSize,
    slot_length: SlotLength,
    tracer: Tracer = log_time_interpreter_msg,
) -> TimeInterpreter:
    """
    Set up a TimeInterpreter for a chain that never forks.

    Failures propagate as `PastHorizonError`. With a single unbounded era
    they cannot actually happen, which makes the result a good candidate for
    `never_fails`.
    """
    era_interpreter = mk_interpreter(never_forks_summary(epoch_size, slot_length))
    return TimeInterpreter(
        interpreter=lambda: era_interpreter,
        blockchain_start_time=start,
        tracer=tracer,
        handle_result=raise_past_horizon,
    )


def current_relative_time(
    ti: TimeInterpreter, time_fn: Callable[[], datetime] = utc_now
) -> RelativeTime:
    """
    The current wall-clock time relative to the handle's start time.

    Before the start time (only when launching testnets), this is 0.
    """
    return WallClock(start_time=ti.blockchain_start_time, time_fn=time_fn).current_relative_time()
