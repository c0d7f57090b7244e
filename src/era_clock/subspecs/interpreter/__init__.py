"""
Time interpreter: runs era-spanning queries with a start time as context.

Also holds the failure policies and effect transforms that adapt a handle to
its caller's expectations.
"""

from .log import TimeInterpreterLog, Tracer, log_time_interpreter_msg, null_tracer
from .ref import InterpreterRef
from .time_interpreter import (
    EffectTransform,
    ResultHandler,
    TimeInterpreter,
    current_relative_time,
    expect_horizon_as_none,
    hoist_time_interpreter,
    interpret_query,
    maybe_time_interpreter,
    mk_time_interpreter,
    never_fails,
    raise_past_horizon,
)

__all__ = [
    # Handle
    "TimeInterpreter",
    "interpret_query",
    "mk_time_interpreter",
    "current_relative_time",
    "InterpreterRef",
    # Policies and transforms
    "EffectTransform",
    "ResultHandler",
    "expect_horizon_as_none",
    "hoist_time_interpreter",
    "maybe_time_interpreter",
    "never_fails",
    "raise_past_horizon",
    # Diagnostics
    "TimeInterpreterLog",
    "Tracer",
    "log_time_interpreter_msg",
    "null_tracer",
]
