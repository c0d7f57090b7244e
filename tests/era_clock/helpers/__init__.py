"""Test helpers for era clock unit tests."""

from .builders import (
    ERA_0_PARAMS,
    ERA_1_PARAMS,
    GENESIS_TIME,
    CountingAccessor,
    RecordingTracer,
    make_time_interpreter,
    make_two_era_interpreter,
    make_two_era_summary,
)

__all__ = [
    "ERA_0_PARAMS",
    "ERA_1_PARAMS",
    "GENESIS_TIME",
    "CountingAccessor",
    "RecordingTracer",
    "make_time_interpreter",
    "make_two_era_interpreter",
    "make_two_era_summary",
]
