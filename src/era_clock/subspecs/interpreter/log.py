"""Structured diagnostics for horizon failures."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from era_clock.subspecs.time import StartTime
from era_clock.types import PastHorizonError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimeInterpreterLog:
    """A query fell past the horizon of the known era history."""

    reason: str | None
    """Why the failure should have been impossible, if the caller said so."""

    start_time: StartTime
    """Start time of the interpreter that failed."""

    error: PastHorizonError
    """The horizon failure."""

    @property
    def is_unexpected(self) -> bool:
        """Whether the caller had declared this failure impossible."""
        return self.reason is not None


Tracer = Callable[[TimeInterpreterLog], None]
"""Log sink receiving horizon failure diagnostics."""


def log_time_interpreter_msg(msg: TimeInterpreterLog) -> None:
    """
    Default tracer: write the diagnostic to the module logger.

    Ordinary horizon failures are a warning. Failures the caller declared
    impossible are an error, since they mean a wrong assumption about the
    chain's era history.
    """
    if msg.is_unexpected:
        logger.error(
            "Time interpreter failed past the horizon (%s), start_time=%s: %s",
            msg.reason,
            msg.start_time.utc.isoformat(),
            msg.error.message,
        )
    else:
        logger.warning(
            "Time interpreter query past the horizon, start_time=%s: %s",
            msg.start_time.utc.isoformat(),
            msg.error.message,
        )


def null_tracer(msg: TimeInterpreterLog) -> None:
    """Tracer that discards every diagnostic."""
