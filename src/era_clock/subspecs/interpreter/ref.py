"""Swappable holder for the current era interpreter."""

from __future__ import annotations

import logging
from threading import Lock

from era_clock.subspecs.hardfork import EraInterpreter

logger = logging.getLogger(__name__)


class InterpreterRef:
    """
    Shared cell holding the latest era interpreter.

    Whoever learns about new eras (e.g. after a hard fork is scheduled)
    replaces the interpreter here. Time interpreters read it through the
    cell, which is itself a valid accessor.

    Readers always get a complete snapshot. A query that is already running
    keeps the snapshot it started with.
    """

    def __init__(self, initial: EraInterpreter) -> None:
        """Initialize the cell with the interpreter known at startup."""
        self._current = initial
        self._lock = Lock()

    def get(self) -> EraInterpreter:
        """Return the current era interpreter."""
        with self._lock:
            return self._current

    def set(self, interpreter: EraInterpreter) -> None:
        """Replace the current era interpreter."""
        with self._lock:
            self._current = interpreter

        horizon = interpreter.summary.horizon
        logger.info(
            "Era interpreter updated: eras=%d horizon_slot=%s",
            len(interpreter.summary.eras),
            "unbounded" if horizon is None else horizon.slot,
        )

    def __call__(self) -> EraInterpreter:
        return self.get()
