"""
Sync progress estimation.

How Far Behind Are We?
----------------------
Block height is the obvious measure, but the local node cannot verify the
true height of the network tip on its own. Time can be verified: every slot
has a fixed start time, and the wall clock says what time it is now.

Progress is defined as::

    p = h / (h + X)

where ``h`` is the number of blocks ingested so far and ``X`` the estimated
remaining slots up to the network tip. It is approximated by::

    p = time covered by the local tip / time elapsed since the chain start

Early on this is pessimistic, as it assumes every future slot holds a block.
As blocks are ingested, ``h`` grows and ``X`` shrinks. Eventually ``X`` is
zero and ``p = h / h``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from fractions import Fraction
from typing import Any

from era_clock.subspecs import metrics
from era_clock.subspecs.hardfork import SlotNo
from era_clock.subspecs.interpreter import TimeInterpreter, current_relative_time, never_fails
from era_clock.subspecs.query import slot_to_relative_time
from era_clock.subspecs.time import RELATIVE_TIME_ZERO, RelativeTime, diff_rel_time, utc_now
from era_clock.types import Percentage, PercentageOutOfBoundsError

from .config import DEFAULT_SYNC_TOLERANCE, NEVER_FAILS_REASON

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncTolerance:
    """A time tolerance inside which the node is considered synced."""

    duration: timedelta = DEFAULT_SYNC_TOLERANCE
    """Maximum lag between the tip and now."""

    @classmethod
    def from_seconds(cls, seconds: float) -> SyncTolerance:
        """Build a tolerance from a number of seconds."""
        return cls(timedelta(seconds=seconds))


class SyncStatus(Enum):
    """Classification of a node's sync state."""

    READY = "ready"
    """The local tip is within tolerance of the current time."""

    SYNCING = "syncing"
    """The node is still catching up. Comes with a progress estimate."""

    NOT_RESPONDING = "not_responding"
    """
    No estimate is available.

    Never produced by the estimator itself. Callers use it when the node
    could not be queried or estimation failed.
    """


@dataclass(frozen=True, slots=True)
class SyncProgress:
    """A sync classification, with a progress estimate while syncing."""

    status: SyncStatus
    """Current sync classification."""

    progress: Percentage | None = None
    """Estimated progress. Present exactly when syncing."""

    def __post_init__(self) -> None:
        """Keep the progress field consistent with the status."""
        if (self.status is SyncStatus.SYNCING) != (self.progress is not None):
            raise ValueError(f"{self.status.name} sync progress cannot carry {self.progress!r}")

    @classmethod
    def ready(cls) -> SyncProgress:
        """The node is caught up."""
        return cls(SyncStatus.READY)

    @classmethod
    def syncing(cls, progress: Percentage) -> SyncProgress:
        """The node is catching up."""
        return cls(SyncStatus.SYNCING, progress)

    @classmethod
    def not_responding(cls) -> SyncProgress:
        """The node could not be assessed."""
        return cls(SyncStatus.NOT_RESPONDING)

    def to_json_dict(self) -> dict[str, Any]:
        """
        Render in the API shape.

        Progress is a percent quantity, e.g.
        ``{"status": "syncing", "progress": {"quantity": 97.0, "unit": "percent"}}``.
        """
        body: dict[str, Any] = {"status": self.status.value}
        if self.progress is not None:
            body["progress"] = {"quantity": float(self.progress.as_percent()), "unit": "percent"}
        return body


def sync_progress(
    tolerance: SyncTolerance,
    ti: TimeInterpreter,
    tip: SlotNo,
    now: RelativeTime,
) -> SyncProgress:
    """
    Estimate sync progress from the local tip and the current time.

    Args:
        tolerance: Lag inside which the node counts as ready.
        ti: Converts the tip's slot to a time.
        tip: Slot of the local tip.
        now: Current time relative to the chain start.

    Returns:
        READY within tolerance, SYNCING with an estimate otherwise.

    Raises:
        PastHorizonError: If the tip's slot cannot be converted and `ti`
            propagates horizon failures.
        AssertionError: If the progress ratio falls outside [0, 1], which the
            tolerance check is meant to rule out.
    """
    time_covered = ti.interpret(slot_to_relative_time(tip))

    if diff_rel_time(now, time_covered) <= tolerance.duration:
        return SyncProgress.ready()

    # Ratio of whole milliseconds. No time elapsed means no progress.
    now_ms = now.to_milliseconds()
    if now == RELATIVE_TIME_ZERO or now_ms == 0:
        progress = Fraction(0)
    else:
        progress = Fraction(time_covered.to_milliseconds(), now_ms)

    try:
        percentage = Percentage.from_ratio(progress)
    except PercentageOutOfBoundsError as e:
        raise AssertionError(f"sync_progress: {progress} is out of bounds") from e

    return SyncProgress.syncing(percentage)


def get_sync_progress(
    tolerance: SyncTolerance,
    tip: SlotNo,
    ti: TimeInterpreter,
    time_fn: Callable[[], datetime] = utc_now,
) -> SyncProgress:
    """
    Estimate sync progress as of the current wall-clock time.

    The interpreter is wrapped with `never_fails`: the tip is a slot the node
    has already seen, so its start time must be known. A horizon failure here
    is raised as `UnexpectedPastHorizonError`.
    """
    now = current_relative_time(ti, time_fn)
    result = sync_progress(tolerance, never_fails(NEVER_FAILS_REASON, ti), tip, now)

    metrics.sync_tip_slot.set(tip.as_int())
    metrics.sync_progress_ratio.set(1.0 if result.progress is None else float(result.progress))

    logger.debug("Sync progress: tip=%s now=%s status=%s", tip, now.offset, result.status.value)
    return result
