"""
Era-aware slot and time interpreter.

Answers conversions that fall inside a single era, and reports a horizon
failure for anything outside the known eras.
"""

from .query import (
    EpochToSlot,
    EraInterpreter,
    EraQuery,
    SlotToEpoch,
    SlotToWallclock,
    WallclockToSlot,
    mk_interpreter,
)
from .summary import (
    INITIAL_BOUND,
    Bound,
    EraParams,
    EraSummary,
    Summary,
    mk_upper_bound,
    never_forks_summary,
)
from .types import EpochNo, EpochSize, SlotNo

__all__ = [
    # Counters
    "EpochNo",
    "EpochSize",
    "SlotNo",
    # Summaries
    "INITIAL_BOUND",
    "Bound",
    "EraParams",
    "EraSummary",
    "Summary",
    "mk_upper_bound",
    "never_forks_summary",
    # Queries
    "EraInterpreter",
    "EraQuery",
    "EpochToSlot",
    "SlotToEpoch",
    "SlotToWallclock",
    "WallclockToSlot",
    "mk_interpreter",
]
