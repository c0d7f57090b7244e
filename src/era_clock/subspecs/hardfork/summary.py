"""
Era Summaries
=============

What the node knows about the chain's time-keeping rules.

A chain runs through a sequence of eras. Each era fixes a slot length and an
epoch size. Hard forks start a new era, possibly with different parameters.

Era Layout
----------
::

    era 0 (20s slots)      era 1 (1s slots)          horizon
    |-------------------|--------------------------|.......
    ^ start bound       ^ end bound == next start  ^ last known end

Each era is summarized by its start bound, its end bound and its parameters.
The end bound of an era is the start bound of the next. Only the final era
may be unbounded, which means no hard fork is ever expected.

Anything past the final end bound is "past the horizon": a fork might happen
there, so converting slots to times beyond it would be guesswork.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from era_clock.subspecs.time import RELATIVE_TIME_ZERO, RelativeTime, SlotLength

from .types import EpochNo, EpochSize, SlotNo


@dataclass(frozen=True, slots=True)
class Bound:
    """A point in chain history expressed in all three time coordinates."""

    time: RelativeTime
    """Time relative to the chain start."""

    slot: SlotNo
    """First slot at or after this point."""

    epoch: EpochNo
    """First epoch at or after this point."""


INITIAL_BOUND = Bound(time=RELATIVE_TIME_ZERO, slot=SlotNo(0), epoch=EpochNo(0))
"""Bound at the very start of the chain."""


@dataclass(frozen=True, slots=True)
class EraParams:
    """Time-keeping parameters that hold for the whole of one era."""

    epoch_size: EpochSize
    """Number of slots per epoch."""

    slot_length: SlotLength
    """Duration of a slot."""

    def __post_init__(self) -> None:
        """Reject empty epochs."""
        if self.epoch_size.as_int() == 0:
            raise ValueError("EraParams requires a non-zero epoch size")


@dataclass(frozen=True, slots=True)
class EraSummary:
    """
    The bounds and parameters of a single era.

    An era covers the half-open range `[start, end)` in every coordinate.
    An `end` of None means the era never ends.
    """

    start: Bound
    """Inclusive lower bound."""

    end: Bound | None
    """Exclusive upper bound, or None for an unbounded era."""

    params: EraParams
    """Slot length and epoch size in force during this era."""

    def contains_slot(self, slot: SlotNo) -> bool:
        """Check whether a slot falls inside this era."""
        if slot < self.start.slot:
            return False
        return self.end is None or slot < self.end.slot

    def contains_time(self, time: RelativeTime) -> bool:
        """Check whether a relative time falls inside this era."""
        if time < self.start.time:
            return False
        return self.end is None or time < self.end.time

    def contains_epoch(self, epoch: EpochNo) -> bool:
        """Check whether an epoch falls inside this era."""
        if epoch < self.start.epoch:
            return False
        return self.end is None or epoch < self.end.epoch


def mk_upper_bound(params: EraParams, start: Bound, end_epoch: EpochNo) -> Bound:
    """
    Compute where an era ends, given where it starts and its final epoch.

    Args:
        params: Parameters of the era.
        start: Start bound of the era.
        end_epoch: First epoch of the next era.

    Raises:
        ValueError: If the era would be empty or end before it starts.
    """
    if end_epoch <= start.epoch:
        raise ValueError(f"Era ending at epoch {end_epoch} must end after {start.epoch}")

    epochs_in_era = (end_epoch - start.epoch).as_int()
    slots_in_era = epochs_in_era * params.epoch_size.as_int()
    return Bound(
        time=start.time.add(params.slot_length.duration * slots_in_era),
        slot=SlotNo(start.slot.as_int() + slots_in_era),
        epoch=end_epoch,
    )


@dataclass(frozen=True, slots=True)
class Summary:
    """
    The ordered, contiguous list of eras known to the node.

    Invariants:

    - There is at least one era.
    - Each era ends exactly where the next one starts.
    - Only the last era may be unbounded.
    """

    eras: tuple[EraSummary, ...]
    """Eras in chronological order."""

    def __post_init__(self) -> None:
        """Enforce the summary invariants."""
        if not self.eras:
            raise ValueError("Summary requires at least one era")

        for current, following in zip(self.eras, self.eras[1:], strict=False):
            # Unbounded eras swallow everything after them.
            if current.end is None:
                raise ValueError("Only the last era of a summary may be unbounded")
            if current.end != following.start:
                raise ValueError(
                    f"Eras are not contiguous: {current.end} is followed by {following.start}"
                )

    @property
    def horizon(self) -> Bound | None:
        """End bound of the last known era, or None if history never forks."""
        return self.eras[-1].end

    @classmethod
    def from_transitions(
        cls,
        eras: Sequence[tuple[EraParams, EpochNo | None]],
        start: Bound = INITIAL_BOUND,
    ) -> Summary:
        """
        Build a summary from era parameters and their transition epochs.

        Args:
            eras: For each era, its parameters and the epoch at which the next
                era begins (None to leave the era unbounded).
            start: Where the first era starts.
        """
        summaries: list[EraSummary] = []
        for params, end_epoch in eras:
            end = None if end_epoch is None else mk_upper_bound(params, start, end_epoch)
            summaries.append(EraSummary(start=start, end=end, params=params))
            if end is not None:
                start = end
        return cls(eras=tuple(summaries))


def never_forks_summary(epoch_size: EpochSize, slot_length: SlotLength) -> Summary:
    """Summary of a chain that stays in a single era forever."""
    return Summary.from_transitions([(EraParams(epoch_size, slot_length), None)])
