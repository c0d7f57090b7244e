"""
Single-Era Queries
==================

Conversions that are only valid within one era.

Each query knows which era it belongs to and how to answer itself using that
era's parameters. The interpreter simply finds the era. If none of the known
eras contain the query, the answer lies past the horizon.

A single-era query never crosses an era boundary. Questions whose parts live
in different eras must be split and composed one level up, with the
era-spanning query algebra.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

from era_clock.subspecs.time import RelativeTime, SlotLength, diff_rel_time
from era_clock.types import PastHorizonError

from .summary import EraSummary, Summary
from .types import EpochNo, EpochSize, SlotNo

T = TypeVar("T")


class EraQuery(ABC, Generic[T]):
    """A conversion answered entirely by one era's parameters."""

    @abstractmethod
    def era_contains(self, era: EraSummary) -> bool:
        """Check whether this query can be answered by the given era."""

    @abstractmethod
    def evaluate(self, era: EraSummary) -> T:
        """Answer the query using an era that contains it."""


@dataclass(frozen=True)
class SlotToWallclock(EraQuery[tuple[RelativeTime, SlotLength]]):
    """Start time of a slot and the length of that slot."""

    slot: SlotNo

    def era_contains(self, era: EraSummary) -> bool:
        return era.contains_slot(self.slot)

    def evaluate(self, era: EraSummary) -> tuple[RelativeTime, SlotLength]:
        slot_length = era.params.slot_length
        slots_into_era = (self.slot - era.start.slot).as_int()
        return era.start.time.add(slot_length.duration * slots_into_era), slot_length


@dataclass(frozen=True)
class WallclockToSlot(EraQuery[tuple[SlotNo, timedelta, timedelta]]):
    """
    Slot ongoing at a relative time.

    Also returns the time already spent in that slot and the time left in it.
    """

    time: RelativeTime

    def era_contains(self, era: EraSummary) -> bool:
        return era.contains_time(self.time)

    def evaluate(self, era: EraSummary) -> tuple[SlotNo, timedelta, timedelta]:
        slot_length = era.params.slot_length.duration
        elapsed = diff_rel_time(self.time, era.start.time)
        slots_into_era, time_spent = divmod(elapsed, slot_length)
        slot = SlotNo(era.start.slot.as_int() + slots_into_era)
        return slot, time_spent, slot_length - time_spent


@dataclass(frozen=True)
class SlotToEpoch(EraQuery[tuple[EpochNo, int, int]]):
    """
    Epoch containing a slot.

    Also returns the slot's index within the epoch and the slots left after it.
    """

    slot: SlotNo

    def era_contains(self, era: EraSummary) -> bool:
        return era.contains_slot(self.slot)

    def evaluate(self, era: EraSummary) -> tuple[EpochNo, int, int]:
        epoch_size = era.params.epoch_size.as_int()
        epochs_into_era, slot_in_epoch = divmod((self.slot - era.start.slot).as_int(), epoch_size)
        epoch = EpochNo(era.start.epoch.as_int() + epochs_into_era)
        return epoch, slot_in_epoch, epoch_size - slot_in_epoch


@dataclass(frozen=True)
class EpochToSlot(EraQuery[tuple[SlotNo, EpochSize]]):
    """First slot of an epoch and the size of that epoch."""

    epoch: EpochNo

    def era_contains(self, era: EraSummary) -> bool:
        return era.contains_epoch(self.epoch)

    def evaluate(self, era: EraSummary) -> tuple[SlotNo, EpochSize]:
        epoch_size = era.params.epoch_size
        epochs_into_era = (self.epoch - era.start.epoch).as_int()
        slot = SlotNo(era.start.slot.as_int() + epochs_into_era * epoch_size.as_int())
        return slot, epoch_size


@dataclass(frozen=True, slots=True)
class EraInterpreter:
    """
    Answers single-era queries against a fixed era summary.

    An interpreter is a snapshot. When more chain history becomes known, a
    new interpreter is built from the extended summary.
    """

    summary: Summary
    """The eras this interpreter knows about."""

    def interpret_query(self, query: EraQuery[T]) -> T:
        """
        Answer a query using the first era that contains it.

        Raises:
            PastHorizonError: If no known era contains the query.
        """
        for era in self.summary.eras:
            if query.era_contains(era):
                return query.evaluate(era)
        raise PastHorizonError(query, self.summary.eras)


def mk_interpreter(summary: Summary) -> EraInterpreter:
    """Build an interpreter for a summary."""
    return EraInterpreter(summary=summary)
