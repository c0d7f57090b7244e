"""
Query Algebra
=============

Composable queries for slot, epoch and time conversions.

Why Not Use Single-Era Queries Directly?
----------------------------------------
A single-era query can only be answered inside one era. Given::

    q1 = epoch of some slot in era 0
    q2 = epoch of some slot in era 1

the era interpreter answers each one on its own. A single question asking
for both would fail, since no one era contains it.

A `Query` fixes this. It is an expression tree whose leaves are single-era
queries, glued together with `QueryBind`. The runner resolves every leaf
against the era interpreter independently, so a composite can straddle any
number of eras.

Query Forms
-----------
- `EraContainedQuery`: a single-era leaf. May fail past the horizon.
- `QueryStartTime`: the chain start time. Never fails.
- `QueryPure`: a constant. Never fails.
- `QueryBind`: run a query, then build the next one from its result.

Queries are immutable descriptions. Building one does no work; the same
query can be run any number of times.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from era_clock.subspecs.hardfork import (
    EpochNo,
    EpochToSlot,
    EraQuery,
    SlotNo,
    SlotToEpoch,
    SlotToWallclock,
    WallclockToSlot,
)
from era_clock.subspecs.time import RelativeTime, StartTime, to_relative_time

T = TypeVar("T")
U = TypeVar("U")


class Query(Generic[T]):
    """Base class of every query form."""

    def bind(self, continuation: Callable[[T], Query[U]]) -> Query[U]:
        """Sequence this query with one built from its result."""
        return QueryBind(self, continuation)

    def map(self, fn: Callable[[T], U]) -> Query[U]:
        """Transform the result of this query with a plain function."""
        return QueryBind(self, lambda value: QueryPure(fn(value)))


@dataclass(frozen=True)
class EraContainedQuery(Query[T]):
    """A query that can only be answered inside a single era."""

    era_query: EraQuery[T]
    """The leaf handed to the era interpreter."""


@dataclass(frozen=True)
class QueryStartTime(Query[StartTime]):
    """Yields the chain start time."""


@dataclass(frozen=True)
class QueryPure(Query[T]):
    """Yields a constant."""

    value: T
    """The value returned as-is."""


@dataclass(frozen=True)
class QueryBind(Query[U]):
    """Runs `query`, then the query that `continuation` builds from its result."""

    query: Query[Any]
    """Query to run first."""

    continuation: Callable[[Any], Query[U]]
    """Builds the next query from the first query's result."""


def _first(pair: tuple[T, Any]) -> T:
    return pair[0]


def _first_of_three(triple: tuple[T, Any, Any]) -> T:
    return triple[0]


def slot_to_relative_time(slot: SlotNo) -> Query[RelativeTime]:
    """Query the relative time at which a slot starts."""
    return EraContainedQuery(SlotToWallclock(slot)).map(_first)


def slot_to_utc_time(slot: SlotNo) -> Query[datetime]:
    """Query the absolute UTC time at which a slot starts."""
    return slot_to_relative_time(slot).bind(
        lambda rel: QueryStartTime().map(lambda start: start.add_relative_time(rel))
    )


def ongoing_slot_at(utc: datetime) -> Query[SlotNo | None]:
    """
    Query the slot ongoing at an absolute UTC time.

    Yields None when the time is before the chain start.
    """

    def from_start(start: StartTime) -> Query[SlotNo | None]:
        rel = to_relative_time(start, utc)
        if rel is None:
            return QueryPure(None)
        return EraContainedQuery(WallclockToSlot(rel)).map(_first_of_three)

    return QueryStartTime().bind(from_start)


def epoch_of(slot: SlotNo) -> Query[EpochNo]:
    """Query the epoch containing a slot."""
    return EraContainedQuery(SlotToEpoch(slot)).map(_first_of_three)


def first_slot_in_epoch(epoch: EpochNo) -> Query[SlotNo]:
    """Query the first slot of an epoch."""
    return EraContainedQuery(EpochToSlot(epoch)).map(_first)
