"""Era-spanning query algebra and its evaluator."""

from .algebra import (
    EraContainedQuery,
    Query,
    QueryBind,
    QueryPure,
    QueryStartTime,
    epoch_of,
    first_slot_in_epoch,
    ongoing_slot_at,
    slot_to_relative_time,
    slot_to_utc_time,
)
from .runner import run_query

__all__ = [
    # Query forms
    "Query",
    "EraContainedQuery",
    "QueryStartTime",
    "QueryPure",
    "QueryBind",
    # Derived queries
    "epoch_of",
    "first_slot_in_epoch",
    "ongoing_slot_at",
    "slot_to_relative_time",
    "slot_to_utc_time",
    # Evaluation
    "run_query",
]
