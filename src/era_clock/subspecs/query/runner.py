"""Evaluation of era-spanning queries."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from era_clock.subspecs.hardfork import EraInterpreter
from era_clock.subspecs.time import StartTime

from .algebra import EraContainedQuery, Query, QueryBind, QueryPure, QueryStartTime

T = TypeVar("T")


def run_query(start_time: StartTime, interpreter: EraInterpreter, query: Query[T]) -> T:
    """
    Evaluate a query against one snapshot of the era interpreter.

    Leaves are handed to the era interpreter one at a time. Every other form
    is resolved here.

    Evaluation keeps its own stack of pending continuations, so arbitrarily
    long chains of `bind` and `map` run in constant Python stack depth.

    There are no retries and no partial results. The first horizon failure
    aborts the whole query, however deeply it is nested.

    Args:
        start_time: Chain start time, returned by `QueryStartTime`.
        interpreter: Era interpreter answering the single-era leaves.
        query: The query to evaluate.

    Returns:
        The query's result.

    Raises:
        PastHorizonError: If any leaf falls outside the known eras.
    """
    pending: list[Callable[[Any], Query[Any]]] = []
    current: Query[Any] = query

    while True:
        match current:
            case QueryBind(query=first, continuation=continuation):
                pending.append(continuation)
                current = first
                continue
            case EraContainedQuery(era_query=era_query):
                value = interpreter.interpret_query(era_query)
            case QueryPure(value=pure_value):
                value = pure_value
            case QueryStartTime():
                value = start_time
            case _:
                raise TypeError(f"Unknown query form: {type(current).__name__}")

        if not pending:
            return value
        current = pending.pop()(value)
