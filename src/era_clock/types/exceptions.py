"""Exception hierarchy for slot and time conversions."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from era_clock.subspecs.hardfork.summary import EraSummary


class EraClockError(Exception):
    """
    Base exception for all era clock errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class PercentageOutOfBoundsError(EraClockError, ValueError):
    """
    Raised when a ratio outside [0, 1] (or NaN) is used to build a Percentage.

    Attributes:
        value: The rejected ratio, as given.
    """

    def __init__(self, value: Fraction | float | Decimal) -> None:
        self.value = value
        super().__init__(f"{value} is out of bounds for Percentage (valid range: [0, 1])")


class PastHorizonError(EraClockError):
    """
    Raised when a query falls outside the currently known era history.

    The era interpreter only knows the eras it was built from. Anything past
    the last known bound cannot be converted safely, since a hard fork may
    change the slot length or epoch size at any point beyond it.

    Attributes:
        query: The single-era query that could not be answered.
        eras: The era summaries that were available at the time.
    """

    def __init__(self, query: Any, eras: Sequence[EraSummary]) -> None:
        self.query = query
        self.eras = tuple(eras)
        super().__init__(f"{query!r} is past the horizon of {len(self.eras)} known era(s)")


class UnexpectedPastHorizonError(EraClockError):
    """
    Raised when a horizon failure happens where it was assumed impossible.

    Not a subclass of `PastHorizonError`, so handlers for ordinary horizon
    failures do not catch it.

    Attributes:
        reason: Why the caller believed the failure could not happen.
        error: The horizon failure that happened anyway.
    """

    def __init__(self, reason: str, error: PastHorizonError) -> None:
        self.reason = reason
        self.error = error
        super().__init__(f"{reason}: unexpected {error.message}")
