"""Reusable type definitions for slot and time conversions."""

from .base import StrictBaseModel
from .exceptions import (
    EraClockError,
    PastHorizonError,
    PercentageOutOfBoundsError,
    UnexpectedPastHorizonError,
)
from .percentage import Percentage
from .uint import BaseUint, Uint64

__all__ = [
    # Core types
    "BaseUint",
    "Uint64",
    "Percentage",
    "StrictBaseModel",
    # Exceptions
    "EraClockError",
    "PastHorizonError",
    "PercentageOutOfBoundsError",
    "UnexpectedPastHorizonError",
]
