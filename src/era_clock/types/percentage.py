"""Bounded percentage type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from .exceptions import PercentageOutOfBoundsError

Ratio = Fraction | int | float | Decimal
"""Numeric inputs accepted as a ratio. Floats and decimals are converted exactly."""


def _to_fraction(ratio: Ratio) -> Fraction:
    """
    Convert a ratio to an exact fraction.

    Infinities and NaN have no fraction. Infinities lie outside [0, 1], and
    NaN lies nowhere on the interval, so both are out of bounds.
    """
    if isinstance(ratio, Fraction):
        return ratio
    if isinstance(ratio, Decimal):
        finite = ratio.is_finite()
    elif isinstance(ratio, float):
        finite = math.isfinite(ratio)
    else:
        finite = True
    if not finite:
        raise PercentageOutOfBoundsError(ratio)
    return Fraction(ratio)


@dataclass(frozen=True, slots=True, order=True)
class Percentage:
    """
    A ratio in the closed interval [0, 1].

    The value is held as an exact `Fraction` so that progress computed from
    integer millisecond counts never picks up floating point noise.
    An instance outside the interval cannot exist.
    """

    value: Fraction
    """The underlying ratio, where 1 means 100%."""

    def __post_init__(self) -> None:
        """Reject ratios outside [0, 1]."""
        raw: Ratio = self.value
        value = _to_fraction(raw)
        if value < 0 or value > 1:
            raise PercentageOutOfBoundsError(raw)
        object.__setattr__(self, "value", value)

    @classmethod
    def from_ratio(cls, ratio: Ratio) -> Percentage:
        """
        Safe constructor taking an input in the range [0, 1].

        Raises:
            PercentageOutOfBoundsError: If `ratio < 0`, `ratio > 1`, or the
                ratio is NaN.
        """
        return cls(_to_fraction(ratio))

    def as_percent(self) -> Fraction:
        """Return the value scaled to [0, 100]."""
        return self.value * 100

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{float(self.as_percent()):.2f}%"
