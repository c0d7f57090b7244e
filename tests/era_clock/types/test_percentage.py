"""Tests for the bounded Percentage type."""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from era_clock.types import Percentage, PercentageOutOfBoundsError


class TestPercentageConstruction:
    """Tests for Percentage.from_ratio()."""

    @given(st.fractions(min_value=0, max_value=1))
    def test_in_bounds_round_trips(self, ratio: Fraction) -> None:
        """Every ratio in [0, 1] is accepted and kept exactly."""
        assert Percentage.from_ratio(ratio).value == ratio

    @given(st.fractions(max_value=0).filter(lambda r: r < 0))
    def test_negative_rejected(self, ratio: Fraction) -> None:
        """Ratios below 0 are out of bounds."""
        with pytest.raises(PercentageOutOfBoundsError):
            Percentage.from_ratio(ratio)

    @given(st.fractions(min_value=1).filter(lambda r: r > 1))
    def test_above_one_rejected(self, ratio: Fraction) -> None:
        """Ratios above 1 are out of bounds."""
        with pytest.raises(PercentageOutOfBoundsError):
            Percentage.from_ratio(ratio)

    def test_bounds_are_inclusive(self) -> None:
        """0 and 1 themselves are valid."""
        assert Percentage.from_ratio(0).value == 0
        assert Percentage.from_ratio(1).value == 1

    def test_accepts_float_and_decimal(self) -> None:
        """Floats and decimals convert exactly."""
        assert Percentage.from_ratio(0.5).value == Fraction(1, 2)
        assert Percentage.from_ratio(Decimal("0.25")).value == Fraction(1, 4)

    def test_error_carries_value(self) -> None:
        """The rejected ratio is available on the error."""
        with pytest.raises(PercentageOutOfBoundsError) as exc_info:
            Percentage.from_ratio(Fraction(3, 2))
        assert exc_info.value.value == Fraction(3, 2)

    @pytest.mark.parametrize(
        "ratio",
        [
            float("inf"),
            float("-inf"),
            float("nan"),
            Decimal("Infinity"),
            Decimal("-Infinity"),
            Decimal("NaN"),
        ],
    )
    def test_non_finite_rejected(self, ratio: float | Decimal) -> None:
        """Infinities and NaN are out of bounds, with the raw value kept on the error."""
        with pytest.raises(PercentageOutOfBoundsError) as exc_info:
            Percentage.from_ratio(ratio)
        assert exc_info.value.value is ratio

    def test_direct_construction_rejects_infinity(self) -> None:
        """The plain constructor rejects infinities the same way."""
        with pytest.raises(PercentageOutOfBoundsError):
            Percentage(float("inf"))  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        """Callers catching ValueError also catch construction failures."""
        with pytest.raises(ValueError):
            Percentage.from_ratio(-1)

    def test_direct_construction_validates(self) -> None:
        """The plain constructor enforces the same bounds."""
        with pytest.raises(PercentageOutOfBoundsError):
            Percentage(Fraction(2))


class TestPercentageValue:
    """Tests for equality, ordering and rendering."""

    def test_equality_follows_ratio(self) -> None:
        """Equal ratios give equal percentages."""
        assert Percentage.from_ratio(Fraction(2, 4)) == Percentage.from_ratio(0.5)

    @given(st.fractions(min_value=0, max_value=1), st.fractions(min_value=0, max_value=1))
    def test_ordering_follows_ratio(self, a: Fraction, b: Fraction) -> None:
        """Ordering matches the underlying ratios."""
        assert (Percentage.from_ratio(a) < Percentage.from_ratio(b)) == (a < b)

    def test_is_frozen(self) -> None:
        """Percentage is immutable."""
        percentage = Percentage.from_ratio(0.5)
        with pytest.raises(AttributeError):
            percentage.value = Fraction(1)  # type: ignore[misc]

    def test_as_percent(self) -> None:
        """as_percent scales to [0, 100]."""
        assert Percentage.from_ratio(Fraction(97, 100)).as_percent() == 97

    def test_str(self) -> None:
        """String form is a two-decimal percentage."""
        assert str(Percentage.from_ratio(Fraction(1, 3))) == "33.33%"
