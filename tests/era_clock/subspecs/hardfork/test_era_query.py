"""Tests for single-era queries and the era interpreter."""

from datetime import timedelta

import pytest

from era_clock.subspecs.hardfork import (
    EpochNo,
    EpochSize,
    EpochToSlot,
    SlotNo,
    SlotToEpoch,
    SlotToWallclock,
    WallclockToSlot,
)
from era_clock.subspecs.time import RelativeTime, SlotLength
from era_clock.types import PastHorizonError
from tests.era_clock.helpers import make_two_era_interpreter


class TestSlotToWallclock:
    """Tests for SlotToWallclock."""

    @pytest.mark.parametrize(
        ("slot", "seconds", "slot_seconds"),
        [
            (0, 0, 20),
            (19, 380, 20),
            # First slot of the second era.
            (20, 400, 1),
            (219, 599, 1),
        ],
    )
    def test_converts(self, slot: int, seconds: int, slot_seconds: int) -> None:
        """Slot start times follow each era's slot length."""
        interpreter = make_two_era_interpreter()
        rel, length = interpreter.interpret_query(SlotToWallclock(SlotNo(slot)))
        assert rel == RelativeTime.from_seconds(seconds)
        assert length == SlotLength.from_seconds(slot_seconds)

    def test_past_horizon(self) -> None:
        """The first slot past the horizon fails."""
        query = SlotToWallclock(SlotNo(220))
        with pytest.raises(PastHorizonError) as exc_info:
            make_two_era_interpreter().interpret_query(query)
        assert exc_info.value.query == query
        assert len(exc_info.value.eras) == 2

    def test_unbounded_never_fails(self) -> None:
        """Without a horizon, far future slots still convert."""
        interpreter = make_two_era_interpreter(bounded=False)
        rel, _ = interpreter.interpret_query(SlotToWallclock(SlotNo(1_000_020)))
        assert rel == RelativeTime.from_seconds(1_000_400)


class TestWallclockToSlot:
    """Tests for WallclockToSlot."""

    def test_mid_slot(self) -> None:
        """Reports time spent in and left in the ongoing slot."""
        interpreter = make_two_era_interpreter()
        slot, spent, left = interpreter.interpret_query(
            WallclockToSlot(RelativeTime.from_seconds(45))
        )
        assert slot == SlotNo(2)
        assert spent == timedelta(seconds=5)
        assert left == timedelta(seconds=15)

    def test_second_era(self) -> None:
        """Times in the second era use its slot length."""
        interpreter = make_two_era_interpreter()
        slot, spent, _ = interpreter.interpret_query(
            WallclockToSlot(RelativeTime(timedelta(seconds=410, milliseconds=250)))
        )
        assert slot == SlotNo(30)
        assert spent == timedelta(milliseconds=250)

    def test_past_horizon(self) -> None:
        """Times at or after the horizon fail."""
        with pytest.raises(PastHorizonError):
            make_two_era_interpreter().interpret_query(
                WallclockToSlot(RelativeTime.from_seconds(600))
            )


class TestEpochQueries:
    """Tests for SlotToEpoch and EpochToSlot."""

    @pytest.mark.parametrize(
        ("slot", "epoch", "in_epoch", "left"),
        [
            (0, 0, 0, 10),
            (15, 1, 5, 5),
            (20, 2, 0, 100),
            (150, 3, 30, 70),
        ],
    )
    def test_slot_to_epoch(self, slot: int, epoch: int, in_epoch: int, left: int) -> None:
        """Epochs follow each era's epoch size."""
        result = make_two_era_interpreter().interpret_query(SlotToEpoch(SlotNo(slot)))
        assert result == (EpochNo(epoch), in_epoch, left)

    @pytest.mark.parametrize(
        ("epoch", "slot", "size"),
        [(0, 0, 10), (1, 10, 10), (2, 20, 100), (3, 120, 100)],
    )
    def test_epoch_to_slot(self, epoch: int, slot: int, size: int) -> None:
        """First slot and size of each epoch."""
        result = make_two_era_interpreter().interpret_query(EpochToSlot(EpochNo(epoch)))
        assert result == (SlotNo(slot), EpochSize(size))

    def test_epoch_past_horizon(self) -> None:
        """Epochs at or after the horizon fail."""
        with pytest.raises(PastHorizonError):
            make_two_era_interpreter().interpret_query(EpochToSlot(EpochNo(4)))
