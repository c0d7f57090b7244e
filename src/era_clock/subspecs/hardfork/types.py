"""Slot and epoch counters."""

from era_clock.types import Uint64


class SlotNo(Uint64):
    """Absolute slot number, counted from the start of the chain."""


class EpochNo(Uint64):
    """Absolute epoch number, counted from the start of the chain."""


class EpochSize(Uint64):
    """Number of slots in a single epoch."""
