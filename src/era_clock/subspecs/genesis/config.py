"""Genesis time configuration loader.

Loads the time-keeping parameters of a chain from its genesis file.

The expected format matches Shelley-style genesis files. JSON is valid YAML,
so those load as-is; unrelated keys are ignored:

    systemStart: "2017-09-23T21:44:51Z"
    epochLength: 432000
    slotLength: 1
    syncTolerance: 300
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator

from era_clock.subspecs.hardfork import EpochSize
from era_clock.subspecs.interpreter import (
    TimeInterpreter,
    Tracer,
    log_time_interpreter_msg,
    mk_time_interpreter,
)
from era_clock.subspecs.sync import DEFAULT_SYNC_TOLERANCE, SyncTolerance
from era_clock.subspecs.time import SlotLength, StartTime
from era_clock.types import StrictBaseModel


class TimeConfig(StrictBaseModel):
    """
    Time-keeping parameters shared by every node of a chain.

    Without an agreed start time and slot length, nodes cannot agree on when
    slots begin, and a sync estimate means nothing.

    Field names use camelCase in files, as in genesis files.
    """

    # Genesis files carry many keys unrelated to time keeping.
    model_config = StrictBaseModel.model_config | {"extra": "ignore"}

    system_start: datetime
    """
    UTC instant at which slot 0 begins.

    Accepts ISO 8601 strings, Unix timestamps and YAML timestamps.
    Naive values are taken to be UTC.
    """

    epoch_length: EpochSize
    """Number of slots per epoch."""

    slot_length: timedelta
    """Duration of a slot. Given in seconds in files."""

    sync_tolerance: timedelta = DEFAULT_SYNC_TOLERANCE
    """Lag inside which the node counts as synced. Given in seconds in files."""

    @field_validator("system_start", mode="before")
    @classmethod
    def parse_system_start(cls, v: Any) -> datetime:
        """Convert strings and Unix timestamps to aware UTC datetimes."""
        if isinstance(v, bool):
            raise ValueError("systemStart must be a timestamp, got a bool")
        if isinstance(v, int | float):
            return datetime.fromtimestamp(v, tz=UTC)
        if isinstance(v, str):
            v = datetime.fromisoformat(v)
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @field_validator("slot_length", "sync_tolerance", mode="before")
    @classmethod
    def parse_seconds(cls, v: Any) -> timedelta:
        """Convert a number of seconds to a duration."""
        if isinstance(v, bool):
            raise ValueError(f"expected a number of seconds, got {v!r}")
        if isinstance(v, int | float):
            return timedelta(seconds=v)
        return v

    @field_validator("slot_length")
    @classmethod
    def check_slot_length(cls, v: timedelta) -> timedelta:
        """Reject empty or negative slots."""
        SlotLength(v)
        return v

    @field_validator("epoch_length")
    @classmethod
    def check_epoch_length(cls, v: EpochSize) -> EpochSize:
        """Reject empty epochs."""
        if v.as_int() == 0:
            raise ValueError("epochLength must be non-zero")
        return v

    @property
    def start_time(self) -> StartTime:
        """The chain start time."""
        return StartTime(self.system_start)

    @property
    def tolerance(self) -> SyncTolerance:
        """The configured sync tolerance."""
        return SyncTolerance(self.sync_tolerance)

    def time_interpreter(self, tracer: Tracer = log_time_interpreter_msg) -> TimeInterpreter:
        """
        Build a TimeInterpreter for this chain.

        A genesis file describes a single era, so the interpreter never forks.
        """
        return mk_time_interpreter(
            self.start_time, self.epoch_length, SlotLength(self.slot_length), tracer
        )

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> TimeConfig:
        """
        Load configuration from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> TimeConfig:
        """
        Load configuration from a YAML string.

        Raises:
            yaml.YAMLError: If the content is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        data = yaml.safe_load(content)
        return cls.model_validate(data)
