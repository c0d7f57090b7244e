"""Tests for the default horizon failure tracer."""

import logging

import pytest

from era_clock.subspecs.hardfork import SlotNo, SlotToWallclock
from era_clock.subspecs.interpreter import TimeInterpreterLog, log_time_interpreter_msg, null_tracer
from era_clock.types import PastHorizonError
from tests.era_clock.helpers import GENESIS_TIME, make_two_era_summary

ERROR = PastHorizonError(SlotToWallclock(SlotNo(220)), make_two_era_summary().eras)


class TestLogTimeInterpreterMsg:
    """Tests for log_time_interpreter_msg()."""

    def test_without_reason_is_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Expected failures are logged as warnings."""
        msg = TimeInterpreterLog(reason=None, start_time=GENESIS_TIME, error=ERROR)
        assert not msg.is_unexpected

        with caplog.at_level(logging.DEBUG, logger="era_clock"):
            log_time_interpreter_msg(msg)

        [record] = caplog.records
        assert record.levelno == logging.WARNING
        assert "2020-07-29T21:44:51" in record.getMessage()

    def test_with_reason_is_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failures declared impossible are logged as errors with the reason."""
        msg = TimeInterpreterLog(reason="single era", start_time=GENESIS_TIME, error=ERROR)
        assert msg.is_unexpected

        with caplog.at_level(logging.DEBUG, logger="era_clock"):
            log_time_interpreter_msg(msg)

        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert "single era" in record.getMessage()

    def test_null_tracer_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        """The null tracer discards diagnostics."""
        with caplog.at_level(logging.DEBUG, logger="era_clock"):
            null_tracer(TimeInterpreterLog(reason="x", start_time=GENESIS_TIME, error=ERROR))
        assert caplog.records == []
