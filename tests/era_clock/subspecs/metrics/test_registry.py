"""Tests for the metrics registry."""

from era_clock.subspecs import metrics


class TestGenerateMetrics:
    """Tests for generate_metrics()."""

    def test_exposes_all_metrics(self) -> None:
        """Every metric appears in the Prometheus text output."""
        output = metrics.generate_metrics().decode("utf-8")

        assert "era_clock_sync_progress_ratio" in output
        assert "era_clock_sync_tip_slot" in output
        assert "era_clock_past_horizon_total" in output

    def test_dedicated_registry(self) -> None:
        """Default process metrics stay out of the output."""
        output = metrics.generate_metrics().decode("utf-8")
        assert "process_cpu_seconds_total" not in output
        assert "python_gc_objects_collected_total" not in output
