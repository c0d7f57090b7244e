"""
Metric registry using prometheus_client.

Tracks sync progress estimates and horizon failures.
Exposes metrics in Prometheus text format.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

# Create a dedicated registry for era clock metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Sync Progress
# -----------------------------------------------------------------------------

sync_progress_ratio = Gauge(
    "era_clock_sync_progress_ratio",
    "Latest sync progress estimate (1 when ready)",
    registry=REGISTRY,
)

sync_tip_slot = Gauge(
    "era_clock_sync_tip_slot",
    "Slot of the local tip used for the latest estimate",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Time Interpretation
# -----------------------------------------------------------------------------

past_horizon_total = Counter(
    "era_clock_past_horizon_total",
    "Queries that fell past the known era horizon",
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
