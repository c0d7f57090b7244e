"""
Metrics module for observability.

Provides counters and gauges for sync estimates and time interpretation.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    generate_metrics,
    past_horizon_total,
    sync_progress_ratio,
    sync_tip_slot,
)

__all__ = [
    "REGISTRY",
    "generate_metrics",
    "past_horizon_total",
    "sync_progress_ratio",
    "sync_tip_slot",
]
