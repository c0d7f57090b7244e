"""
Sync progress for a chain-following client.

What Is Sync Progress?
----------------------
A node that starts from scratch must ingest the whole chain before it is
useful. Sync progress tells operators how far along it is, and when it is
done ("ready").

The estimate compares the time covered by the local tip with the time
elapsed since the chain started. See `progress` for the derivation.
"""

from __future__ import annotations

__all__ = [
    # Estimator
    "SyncProgress",
    "SyncStatus",
    "SyncTolerance",
    "get_sync_progress",
    "sync_progress",
    # Configuration constants
    "DEFAULT_SYNC_TOLERANCE",
    "NEVER_FAILS_REASON",
]

from .config import DEFAULT_SYNC_TOLERANCE, NEVER_FAILS_REASON
from .progress import (
    SyncProgress,
    SyncStatus,
    SyncTolerance,
    get_sync_progress,
    sync_progress,
)
