"""
Sync progress configuration constants.

Tolerances used to decide when a node counts as caught up.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final

DEFAULT_SYNC_TOLERANCE: Final[timedelta] = timedelta(seconds=300)
"""Maximum lag between the local tip and now that still counts as ready."""

NEVER_FAILS_REASON: Final[str] = "sync_progress"
"""Reason attached to horizon failures raised while estimating sync progress."""
