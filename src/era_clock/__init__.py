"""Era-aware slot and time conversions, and sync progress estimation."""
