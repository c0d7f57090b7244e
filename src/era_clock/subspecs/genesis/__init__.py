"""Genesis time configuration."""

from .config import TimeConfig

__all__ = ["TimeConfig"]
