"""
Transitions component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID


class TimePort(Protocol):
    """Time provider interface."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class IdPort(Protocol):
    """Log entry id generator."""

    def __call__(self) -> UUID:
        ...
