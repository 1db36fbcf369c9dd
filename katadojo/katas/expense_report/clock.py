"""Injectable date source for report headers.

Formatters receive a Clock at construction and never call ``date.today()``
themselves, so a report rendered with a FixedClock is byte-for-byte
reproducible.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone


class Clock(ABC):
    """Source of the current calendar date."""

    @abstractmethod
    def today(self) -> date:
        """Return the current date."""
        ...


class SystemClock(Clock):
    """Wall-clock date in UTC."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()


class FixedClock(Clock):
    """Clock pinned to a single date, for tests and reproducible output."""

    def __init__(self, fixed_date: date):
        self._fixed_date = fixed_date

    def today(self) -> date:
        return self._fixed_date

    def __repr__(self) -> str:
        return f"FixedClock({self._fixed_date.isoformat()})"
