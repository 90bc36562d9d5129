"""
Time source abstraction.

Every rule that depends on "now" or "today" receives a Clock so that
sweeps and audits are repeatable in tests.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    """Supplies the current instant and calendar date."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        pass

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar date."""
        pass


class FixedClock(Clock):
    """Clock frozen at a given instant. Can be moved forward explicitly."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return self._instant.date()

    def advance(self, delta) -> None:
        """Move the clock forward by a timedelta."""
        self._instant = self._instant + delta
