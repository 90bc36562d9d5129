"""
System clock adapter backed by Django's timezone utilities.
"""
from datetime import date, datetime

from django.utils import timezone

from core.domain.clock import Clock


class SystemClock(Clock):
    """Clock reading the real time in the configured TIME_ZONE."""

    def now(self) -> datetime:
        return timezone.now()

    def today(self) -> date:
        return timezone.localdate()
