"""
RunExpirationSweepCommand.

Command to bring every licensee status in line with a reference date.
"""
from dataclasses import dataclass
from datetime import date


@dataclass
class RunExpirationSweepCommand:
    """Command to expire licensees whose expiration date has passed."""

    as_of: date
    horizon_days: int
