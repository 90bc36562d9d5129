"""
EvaluateExpirationsQuery.
"""
from dataclasses import dataclass
from datetime import date


@dataclass
class EvaluateExpirationsQuery:
    """Query for expired and expiring-soon licensees."""

    as_of: date
    horizon_days: int
