"""
GetDashboardAlertsQuery.
"""
from dataclasses import dataclass
from datetime import date


@dataclass
class GetDashboardAlertsQuery:
    """Query for the expiration alert counters shown on the dashboard."""

    as_of: date
    horizon_days: int
