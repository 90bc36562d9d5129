"""
GetAuditTrailQuery.
"""
from dataclasses import dataclass


@dataclass
class GetAuditTrailQuery:
    """Query for the status history of one licensee."""

    licensee_id: int
