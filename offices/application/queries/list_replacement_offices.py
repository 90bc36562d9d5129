"""
ListReplacementOfficesQuery.
"""
from dataclasses import dataclass


@dataclass
class ListReplacementOfficesQuery:
    """Query for active offices that can take over from ``office_id``."""

    office_id: int
