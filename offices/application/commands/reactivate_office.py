"""
ReactivateOfficeCommand.
"""
from dataclasses import dataclass


@dataclass
class ReactivateOfficeCommand:
    """Command to make an inactive office active again."""

    office_id: int
