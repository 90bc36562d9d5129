"""
DeactivateOfficeCommand.

Command to deactivate an office, optionally moving its licensees first.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class DeactivateOfficeCommand:
    """Command to deactivate an office."""

    office_id: int
    replacement_office_id: Optional[int] = None
