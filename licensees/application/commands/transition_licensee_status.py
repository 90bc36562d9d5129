"""
TransitionLicenseeStatusCommand.

Command to move a licensee to another status.
"""
from dataclasses import dataclass

from core.domain.value_objects import LicenseeStatus, TransitionCaller


@dataclass
class TransitionLicenseeStatusCommand:
    """Command to change the status of a licensee."""

    licensee_id: int
    status: LicenseeStatus
    caller: TransitionCaller = TransitionCaller.MANUAL
