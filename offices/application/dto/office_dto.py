"""
Office DTOs returned to the surrounding application.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.exceptions import DomainException
from core.domain.value_objects import RejectionReason
from offices.domain.office import Office


@dataclass(frozen=True)
class OfficeDTO:
    """DTO for office information."""

    id: int
    name: str
    city: str
    state: str
    active: bool
    active_status: str

    @classmethod
    def from_entity(cls, office: Office) -> "OfficeDTO":
        return cls(
            id=office.id,
            name=office.name,
            city=office.city,
            state=office.state,
            active=office.active,
            active_status=office.active_status,
        )


@dataclass(frozen=True)
class DeactivationResult:
    """
    Outcome of an office deactivation.

    ``stranded_count`` is the number of licensees left pointing at the
    now inactive office because no replacement was given.
    """

    deactivated: bool
    office_id: int
    replacement_office_id: Optional[int] = None
    reassigned_count: int = 0
    stranded_count: int = 0
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None

    @classmethod
    def rejected(cls, office_id: int, error: DomainException) -> "DeactivationResult":
        return cls(
            deactivated=False,
            office_id=office_id,
            reason=error.reason,
            message=error.message,
        )


@dataclass(frozen=True)
class ReactivationResult:
    """Outcome of an office reactivation."""

    reactivated: bool
    office_id: int
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None
