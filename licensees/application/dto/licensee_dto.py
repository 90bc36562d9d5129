"""
Licensee DTOs returned to the surrounding application.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Tuple

from core.domain.exceptions import DomainException
from core.domain.value_objects import LicenseeStatus, RejectionReason
from licensees.domain.audit import Audit


@dataclass(frozen=True)
class AuditDTO:
    """DTO for one audit trail entry."""

    id: int
    licensee_id: int
    old_status: str
    new_status: str
    changed_at: datetime

    @classmethod
    def from_entity(cls, audit: Audit) -> "AuditDTO":
        return cls(
            id=audit.id,
            licensee_id=audit.licensee_id,
            old_status=audit.old_status.label,
            new_status=audit.new_status.label,
            changed_at=audit.changed_at,
        )


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a status change request.

    ``accepted`` with ``changed=False`` is a no-op: the licensee already
    had the requested status and no audit row was written.
    """

    accepted: bool
    licensee_id: int
    old_status: Optional[LicenseeStatus] = None
    new_status: Optional[LicenseeStatus] = None
    changed: bool = False
    audit: Optional[AuditDTO] = None
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None

    @classmethod
    def unchanged(cls, licensee_id: int, status: LicenseeStatus) -> "TransitionResult":
        return cls(
            accepted=True,
            licensee_id=licensee_id,
            old_status=status,
            new_status=status,
        )

    @classmethod
    def applied(
        cls, licensee_id: int, old_status: LicenseeStatus, audit: Audit
    ) -> "TransitionResult":
        return cls(
            accepted=True,
            licensee_id=licensee_id,
            old_status=old_status,
            new_status=audit.new_status,
            changed=True,
            audit=AuditDTO.from_entity(audit),
        )

    @classmethod
    def rejected(cls, licensee_id: int, error: DomainException) -> "TransitionResult":
        return cls(
            accepted=False,
            licensee_id=licensee_id,
            reason=error.reason,
            message=error.message,
        )


@dataclass(frozen=True)
class ExpirationReportDTO:
    """Expired and expiring-soon licensee ids, sorted ascending."""

    as_of: date
    horizon_days: int
    expired: List[int]
    expiring_soon: List[int]


@dataclass(frozen=True)
class SweepFailure:
    """A licensee the sweep could not transition."""

    licensee_id: int
    code: str
    message: str


@dataclass(frozen=True)
class SweepReport:
    """Summary of one expiration sweep run."""

    as_of: date
    horizon_days: int
    expired_count: int
    expiring_soon_count: int
    failures: Tuple[SweepFailure, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "as_of": self.as_of.isoformat(),
            "horizon_days": self.horizon_days,
            "expired_count": self.expired_count,
            "expiring_soon_count": self.expiring_soon_count,
            "failures": [
                {"licensee_id": f.licensee_id, "code": f.code, "message": f.message}
                for f in self.failures
            ],
        }


@dataclass(frozen=True)
class DashboardAlertsDTO:
    """Counters behind the dashboard expiration alert badge."""

    horizon_days: int
    expired: int
    expiring_soon: int

    @property
    def total(self) -> int:
        return self.expired + self.expiring_soon
