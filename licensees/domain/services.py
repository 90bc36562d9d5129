"""
Licensee domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, FrozenSet

from core.domain.exceptions import (
    InvalidStatusTransitionError,
    ManualExpirationForbiddenError,
)
from core.domain.value_objects import LicenseeStatus, TransitionCaller
from licensees.domain.audit import Audit
from licensees.ports.audit_repository import AuditRepository
from licensees.ports.licensee_repository import LicenseeRepository

logger = logging.getLogger(__name__)

_ALLOWED_TRANSITIONS: Dict[TransitionCaller, Dict[LicenseeStatus, FrozenSet[LicenseeStatus]]] = {
    TransitionCaller.MANUAL: {
        LicenseeStatus.INACTIVE: frozenset({LicenseeStatus.ACTIVE}),
        LicenseeStatus.ACTIVE: frozenset({LicenseeStatus.INACTIVE}),
        LicenseeStatus.EXPIRED: frozenset(),
    },
    TransitionCaller.SYSTEM: {
        LicenseeStatus.INACTIVE: frozenset({LicenseeStatus.EXPIRED}),
        LicenseeStatus.ACTIVE: frozenset({LicenseeStatus.EXPIRED}),
        LicenseeStatus.EXPIRED: frozenset(),
    },
}


class StatusTransitionGuard:
    """
    Lifecycle rules for licensee status.

    Manual edits move between Inactive and Active only. Only the system
    (the expiration sweep) moves a licensee to Expired. Nothing leaves
    Expired through this guard; that requires a renewal.
    """

    @staticmethod
    def allowed_targets(
        current: LicenseeStatus, caller: TransitionCaller
    ) -> FrozenSet[LicenseeStatus]:
        """
        Statuses ``caller`` may move a licensee to from ``current``.

        Args:
            current: Current status
            caller: Manual edit or system

        Returns:
            Reachable statuses, excluding ``current`` itself
        """
        return _ALLOWED_TRANSITIONS[caller][current]

    @staticmethod
    def selectable_statuses(current: LicenseeStatus) -> tuple:
        """
        Statuses a manual edit form may offer, in display order.

        The current status is always included so the form can show it.
        Expired is never a target; it is only listed as the current status
        of an already expired licensee.
        """
        options = {current} | StatusTransitionGuard.allowed_targets(
            current, TransitionCaller.MANUAL
        )
        return tuple(status for status in LicenseeStatus if status in options)

    @staticmethod
    def check(
        current: LicenseeStatus,
        requested: LicenseeStatus,
        caller: TransitionCaller,
    ) -> bool:
        """
        Validate a requested status change.

        Args:
            current: Status stored now
            requested: Status asked for
            caller: Manual edit or system

        Returns:
            True if the status actually changes, False for a no-op

        Raises:
            ManualExpirationForbiddenError: Manual caller asked for Expired
            InvalidStatusTransitionError: Any other move the lifecycle forbids
        """
        if caller is TransitionCaller.MANUAL and requested is LicenseeStatus.EXPIRED:
            raise ManualExpirationForbiddenError()
        if requested is current:
            return False
        if current is LicenseeStatus.EXPIRED:
            raise InvalidStatusTransitionError(
                f"An expired licensee cannot move to {requested.label} "
                "until the license is renewed"
            )
        if requested not in StatusTransitionGuard.allowed_targets(current, caller):
            raise InvalidStatusTransitionError(
                f"{caller.value.title()} callers cannot move a licensee "
                f"from {current.label} to {requested.label}"
            )
        return True


@dataclass(frozen=True)
class ExpirationEvaluation:
    """Result of classifying licensees against a reference date."""

    as_of: date
    horizon_days: int
    expired: FrozenSet[int]
    expiring_soon: FrozenSet[int]


class ExpirationEvaluator:
    """
    Read-only classification of licensees by expiration date.

    ``expired``: expiration date before ``as_of`` and not yet Expired.
    ``expiring_soon``: Active with expiration date in
    ``[as_of, as_of + horizon_days]``.
    """

    def __init__(self, licensee_repository: LicenseeRepository):
        self.licensee_repository = licensee_repository

    def evaluate(self, as_of: date, horizon_days: int) -> ExpirationEvaluation:
        """
        Classify licensees.

        Args:
            as_of: Reference date
            horizon_days: Positive look-ahead in days

        Returns:
            ExpirationEvaluation

        Raises:
            ValueError: If horizon_days is not a positive integer
        """
        if isinstance(horizon_days, bool) or not isinstance(horizon_days, int) or horizon_days <= 0:
            raise ValueError(f"horizon_days must be a positive integer, got {horizon_days!r}")

        expired = frozenset(self.licensee_repository.find_expired_ids(as_of))
        expiring_soon = frozenset(
            self.licensee_repository.find_expiring_ids(
                as_of, as_of + timedelta(days=horizon_days)
            )
        )
        return ExpirationEvaluation(
            as_of=as_of,
            horizon_days=horizon_days,
            expired=expired,
            expiring_soon=expiring_soon,
        )


class AuditRecorder:
    """Appends status audit records through the audit repository."""

    def __init__(self, audit_repository: AuditRepository):
        self.audit_repository = audit_repository

    def append(
        self,
        licensee_id: int,
        old_status: LicenseeStatus,
        new_status: LicenseeStatus,
        at: datetime,
    ) -> Audit:
        """
        Record one status change.

        Args:
            licensee_id: Licensee id
            old_status: Status before the change
            new_status: Status after the change
            at: When the change happened

        Returns:
            Stored Audit entity
        """
        audit = self.audit_repository.append(
            Audit.record(licensee_id, old_status, new_status, at)
        )
        logger.debug(
            "Audit %s recorded for licensee %s: %s -> %s",
            audit.id,
            licensee_id,
            old_status,
            new_status,
        )
        return audit
