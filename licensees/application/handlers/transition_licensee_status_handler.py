"""
TransitionLicenseeStatusHandler.

Applies a status change: loads the licensee, asks the guard, writes the
new status and its audit row in one transaction.
"""
import logging

from core.domain.clock import Clock
from core.domain.exceptions import (
    DomainValidationError,
    LicenseeNotFoundError,
    NotFoundError,
)
from core.domain.value_objects import TransitionCaller
from core.infrastructure.database import atomic, publish_on_commit
from core.metrics import licensee_transition_rejections_total
from licensees.application.commands.transition_licensee_status import (
    TransitionLicenseeStatusCommand,
)
from licensees.application.dto.licensee_dto import TransitionResult
from licensees.domain.events import LicenseeStatusChanged
from licensees.domain.services import AuditRecorder, StatusTransitionGuard
from licensees.ports.licensee_repository import LicenseeRepository

logger = logging.getLogger(__name__)


class TransitionLicenseeStatusHandler:
    """Handler for TransitionLicenseeStatusCommand."""

    def __init__(
        self,
        licensee_repository: LicenseeRepository,
        audit_recorder: AuditRecorder,
        clock: Clock,
    ):
        """Initialize handler with its collaborators."""
        self.licensee_repository = licensee_repository
        self.audit_recorder = audit_recorder
        self.clock = clock

    def handle(self, command: TransitionLicenseeStatusCommand) -> TransitionResult:
        """
        Handle transition licensee status command.

        Args:
            command: TransitionLicenseeStatusCommand

        Returns:
            TransitionResult, rejected for unknown licensees and
            disallowed transitions

        Raises:
            ConcurrencyConflictError: If the licensee changed under us
            PersistenceError: If the store fails
        """
        try:
            with atomic():
                licensee = self.licensee_repository.find_by_id(command.licensee_id)
                if licensee is None:
                    raise LicenseeNotFoundError(f"Licensee {command.licensee_id} not found")

                changed = StatusTransitionGuard.check(
                    licensee.status, command.status, command.caller
                )
                if not changed:
                    return TransitionResult.unchanged(licensee.id, licensee.status)

                now = self.clock.now()
                # The sweep is housekeeping and leaves updated_at alone
                updated_at = now if command.caller is TransitionCaller.MANUAL else None
                self.licensee_repository.update_status(
                    licensee.with_status(command.status, updated_at=updated_at),
                    expected_version=licensee.version,
                )
                audit = self.audit_recorder.append(
                    licensee.id, licensee.status, command.status, now
                )
                publish_on_commit(
                    LicenseeStatusChanged(
                        licensee_id=licensee.id,
                        old_status=licensee.status,
                        new_status=command.status,
                        caller=command.caller,
                        occurred_at=now,
                    )
                )
        except (NotFoundError, DomainValidationError) as exc:
            licensee_transition_rejections_total.labels(reason=exc.reason.value).inc()
            logger.info(
                "Rejected status change for licensee %s: %s",
                command.licensee_id,
                exc.code,
                extra={
                    "licensee_id": command.licensee_id,
                    "requested_status": command.status.value,
                    "caller": command.caller.value,
                    "reason": exc.reason.value,
                },
            )
            return TransitionResult.rejected(command.licensee_id, exc)

        logger.info(
            "Licensee %s (%s) status changed from %s to %s",
            licensee.id,
            licensee.full_name,
            licensee.status,
            command.status,
            extra={"licensee_id": licensee.id, "caller": command.caller.value},
        )
        return TransitionResult.applied(licensee.id, licensee.status, audit)
