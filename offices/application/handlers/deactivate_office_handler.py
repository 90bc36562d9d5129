"""
DeactivateOfficeHandler.

Handler for deactivating an office. When a replacement is given, the
office's licensees are moved to it and the office is marked inactive
in the same transaction.
"""
import logging

from core.domain.clock import Clock
from core.domain.exceptions import (
    DomainValidationError,
    NotFoundError,
    OfficeNotFoundError,
)
from core.infrastructure.database import atomic, publish_on_commit
from licensees.ports.licensee_repository import LicenseeRepository
from offices.application.commands.deactivate_office import DeactivateOfficeCommand
from offices.application.dto.office_dto import DeactivationResult
from offices.domain.events import OfficeDeactivated
from offices.domain.services import ReplacementOfficePolicy
from offices.ports.office_repository import OfficeRepository

logger = logging.getLogger(__name__)


class DeactivateOfficeHandler:
    """Handler for DeactivateOfficeCommand."""

    def __init__(
        self,
        office_repository: OfficeRepository,
        licensee_repository: LicenseeRepository,
        clock: Clock,
    ):
        """Initialize handler with repositories."""
        self.office_repository = office_repository
        self.licensee_repository = licensee_repository
        self.clock = clock

    def handle(self, command: DeactivateOfficeCommand) -> DeactivationResult:
        """
        Handle deactivate office command.

        Args:
            command: DeactivateOfficeCommand

        Returns:
            DeactivationResult, rejected for an unknown office or an
            unusable replacement

        Raises:
            ConcurrencyConflictError: If the office changed under us
            PersistenceError: If the store fails
        """
        try:
            with atomic():
                office = self.office_repository.find_by_id(command.office_id)
                if office is None:
                    raise OfficeNotFoundError(f"Office {command.office_id} not found")

                reassigned = 0
                stranded = 0
                if command.replacement_office_id is not None:
                    replacement = ReplacementOfficePolicy.check(
                        office,
                        command.replacement_office_id,
                        self.office_repository.find_by_id(command.replacement_office_id),
                    )
                    reassigned = self.licensee_repository.reassign_office(
                        office.id, replacement.id, updated_at=self.clock.now()
                    )
                else:
                    stranded = self.licensee_repository.count_by_office(office.id)

                self.office_repository.update_active(
                    office.deactivate(), expected_version=office.version
                )
                publish_on_commit(
                    OfficeDeactivated(
                        office_id=office.id,
                        replacement_office_id=command.replacement_office_id,
                        reassigned_count=reassigned,
                        stranded_count=stranded,
                        occurred_at=self.clock.now(),
                    )
                )
        except (NotFoundError, DomainValidationError) as exc:
            logger.info(
                "Rejected deactivation of office %s: %s",
                command.office_id,
                exc.code,
                extra={
                    "office_id": command.office_id,
                    "replacement_office_id": command.replacement_office_id,
                    "reason": exc.reason.value,
                },
            )
            return DeactivationResult.rejected(command.office_id, exc)

        if stranded:
            logger.warning(
                "Office %s deactivated without replacement; %d licensee(s) still reference it",
                office.id,
                stranded,
            )
        else:
            logger.info(
                "Office %s deactivated, %d licensee(s) moved to office %s",
                office.id,
                reassigned,
                command.replacement_office_id,
            )
        return DeactivationResult(
            deactivated=True,
            office_id=office.id,
            replacement_office_id=command.replacement_office_id,
            reassigned_count=reassigned,
            stranded_count=stranded,
        )
