"""
ReactivateOfficeHandler.
"""
import logging

from core.domain.clock import Clock
from core.domain.exceptions import OfficeNotFoundError
from core.infrastructure.database import atomic, publish_on_commit
from offices.application.commands.reactivate_office import ReactivateOfficeCommand
from offices.application.dto.office_dto import ReactivationResult
from offices.domain.events import OfficeReactivated
from offices.ports.office_repository import OfficeRepository

logger = logging.getLogger(__name__)


class ReactivateOfficeHandler:
    """Handler for ReactivateOfficeCommand."""

    def __init__(self, office_repository: OfficeRepository, clock: Clock):
        self.office_repository = office_repository
        self.clock = clock

    def handle(self, command: ReactivateOfficeCommand) -> ReactivationResult:
        try:
            with atomic():
                office = self.office_repository.find_by_id(command.office_id)
                if office is None:
                    raise OfficeNotFoundError(f"Office {command.office_id} not found")
                if office.active:
                    return ReactivationResult(reactivated=True, office_id=office.id)
                self.office_repository.update_active(
                    office.activate(), expected_version=office.version
                )
                publish_on_commit(
                    OfficeReactivated(office_id=office.id, occurred_at=self.clock.now())
                )
        except OfficeNotFoundError as exc:
            return ReactivationResult(
                reactivated=False,
                office_id=command.office_id,
                reason=exc.reason,
                message=exc.message,
            )

        logger.info("%s has been activated", office.name, extra={"office_id": office.id})
        return ReactivationResult(reactivated=True, office_id=office.id)
