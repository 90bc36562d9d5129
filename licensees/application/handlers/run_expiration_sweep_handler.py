"""
RunExpirationSweepHandler.

Moves every licensee past its expiration date to Expired. Each licensee
is transitioned in its own transaction so one failure does not stop
the rest of the sweep.
"""
import logging
from typing import List

from core.domain.clock import Clock
from core.domain.exceptions import DomainException
from core.domain.value_objects import LicenseeStatus, TransitionCaller
from core.infrastructure.database import publish_on_commit
from licensees.application.commands.run_expiration_sweep import RunExpirationSweepCommand
from licensees.application.commands.transition_licensee_status import (
    TransitionLicenseeStatusCommand,
)
from licensees.application.dto.licensee_dto import SweepFailure, SweepReport
from licensees.application.handlers.transition_licensee_status_handler import (
    TransitionLicenseeStatusHandler,
)
from licensees.domain.events import ExpirationSweepCompleted
from licensees.domain.services import ExpirationEvaluator

logger = logging.getLogger(__name__)


class RunExpirationSweepHandler:
    """Handler for RunExpirationSweepCommand."""

    def __init__(
        self,
        evaluator: ExpirationEvaluator,
        transition_handler: TransitionLicenseeStatusHandler,
        clock: Clock,
    ):
        """Initialize handler with its collaborators."""
        self.evaluator = evaluator
        self.transition_handler = transition_handler
        self.clock = clock

    def handle(self, command: RunExpirationSweepCommand) -> SweepReport:
        """
        Handle run expiration sweep command.

        Safe to re-run: licensees already Expired are not candidates,
        so a second run with the same date changes nothing.

        Args:
            command: RunExpirationSweepCommand

        Returns:
            SweepReport with counts and per-licensee failures
        """
        evaluation = self.evaluator.evaluate(command.as_of, command.horizon_days)

        expired_count = 0
        failures: List[SweepFailure] = []
        for licensee_id in sorted(evaluation.expired):
            try:
                result = self.transition_handler.handle(
                    TransitionLicenseeStatusCommand(
                        licensee_id=licensee_id,
                        status=LicenseeStatus.EXPIRED,
                        caller=TransitionCaller.SYSTEM,
                    )
                )
            except DomainException as exc:
                logger.warning(
                    "Error expiring licensee %s: %s",
                    licensee_id,
                    exc.message,
                    extra={"licensee_id": licensee_id, "code": exc.code},
                )
                failures.append(SweepFailure(licensee_id, exc.code, exc.message))
                continue
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.error(
                    "Unexpected error expiring licensee %s",
                    licensee_id,
                    exc_info=True,
                    extra={"licensee_id": licensee_id, "code": exc.__class__.__name__},
                )
                failures.append(SweepFailure(licensee_id, exc.__class__.__name__, str(exc)))
                continue

            if not result.accepted:
                failures.append(
                    SweepFailure(licensee_id, result.reason.value, result.message or "")
                )
            elif result.changed:
                expired_count += 1

        report = SweepReport(
            as_of=command.as_of,
            horizon_days=command.horizon_days,
            expired_count=expired_count,
            expiring_soon_count=len(evaluation.expiring_soon),
            failures=tuple(failures),
        )
        publish_on_commit(
            ExpirationSweepCompleted(
                as_of=report.as_of,
                horizon_days=report.horizon_days,
                expired_count=report.expired_count,
                expiring_soon_count=report.expiring_soon_count,
                failure_count=len(report.failures),
                occurred_at=self.clock.now(),
            )
        )
        logger.info(
            "Expiration sweep for %s: %d expired, %d expiring soon, %d failed",
            command.as_of,
            report.expired_count,
            report.expiring_soon_count,
            len(report.failures),
        )
        return report
