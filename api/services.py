"""
Licensee lifecycle service.

Wires the Django repositories and the system clock into the command
and query handlers and exposes the operations the surrounding
application uses.
"""
from datetime import date
from typing import List, Optional

from core.domain.clock import Clock
from core.domain.value_objects import LicenseeStatus, TransitionCaller
from core.infrastructure.clock import SystemClock
from licensees.application.commands.run_expiration_sweep import RunExpirationSweepCommand
from licensees.application.commands.transition_licensee_status import (
    TransitionLicenseeStatusCommand,
)
from licensees.application.dto.licensee_dto import (
    AuditDTO,
    DashboardAlertsDTO,
    ExpirationReportDTO,
    SweepReport,
    TransitionResult,
)
from licensees.application.handlers.expiration_query_handlers import (
    EvaluateExpirationsHandler,
    GetDashboardAlertsHandler,
)
from licensees.application.handlers.get_audit_trail_handler import GetAuditTrailHandler
from licensees.application.handlers.run_expiration_sweep_handler import (
    RunExpirationSweepHandler,
)
from licensees.application.handlers.transition_licensee_status_handler import (
    TransitionLicenseeStatusHandler,
)
from licensees.application.queries.evaluate_expirations import EvaluateExpirationsQuery
from licensees.application.queries.get_audit_trail import GetAuditTrailQuery
from licensees.application.queries.get_dashboard_alerts import GetDashboardAlertsQuery
from licensees.application.services.expiration_settings import resolve_horizon_days
from licensees.domain.services import AuditRecorder, ExpirationEvaluator, StatusTransitionGuard
from licensees.infrastructure.repositories.django_audit_repository import (
    DjangoAuditRepository,
)
from licensees.infrastructure.repositories.django_licensee_repository import (
    DjangoLicenseeRepository,
)
from licensees.ports.audit_repository import AuditRepository
from licensees.ports.licensee_repository import LicenseeRepository
from offices.application.commands.deactivate_office import DeactivateOfficeCommand
from offices.application.commands.reactivate_office import ReactivateOfficeCommand
from offices.application.dto.office_dto import DeactivationResult, OfficeDTO, ReactivationResult
from offices.application.handlers.deactivate_office_handler import DeactivateOfficeHandler
from offices.application.handlers.list_replacement_offices_handler import (
    ListReplacementOfficesHandler,
)
from offices.application.handlers.reactivate_office_handler import ReactivateOfficeHandler
from offices.application.queries.list_replacement_offices import ListReplacementOfficesQuery
from offices.infrastructure.repositories.django_office_repository import (
    DjangoOfficeRepository,
)
from offices.ports.office_repository import OfficeRepository


class LicenseeLifecycleService:
    """
    Facade over the status lifecycle, audit and office reassignment.

    Horizons that are absent or non-positive are replaced with the
    configured default before reaching the evaluator; ``as_of`` defaults
    to today according to the clock.
    """

    def __init__(
        self,
        licensee_repository: LicenseeRepository,
        audit_repository: AuditRepository,
        office_repository: OfficeRepository,
        clock: Clock,
    ):
        self.clock = clock
        evaluator = ExpirationEvaluator(licensee_repository)
        self._transition = TransitionLicenseeStatusHandler(
            licensee_repository, AuditRecorder(audit_repository), clock
        )
        self._sweep = RunExpirationSweepHandler(evaluator, self._transition, clock)
        self._evaluate = EvaluateExpirationsHandler(evaluator)
        self._alerts = GetDashboardAlertsHandler(evaluator, licensee_repository)
        self._audit_trail = GetAuditTrailHandler(audit_repository)
        self._deactivate = DeactivateOfficeHandler(office_repository, licensee_repository, clock)
        self._reactivate = ReactivateOfficeHandler(office_repository, clock)
        self._replacements = ListReplacementOfficesHandler(office_repository)

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "LicenseeLifecycleService":
        """Service backed by the Django ORM."""
        return cls(
            licensee_repository=DjangoLicenseeRepository(),
            audit_repository=DjangoAuditRepository(),
            office_repository=DjangoOfficeRepository(),
            clock=clock or SystemClock(),
        )

    def evaluate_expirations(
        self, as_of: Optional[date] = None, horizon_days: Optional[int] = None
    ) -> ExpirationReportDTO:
        return self._evaluate.handle(
            EvaluateExpirationsQuery(
                as_of=as_of or self.clock.today(),
                horizon_days=resolve_horizon_days(horizon_days),
            )
        )

    def run_expiration_sweep(
        self, as_of: Optional[date] = None, horizon_days: Optional[int] = None
    ) -> SweepReport:
        return self._sweep.handle(
            RunExpirationSweepCommand(
                as_of=as_of or self.clock.today(),
                horizon_days=resolve_horizon_days(horizon_days),
            )
        )

    def transition_licensee_status(
        self, licensee_id: int, new_status: LicenseeStatus, is_manual: bool = True
    ) -> TransitionResult:
        caller = TransitionCaller.MANUAL if is_manual else TransitionCaller.SYSTEM
        return self._transition.handle(
            TransitionLicenseeStatusCommand(
                licensee_id=licensee_id, status=new_status, caller=caller
            )
        )

    def deactivate_office(
        self, office_id: int, replacement_office_id: Optional[int] = None
    ) -> DeactivationResult:
        return self._deactivate.handle(
            DeactivateOfficeCommand(
                office_id=office_id, replacement_office_id=replacement_office_id
            )
        )

    def get_audit_trail(self, licensee_id: int) -> List[AuditDTO]:
        return self._audit_trail.handle(GetAuditTrailQuery(licensee_id=licensee_id))

    def reactivate_office(self, office_id: int) -> ReactivationResult:
        return self._reactivate.handle(ReactivateOfficeCommand(office_id=office_id))

    def list_replacement_offices(self, office_id: int) -> List[OfficeDTO]:
        return self._replacements.handle(ListReplacementOfficesQuery(office_id=office_id))

    def get_dashboard_alerts(
        self, as_of: Optional[date] = None, horizon_days: Optional[int] = None
    ) -> DashboardAlertsDTO:
        return self._alerts.handle(
            GetDashboardAlertsQuery(
                as_of=as_of or self.clock.today(),
                horizon_days=resolve_horizon_days(horizon_days),
            )
        )

    @staticmethod
    def selectable_statuses(current: LicenseeStatus) -> tuple:
        """Statuses a manual edit form may offer for a licensee in ``current``."""
        return StatusTransitionGuard.selectable_statuses(current)
