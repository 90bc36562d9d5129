"""
Read-only expiration query handlers.
"""
from licensees.application.dto.licensee_dto import DashboardAlertsDTO, ExpirationReportDTO
from licensees.application.queries.evaluate_expirations import EvaluateExpirationsQuery
from licensees.application.queries.get_dashboard_alerts import GetDashboardAlertsQuery
from licensees.domain.services import ExpirationEvaluator
from licensees.ports.licensee_repository import LicenseeRepository


class EvaluateExpirationsHandler:
    """Handler for EvaluateExpirationsQuery."""

    def __init__(self, evaluator: ExpirationEvaluator):
        self.evaluator = evaluator

    def handle(self, query: EvaluateExpirationsQuery) -> ExpirationReportDTO:
        """
        Handle evaluate expirations query.

        Args:
            query: EvaluateExpirationsQuery

        Returns:
            ExpirationReportDTO with sorted id lists
        """
        evaluation = self.evaluator.evaluate(query.as_of, query.horizon_days)
        return ExpirationReportDTO(
            as_of=evaluation.as_of,
            horizon_days=evaluation.horizon_days,
            expired=sorted(evaluation.expired),
            expiring_soon=sorted(evaluation.expiring_soon),
        )


class GetDashboardAlertsHandler:
    """
    Handler for GetDashboardAlertsQuery.

    ``expired`` counts every licensee expired on ``as_of``, whether or
    not a sweep has already marked it, so the badge stays accurate
    after the sweep runs.
    """

    def __init__(
        self, evaluator: ExpirationEvaluator, licensee_repository: LicenseeRepository
    ):
        self.evaluator = evaluator
        self.licensee_repository = licensee_repository

    def handle(self, query: GetDashboardAlertsQuery) -> DashboardAlertsDTO:
        evaluation = self.evaluator.evaluate(query.as_of, query.horizon_days)
        expired = self.licensee_repository.find_currently_expired_ids(query.as_of)
        return DashboardAlertsDTO(
            horizon_days=evaluation.horizon_days,
            expired=len(expired),
            expiring_soon=len(evaluation.expiring_soon),
        )
