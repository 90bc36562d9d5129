"""
Integration tests for LicenseeLifecycleService and its entry points.
"""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from api.services import LicenseeLifecycleService
from core.domain.value_objects import LicenseeStatus, RejectionReason
from core.tasks import run_expiration_sweep_task


@pytest.fixture
def service(fixed_clock):
    """Fixture for a service running on the frozen clock."""
    return LicenseeLifecycleService.default(clock=fixed_clock)


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseeLifecycleService:
    """Integration tests for LicenseeLifecycleService."""

    def test_evaluate_expirations_defaults(self, service, make_licensee, today):
        """Test as_of defaults to today and the horizon to the configured default."""
        expired = make_licensee(expires_in=-1)
        soon = make_licensee(expires_in=30)
        make_licensee(expires_in=31)

        report = service.evaluate_expirations()

        assert report.as_of == today
        assert report.horizon_days == 30
        assert report.expired == [expired.id]
        assert report.expiring_soon == [soon.id]

    def test_evaluate_expirations_non_positive_horizon(self, service, make_licensee):
        """Test a non-positive horizon is replaced by the default."""
        make_licensee(expires_in=20)

        report = service.evaluate_expirations(horizon_days=0)

        assert report.horizon_days == 30
        assert len(report.expiring_soon) == 1

    def test_evaluate_does_not_write(self, service, licensee_repository, make_licensee):
        """Test evaluation is read-only."""
        licensee = make_licensee(expires_in=-1)

        service.evaluate_expirations()

        assert licensee_repository.find_by_id(licensee.id).status == LicenseeStatus.ACTIVE

    def test_transition_and_audit_trail(self, service, fixed_clock, make_licensee):
        """Test the audit trail lists changes oldest first with labels."""
        licensee = make_licensee()

        service.transition_licensee_status(licensee.id, LicenseeStatus.INACTIVE)
        fixed_clock.advance(timedelta(minutes=5))
        service.transition_licensee_status(licensee.id, LicenseeStatus.ACTIVE)
        fixed_clock.advance(timedelta(days=400))
        service.run_expiration_sweep()

        trail = service.get_audit_trail(licensee.id)

        assert [(a.old_status, a.new_status) for a in trail] == [
            ("Active", "Inactive"),
            ("Inactive", "Active"),
            ("Active", "Expired"),
        ]

    def test_audit_trail_unknown_licensee(self, service):
        """Test an unknown licensee has an empty trail."""
        assert service.get_audit_trail(999999) == []

    def test_manual_expired_rejected(self, service, make_licensee):
        """Test the manual flag maps to the manual caller."""
        licensee = make_licensee()

        result = service.transition_licensee_status(licensee.id, LicenseeStatus.EXPIRED)

        assert result.reason is RejectionReason.MANUAL_EXPIRATION_FORBIDDEN

    def test_system_expired_accepted(self, service, make_licensee):
        """Test the system flag may expire a licensee."""
        licensee = make_licensee()

        result = service.transition_licensee_status(
            licensee.id, LicenseeStatus.EXPIRED, is_manual=False
        )

        assert result.accepted is True
        assert result.changed is True

    def test_dashboard_alerts(self, service, make_licensee):
        """Test alert counts add expired and expiring soon."""
        make_licensee(expires_in=-3)
        make_licensee(expires_in=-1, status=LicenseeStatus.INACTIVE)
        make_licensee(expires_in=2)
        make_licensee(expires_in=90)

        alerts = service.get_dashboard_alerts()

        assert (alerts.expired, alerts.expiring_soon, alerts.total) == (2, 1, 3)

    def test_dashboard_alerts_after_sweep(self, service, make_licensee):
        """Test licensees already marked Expired still count as expired."""
        make_licensee(expires_in=-3)
        make_licensee(expires_in=-1)
        make_licensee(expires_in=-40, status=LicenseeStatus.EXPIRED)
        make_licensee(expires_in=10)

        service.run_expiration_sweep()
        alerts = service.get_dashboard_alerts()

        assert (alerts.expired, alerts.expiring_soon, alerts.total) == (3, 1, 4)

    def test_office_operations(self, service, make_office, make_licensee, db_office):
        """Test deactivation, replacement candidates and reactivation."""
        replacement = make_office(name="Annex")
        make_licensee()

        assert [o.id for o in service.list_replacement_offices(db_office.id)] == [replacement.id]

        result = service.deactivate_office(db_office.id, replacement.id)
        assert result.reassigned_count == 1
        assert service.list_replacement_offices(replacement.id) == []

        assert service.reactivate_office(db_office.id).reactivated is True

    def test_selectable_statuses(self):
        """Test the form options for an inactive licensee."""
        assert LicenseeLifecycleService.selectable_statuses(LicenseeStatus.INACTIVE) == (
            LicenseeStatus.INACTIVE,
            LicenseeStatus.ACTIVE,
        )


@pytest.mark.django_db
@pytest.mark.integration
class TestRunExpirationSweepCommand:
    """Integration tests for the run_expiration_sweep management command."""

    def test_sweep(self, licensee_repository, make_licensee, today):
        """Test the command expires licensees as of the given date."""
        licensee = make_licensee(expires_in=-1)
        out = StringIO()

        call_command("run_expiration_sweep", "--as-of", today.isoformat(), stdout=out)

        assert "Marked 1 licensee(s) as expired" in out.getvalue()
        assert licensee_repository.find_by_id(licensee.id).status == LicenseeStatus.EXPIRED

    def test_dry_run(self, licensee_repository, make_licensee, today):
        """Test dry run reports without changing anything."""
        licensee = make_licensee(expires_in=-1)
        out = StringIO()

        call_command(
            "run_expiration_sweep", "--as-of", today.isoformat(), "--dry-run", stdout=out
        )

        output = out.getvalue()
        assert "DRY RUN" in output
        assert f"Licensee {licensee.id}" in output
        assert licensee_repository.find_by_id(licensee.id).status == LicenseeStatus.ACTIVE

    def test_invalid_date(self):
        """Test a malformed date is reported as a command error."""
        with pytest.raises(CommandError):
            call_command("run_expiration_sweep", "--as-of", "10/03/2024")


@pytest.mark.django_db
@pytest.mark.integration
class TestRunExpirationSweepTask:
    """Integration tests for the Celery sweep task."""

    def test_task_runs_eagerly(self, licensee_repository, make_licensee):
        """Test the task sweeps as of today and returns the report."""
        lapsed = make_licensee(expires_in=-1)
        current = make_licensee(expires_in=36500)

        result = run_expiration_sweep_task.delay(horizon_days=7).get()

        assert result["expired_count"] >= 1
        assert result["horizon_days"] == 7
        assert result["failures"] == []
        assert licensee_repository.find_by_id(lapsed.id).status == LicenseeStatus.EXPIRED
        assert licensee_repository.find_by_id(current.id).status == LicenseeStatus.ACTIVE
