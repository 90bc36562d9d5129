"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest

from core.domain.clock import FixedClock
from core.domain.value_objects import LicenseeStatus
from licensees.application.handlers.run_expiration_sweep_handler import (
    RunExpirationSweepHandler,
)
from licensees.application.handlers.transition_licensee_status_handler import (
    TransitionLicenseeStatusHandler,
)
from licensees.domain.license_type import LicenseType
from licensees.domain.licensee import Licensee
from licensees.domain.services import AuditRecorder, ExpirationEvaluator
from licensees.infrastructure.repositories.django_audit_repository import (
    DjangoAuditRepository,
)
from licensees.infrastructure.repositories.django_license_type_repository import (
    DjangoLicenseTypeRepository,
)
from licensees.infrastructure.repositories.django_licensee_repository import (
    DjangoLicenseeRepository,
)
from offices.domain.office import Office
from offices.infrastructure.repositories.django_office_repository import (
    DjangoOfficeRepository,
)

# Midday so that date arithmetic never crosses midnight in UTC
NOW = datetime(2024, 3, 10, 12, 0, tzinfo=dt_timezone.utc)
TODAY = NOW.date()


@pytest.fixture
def now():
    """Fixture for the frozen test instant."""
    return NOW


@pytest.fixture
def today():
    """Fixture for the frozen test date."""
    return TODAY


@pytest.fixture
def fixed_clock():
    """Fixture for a clock frozen at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def licensee_repository():
    """Fixture for LicenseeRepository."""
    return DjangoLicenseeRepository()


@pytest.fixture
def audit_repository():
    """Fixture for AuditRepository."""
    return DjangoAuditRepository()


@pytest.fixture
def office_repository():
    """Fixture for OfficeRepository."""
    return DjangoOfficeRepository()


@pytest.fixture
def license_type_repository():
    """Fixture for LicenseTypeRepository."""
    return DjangoLicenseTypeRepository()


@pytest.fixture
def transition_handler(licensee_repository, audit_repository, fixed_clock):
    """Fixture for TransitionLicenseeStatusHandler."""
    return TransitionLicenseeStatusHandler(
        licensee_repository, AuditRecorder(audit_repository), fixed_clock
    )


@pytest.fixture
def sweep_handler(licensee_repository, transition_handler, fixed_clock):
    """Fixture for RunExpirationSweepHandler."""
    return RunExpirationSweepHandler(
        ExpirationEvaluator(licensee_repository), transition_handler, fixed_clock
    )


@pytest.fixture
def db_license_type(db, license_type_repository):
    """Fixture for a LicenseType saved in database."""
    return license_type_repository.add(LicenseType(id=None, name="Real Estate Agent"))


@pytest.fixture
def make_office(db, office_repository):
    """Factory fixture saving offices."""

    def _make(name="Main Street", city="Springfield", state="IL", active=True):
        office = office_repository.add(Office.create(name=name, city=city, state=state))
        if not active:
            office = office_repository.update_active(
                office.deactivate(), expected_version=office.version
            )
        return office

    return _make


@pytest.fixture
def db_office(make_office):
    """Fixture for an active Office saved in database."""
    return make_office()


@pytest.fixture
def make_licensee(db, licensee_repository, db_license_type, db_office):
    """
    Factory fixture saving licensees.

    ``expires_in`` is relative to TODAY and may be negative; rows are
    written directly so past expiration dates can be seeded.
    """
    counter = {"n": 0}

    def _make(
        expires_in=365,
        status=LicenseeStatus.ACTIVE,
        office=None,
        first_name="Jane",
        last_name="Doe",
    ):
        counter["n"] += 1
        expiration_date = None if expires_in is None else TODAY + timedelta(days=expires_in)
        licensee = Licensee(
            id=None,
            first_name=first_name,
            last_name=last_name,
            email=f"licensee{counter['n']}@example.com",
            license_number=f"LN-{counter['n']:05d}",
            license_type_id=db_license_type.id,
            office_id=(office or db_office).id,
            status=status,
            issue_date=None,
            expiration_date=expiration_date,
            created_at=NOW - timedelta(days=400),
        )
        return licensee_repository.add(licensee)

    return _make


@pytest.fixture
def published_events(monkeypatch):
    """
    Swap the global event bus for a recording one.

    Returns the list events are appended to once their transaction
    commits.
    """
    from core.infrastructure import events as events_module

    recorded = []

    class _RecordingBus(events_module.InMemoryEventBus):
        def publish(self, event):
            recorded.append(event)
            super().publish(event)

    monkeypatch.setattr(events_module, "event_bus", _RecordingBus())
    return recorded
