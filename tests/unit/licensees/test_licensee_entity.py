"""
Unit tests for Licensee and Audit entities.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.value_objects import LicenseeStatus
from licensees.domain.audit import Audit
from licensees.domain.licensee import Licensee

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


def _create(**overrides):
    values = dict(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        license_number="LN-1",
        license_type_id=1,
        office_id=1,
        expiration_date=NOW.date() + timedelta(days=30),
        created_at=NOW,
    )
    values.update(overrides)
    return Licensee.create(**values)


class TestLicensee:
    """Tests for Licensee entity."""

    def test_create(self):
        """Test creating a licensee defaults to Active."""
        licensee = _create()

        assert licensee.id is None
        assert licensee.status == LicenseeStatus.ACTIVE
        assert licensee.version == 0
        assert licensee.full_name == "Jane Doe"

    def test_create_inactive(self):
        """Test creating an inactive licensee."""
        assert _create(status=LicenseeStatus.INACTIVE).status == LicenseeStatus.INACTIVE

    def test_create_expired_rejected(self):
        """Test a licensee cannot start out expired."""
        with pytest.raises(ValueError, match="Expired"):
            _create(status=LicenseeStatus.EXPIRED)

    def test_create_past_expiration_rejected(self):
        """Test the expiration date cannot be before the creation date."""
        with pytest.raises(ValueError, match="past"):
            _create(expiration_date=NOW.date() - timedelta(days=1))

    def test_create_expiring_today_allowed(self):
        """Test expiring on the creation date is allowed."""
        assert _create(expiration_date=NOW.date()).expiration_date == NOW.date()

    def test_invalid_email(self):
        """Test email validation."""
        with pytest.raises(ValueError, match="email"):
            _create(email="not-an-email")

    def test_expiration_before_issue(self):
        """Test expiration cannot precede issue."""
        with pytest.raises(ValueError, match="issue"):
            _create(issue_date=NOW.date() + timedelta(days=60))

    def test_with_status_keeps_updated_at(self):
        """Test with_status only replaces updated_at when given."""
        licensee = _create()

        expired = licensee.with_status(LicenseeStatus.EXPIRED)
        edited = licensee.with_status(LicenseeStatus.INACTIVE, updated_at=NOW)

        assert expired.status == LicenseeStatus.EXPIRED
        assert expired.updated_at is None
        assert edited.updated_at == NOW
        assert licensee.status == LicenseeStatus.ACTIVE


class TestAudit:
    """Tests for Audit entity."""

    def test_record(self):
        """Test recording an audit entry."""
        audit = Audit.record(5, LicenseeStatus.ACTIVE, LicenseeStatus.EXPIRED, NOW)

        assert audit.id is None
        assert audit.licensee_id == 5

    def test_same_status_rejected(self):
        """Test audits require an actual change."""
        with pytest.raises(ValueError):
            Audit.record(5, LicenseeStatus.ACTIVE, LicenseeStatus.ACTIVE, NOW)
