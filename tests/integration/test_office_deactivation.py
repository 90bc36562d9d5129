"""
Integration tests for office deactivation, reactivation and replacement candidates.
"""

import pytest

from core.domain.exceptions import PersistenceError
from core.domain.value_objects import RejectionReason
from offices.application.commands.deactivate_office import DeactivateOfficeCommand
from offices.application.commands.reactivate_office import ReactivateOfficeCommand
from offices.application.handlers.deactivate_office_handler import DeactivateOfficeHandler
from offices.application.handlers.list_replacement_offices_handler import (
    ListReplacementOfficesHandler,
)
from offices.application.handlers.reactivate_office_handler import ReactivateOfficeHandler
from offices.application.queries.list_replacement_offices import ListReplacementOfficesQuery
from offices.domain.events import OfficeDeactivated


@pytest.fixture
def deactivate_handler(office_repository, licensee_repository, fixed_clock):
    """Fixture for DeactivateOfficeHandler."""
    return DeactivateOfficeHandler(office_repository, licensee_repository, fixed_clock)


@pytest.mark.django_db
@pytest.mark.integration
class TestDeactivateOffice:
    """Integration tests for DeactivateOfficeHandler."""

    def test_moves_licensees_to_replacement(
        self,
        deactivate_handler,
        office_repository,
        licensee_repository,
        make_office,
        make_licensee,
        db_office,
        now,
    ):
        """Test all licensees move to the replacement and only the old office closes."""
        replacement = make_office(name="Replacement")
        licensees = [make_licensee() for _ in range(3)]

        result = deactivate_handler.handle(
            DeactivateOfficeCommand(office_id=db_office.id, replacement_office_id=replacement.id)
        )

        assert result.deactivated is True
        assert result.reassigned_count == 3
        assert result.stranded_count == 0
        for licensee in licensees:
            reloaded = licensee_repository.find_by_id(licensee.id)
            assert reloaded.office_id == replacement.id
            assert reloaded.updated_at == now
        assert office_repository.find_by_id(db_office.id).active is False
        assert office_repository.find_by_id(replacement.id).active is True

    def test_inactive_replacement_rejected(
        self,
        deactivate_handler,
        office_repository,
        licensee_repository,
        make_office,
        make_licensee,
        db_office,
    ):
        """Test an inactive replacement leaves licensees and both offices unchanged."""
        replacement = make_office(name="Closed", active=False)
        licensees = [make_licensee() for _ in range(3)]

        result = deactivate_handler.handle(
            DeactivateOfficeCommand(office_id=db_office.id, replacement_office_id=replacement.id)
        )

        assert result.deactivated is False
        assert result.reason is RejectionReason.REPLACEMENT_NOT_ACTIVE
        for licensee in licensees:
            assert licensee_repository.find_by_id(licensee.id).office_id == db_office.id
        assert office_repository.find_by_id(db_office.id).active is True
        assert office_repository.find_by_id(replacement.id).active is False

    def test_same_office_rejected(self, deactivate_handler, office_repository, db_office):
        """Test an office cannot be its own replacement."""
        result = deactivate_handler.handle(
            DeactivateOfficeCommand(office_id=db_office.id, replacement_office_id=db_office.id)
        )

        assert result.reason is RejectionReason.REPLACEMENT_IS_SAME_OFFICE
        assert office_repository.find_by_id(db_office.id).active is True

    def test_unknown_replacement_rejected(self, deactivate_handler, db_office):
        """Test an unknown replacement is treated as not active."""
        result = deactivate_handler.handle(
            DeactivateOfficeCommand(office_id=db_office.id, replacement_office_id=999999)
        )

        assert result.reason is RejectionReason.REPLACEMENT_NOT_ACTIVE

    def test_unknown_office(self, deactivate_handler):
        """Test an unknown office is rejected as not found."""
        result = deactivate_handler.handle(DeactivateOfficeCommand(office_id=999999))

        assert result.deactivated is False
        assert result.reason is RejectionReason.NOT_FOUND

    def test_without_replacement_strands_licensees(
        self,
        deactivate_handler,
        office_repository,
        licensee_repository,
        make_licensee,
        db_office,
    ):
        """Test deactivating without a replacement keeps licensees on the office."""
        licensee = make_licensee()

        result = deactivate_handler.handle(DeactivateOfficeCommand(office_id=db_office.id))

        assert result.deactivated is True
        assert result.reassigned_count == 0
        assert result.stranded_count == 1
        assert licensee_repository.find_by_id(licensee.id).office_id == db_office.id
        assert office_repository.find_by_id(db_office.id).active is False

    def test_failed_deactivation_rolls_back_reassignment(
        self,
        deactivate_handler,
        office_repository,
        licensee_repository,
        make_office,
        make_licensee,
        db_office,
        monkeypatch,
    ):
        """Test a failure after reassignment leaves licensees and offices untouched."""
        replacement = make_office(name="Replacement")
        licensees = [make_licensee() for _ in range(3)]

        def fail_update_active(office, expected_version):
            raise PersistenceError("statement timeout")

        monkeypatch.setattr(office_repository, "update_active", fail_update_active)

        with pytest.raises(PersistenceError):
            deactivate_handler.handle(
                DeactivateOfficeCommand(
                    office_id=db_office.id, replacement_office_id=replacement.id
                )
            )

        for licensee in licensees:
            reloaded = licensee_repository.find_by_id(licensee.id)
            assert reloaded.office_id == db_office.id
            assert reloaded.version == licensee.version
        assert office_repository.find_by_id(db_office.id).active is True

    def test_event_published_on_commit(
        self,
        deactivate_handler,
        make_office,
        make_licensee,
        db_office,
        published_events,
        django_capture_on_commit_callbacks,
    ):
        """Test OfficeDeactivated carries the reassignment count."""
        replacement = make_office(name="Replacement")
        make_licensee()

        with django_capture_on_commit_callbacks(execute=True):
            deactivate_handler.handle(
                DeactivateOfficeCommand(
                    office_id=db_office.id, replacement_office_id=replacement.id
                )
            )

        assert len(published_events) == 1
        event = published_events[0]
        assert isinstance(event, OfficeDeactivated)
        assert event.reassigned_count == 1
        assert event.replacement_office_id == replacement.id


@pytest.mark.django_db
@pytest.mark.integration
class TestReactivateOffice:
    """Integration tests for ReactivateOfficeHandler."""

    def test_reactivate(self, office_repository, fixed_clock, make_office):
        """Test an inactive office becomes active again."""
        office = make_office(name="Closed", active=False)
        handler = ReactivateOfficeHandler(office_repository, fixed_clock)

        result = handler.handle(ReactivateOfficeCommand(office_id=office.id))

        assert result.reactivated is True
        assert office_repository.find_by_id(office.id).active is True

    def test_already_active_is_noop(self, office_repository, fixed_clock, db_office):
        """Test reactivating an active office changes nothing."""
        handler = ReactivateOfficeHandler(office_repository, fixed_clock)

        result = handler.handle(ReactivateOfficeCommand(office_id=db_office.id))

        assert result.reactivated is True
        assert office_repository.find_by_id(db_office.id).version == db_office.version

    def test_unknown_office(self, office_repository, fixed_clock):
        """Test an unknown office is rejected."""
        handler = ReactivateOfficeHandler(office_repository, fixed_clock)

        result = handler.handle(ReactivateOfficeCommand(office_id=999999))

        assert result.reactivated is False
        assert result.reason is RejectionReason.NOT_FOUND


@pytest.mark.django_db
@pytest.mark.integration
class TestListReplacementOffices:
    """Integration tests for ListReplacementOfficesHandler."""

    def test_lists_other_active_offices(self, office_repository, make_office, db_office):
        """Test candidates exclude the office itself and inactive offices."""
        alpha = make_office(name="Alpha")
        make_office(name="Gone", active=False)

        offices = ListReplacementOfficesHandler(office_repository).handle(
            ListReplacementOfficesQuery(office_id=db_office.id)
        )

        assert [office.id for office in offices] == [alpha.id]
        assert offices[0].active_status == "Active"
