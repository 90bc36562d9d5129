"""
Django implementation of LicenseeRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from datetime import date, datetime
from typing import List, Optional

from django.db.models import F, Q

from core.domain.exceptions import ConcurrencyConflictError, LicenseeNotFoundError
from core.domain.value_objects import LicenseeStatus
from licensees.domain.licensee import Licensee
from licensees.infrastructure.models import Licensee as LicenseeModel
from licensees.infrastructure.repositories.status_codes import to_code, to_status
from licensees.ports.licensee_repository import LicenseeRepository


class DjangoLicenseeRepository(LicenseeRepository):
    """
    Django ORM implementation of LicenseeRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Guards updates with the row version
    """

    def _to_domain(self, model: LicenseeModel) -> Licensee:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Licensee model

        Returns:
            Licensee domain entity
        """
        return Licensee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            license_number=model.license_number,
            license_type_id=model.license_type_id,
            office_id=model.office_id,
            status=to_status(model.status),
            issue_date=model.issue_date,
            expiration_date=model.expiration_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )

    def add(self, licensee: Licensee) -> Licensee:
        """
        Persist a new licensee.

        Args:
            licensee: Licensee entity without an id

        Returns:
            Saved licensee entity
        """
        if licensee.id is not None:
            raise ValueError("Licensee already has an id; use update operations instead")
        model = LicenseeModel.objects.create(
            first_name=licensee.first_name,
            last_name=licensee.last_name,
            email=licensee.email,
            license_number=licensee.license_number,
            license_type_id=licensee.license_type_id,
            office_id=licensee.office_id,
            status=to_code(licensee.status),
            issue_date=licensee.issue_date,
            expiration_date=licensee.expiration_date,
            created_at=licensee.created_at,
            updated_at=licensee.updated_at,
        )
        return self._to_domain(model)

    def find_by_id(self, licensee_id: int) -> Optional[Licensee]:
        """
        Find a licensee by ID.

        Args:
            licensee_id: Licensee id

        Returns:
            Licensee entity or None if not found
        """
        try:
            model = LicenseeModel.objects.get(id=licensee_id)
            return self._to_domain(model)
        except LicenseeModel.DoesNotExist:
            return None

    def update_status(self, licensee: Licensee, expected_version: int) -> Licensee:
        """
        Write status and updated_at if the row still has ``expected_version``.

        Raises:
            ConcurrencyConflictError: If another writer got there first
            LicenseeNotFoundError: If the row is gone
        """
        updated = LicenseeModel.objects.filter(
            id=licensee.id, version=expected_version
        ).update(
            status=to_code(licensee.status),
            updated_at=licensee.updated_at,
            version=F("version") + 1,
        )
        if updated == 0:
            if LicenseeModel.objects.filter(id=licensee.id).exists():
                raise ConcurrencyConflictError(
                    f"Licensee {licensee.id} was modified concurrently"
                )
            raise LicenseeNotFoundError(f"Licensee {licensee.id} not found")
        return self._to_domain(LicenseeModel.objects.get(id=licensee.id))

    def find_expired_ids(self, as_of: date) -> List[int]:
        # pylint: disable=no-member
        queryset = LicenseeModel.objects.filter(expiration_date__lt=as_of).exclude(
            status=to_code(LicenseeStatus.EXPIRED)
        )
        return list(queryset.order_by("id").values_list("id", flat=True))

    def find_currently_expired_ids(self, as_of: date) -> List[int]:
        # pylint: disable=no-member
        queryset = LicenseeModel.objects.filter(
            Q(status=to_code(LicenseeStatus.EXPIRED)) | Q(expiration_date__lt=as_of)
        )
        return list(queryset.order_by("id").values_list("id", flat=True))

    def find_expiring_ids(self, start: date, end: date) -> List[int]:
        # pylint: disable=no-member
        queryset = LicenseeModel.objects.filter(
            status=to_code(LicenseeStatus.ACTIVE),
            expiration_date__gte=start,
            expiration_date__lte=end,
        )
        return list(queryset.order_by("id").values_list("id", flat=True))

    def reassign_office(
        self, from_office_id: int, to_office_id: int, updated_at: datetime
    ) -> int:
        """
        Move every licensee of ``from_office_id`` to ``to_office_id``.

        Returns:
            Number of licensees moved
        """
        return LicenseeModel.objects.filter(office_id=from_office_id).update(
            office_id=to_office_id,
            updated_at=updated_at,
            version=F("version") + 1,
        )

    def count_by_office(self, office_id: int) -> int:
        return LicenseeModel.objects.filter(office_id=office_id).count()
