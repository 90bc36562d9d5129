"""
Django implementation of OfficeRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from django.db.models import F

from core.domain.exceptions import ConcurrencyConflictError, OfficeNotFoundError
from offices.domain.office import Office
from offices.infrastructure.models import Office as OfficeModel
from offices.ports.office_repository import OfficeRepository


class DjangoOfficeRepository(OfficeRepository):
    """
    Django ORM implementation of OfficeRepository.
    """

    def _to_domain(self, model: OfficeModel) -> Office:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Office model

        Returns:
            Office domain entity
        """
        return Office(
            id=model.id,
            name=model.name,
            city=model.city,
            state=model.state,
            active=model.active,
            version=model.version,
        )

    def add(self, office: Office) -> Office:
        """
        Persist a new office.

        Args:
            office: Office entity without an id

        Returns:
            Saved office entity
        """
        if office.id is not None:
            raise ValueError("Office already has an id")
        model = OfficeModel.objects.create(
            name=office.name,
            city=office.city,
            state=office.state,
            active=office.active,
        )
        return self._to_domain(model)

    def find_by_id(self, office_id: int) -> Optional[Office]:
        """
        Find an office by ID.

        Args:
            office_id: Office id

        Returns:
            Office entity or None if not found
        """
        try:
            model = OfficeModel.objects.get(id=office_id)
            return self._to_domain(model)
        except OfficeModel.DoesNotExist:
            return None

    def update_active(self, office: Office, expected_version: int) -> Office:
        updated = OfficeModel.objects.filter(id=office.id, version=expected_version).update(
            active=office.active,
            version=F("version") + 1,
        )
        if updated == 0:
            if OfficeModel.objects.filter(id=office.id).exists():
                raise ConcurrencyConflictError(f"Office {office.id} was modified concurrently")
            raise OfficeNotFoundError(f"Office {office.id} not found")
        return self._to_domain(OfficeModel.objects.get(id=office.id))

    def list_active(self, exclude_office_id: Optional[int] = None) -> List[Office]:
        queryset = OfficeModel.objects.filter(active=True)
        if exclude_office_id is not None:
            queryset = queryset.exclude(id=exclude_office_id)
        return [self._to_domain(model) for model in queryset.order_by("name", "id")]
