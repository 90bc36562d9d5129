"""
Django implementation of LicenseTypeRepository port.
"""
from licensees.domain.license_type import LicenseType
from licensees.infrastructure.models import LicenseType as LicenseTypeModel
from licensees.ports.license_type_repository import LicenseTypeRepository


class DjangoLicenseTypeRepository(LicenseTypeRepository):
    """Django ORM implementation of LicenseTypeRepository."""

    def _to_domain(self, model: LicenseTypeModel) -> LicenseType:
        return LicenseType(id=model.id, name=model.name)

    def add(self, license_type: LicenseType) -> LicenseType:
        model = LicenseTypeModel.objects.create(name=license_type.name)
        return self._to_domain(model)
