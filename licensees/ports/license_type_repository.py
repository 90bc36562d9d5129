"""
LicenseType repository port (interface).
"""
from abc import ABC, abstractmethod

from licensees.domain.license_type import LicenseType


class LicenseTypeRepository(ABC):
    """Abstract repository for LicenseType reference data."""

    @abstractmethod
    def add(self, license_type: LicenseType) -> LicenseType:
        pass
