"""
Office repository port (interface).

This defines the contract for office persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from offices.domain.office import Office


class OfficeRepository(ABC):
    """
    Abstract repository for Office entities.
    """

    @abstractmethod
    def add(self, office: Office) -> Office:
        """
        Persist a new office.

        Args:
            office: Office entity without an id

        Returns:
            Saved office entity
        """
        pass

    @abstractmethod
    def find_by_id(self, office_id: int) -> Optional[Office]:
        """
        Find an office by ID.

        Args:
            office_id: Office id

        Returns:
            Office entity or None if not found
        """
        pass

    @abstractmethod
    def update_active(self, office: Office, expected_version: int) -> Office:
        """
        Conditionally write the active flag.

        Raises:
            ConcurrencyConflictError: If the row changed since it was read
            OfficeNotFoundError: If the row no longer exists
        """
        pass

    @abstractmethod
    def list_active(self, exclude_office_id: Optional[int] = None) -> List[Office]:
        """
        Active offices ordered by name.

        Args:
            exclude_office_id: Office to leave out (e.g. the one being deactivated)
        """
        pass
