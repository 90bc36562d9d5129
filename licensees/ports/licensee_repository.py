"""
Licensee repository port (interface).

This defines the contract for licensee persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional

from licensees.domain.licensee import Licensee


class LicenseeRepository(ABC):
    """
    Abstract repository for Licensee entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def add(self, licensee: Licensee) -> Licensee:
        """
        Persist a new licensee.

        Args:
            licensee: Licensee entity without an id

        Returns:
            Saved licensee entity with its id assigned
        """
        pass

    @abstractmethod
    def find_by_id(self, licensee_id: int) -> Optional[Licensee]:
        """
        Find a licensee by ID.

        Args:
            licensee_id: Licensee id

        Returns:
            Licensee entity or None if not found
        """
        pass

    @abstractmethod
    def update_status(self, licensee: Licensee, expected_version: int) -> Licensee:
        """
        Conditionally write the status and updated_at of a licensee.

        Args:
            licensee: Licensee carrying the new status
            expected_version: Version read before the change

        Returns:
            Stored licensee with its new version

        Raises:
            ConcurrencyConflictError: If the row changed since it was read
            LicenseeNotFoundError: If the row no longer exists
        """
        pass

    @abstractmethod
    def find_expired_ids(self, as_of: date) -> List[int]:
        """
        Ids of licensees whose expiration date is before ``as_of``
        and whose status is not Expired yet.
        """
        pass

    @abstractmethod
    def find_currently_expired_ids(self, as_of: date) -> List[int]:
        """
        Ids of licensees that are expired on ``as_of``: status Expired,
        or expiration date before ``as_of``.
        """
        pass

    @abstractmethod
    def find_expiring_ids(self, start: date, end: date) -> List[int]:
        """
        Ids of Active licensees whose expiration date lies in
        ``[start, end]`` inclusive.
        """
        pass

    @abstractmethod
    def reassign_office(
        self, from_office_id: int, to_office_id: int, updated_at: datetime
    ) -> int:
        """
        Point every licensee of one office at another office.

        Returns:
            Number of licensees moved
        """
        pass

    @abstractmethod
    def count_by_office(self, office_id: int) -> int:
        """Number of licensees referencing an office."""
        pass
