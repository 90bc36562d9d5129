"""
Audit repository port (interface).

Append-only: implementations expose no update or delete operation.
"""
from abc import ABC, abstractmethod
from typing import List

from licensees.domain.audit import Audit


class AuditRepository(ABC):
    """Abstract repository for status Audit records."""

    @abstractmethod
    def append(self, audit: Audit) -> Audit:
        """
        Store a new audit record.

        Must run inside the transaction that changes the status.

        Args:
            audit: Audit entity without an id

        Returns:
            Saved audit entity

        Raises:
            PersistenceError: If called outside a transaction or the store fails
        """
        pass

    @abstractmethod
    def find_by_licensee(self, licensee_id: int) -> List[Audit]:
        """
        Audit trail of a licensee.

        Returns:
            Audit records ordered oldest first
        """
        pass
