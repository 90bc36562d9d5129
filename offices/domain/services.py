"""
Office domain services.
"""
from typing import Optional

from core.domain.exceptions import ReplacementIsSameOfficeError, ReplacementNotActiveError
from offices.domain.office import Office


class ReplacementOfficePolicy:
    """Rules a replacement office must satisfy before licensees move to it."""

    @staticmethod
    def check(office: Office, replacement_office_id: int, replacement: Optional[Office]) -> Office:
        """
        Validate the replacement for ``office``.

        Args:
            office: Office being deactivated
            replacement_office_id: Requested replacement id
            replacement: Loaded replacement office, None if unknown

        Returns:
            The replacement office

        Raises:
            ReplacementIsSameOfficeError: If the replacement is the office itself
            ReplacementNotActiveError: If the replacement is unknown or inactive
        """
        if replacement_office_id == office.id:
            raise ReplacementIsSameOfficeError()
        if replacement is None:
            raise ReplacementNotActiveError(
                f"Replacement office {replacement_office_id} does not exist"
            )
        if not replacement.active:
            raise ReplacementNotActiveError(
                f"Replacement office {replacement.name} is not active"
            )
        return replacement
