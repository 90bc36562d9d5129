"""
Licensee domain entity.

This is the core domain entity representing a licensed professional.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from core.domain.value_objects import LicenseeStatus

CREATABLE_STATUSES = frozenset({LicenseeStatus.ACTIVE, LicenseeStatus.INACTIVE})


@dataclass(frozen=True)
class Licensee:
    """
    Licensee domain entity.

    Status only changes through ``with_status`` which is driven by the
    transition handler; everything else is ordinary record data.
    ``version`` is the optimistic-concurrency token of the stored row.

    Field rules are enforced by ``create`` only; stored rows load as they are.
    """

    id: Optional[int]
    first_name: str
    last_name: str
    email: str
    license_number: str
    license_type_id: int
    office_id: int
    status: LicenseeStatus
    issue_date: Optional[date]
    expiration_date: Optional[date]
    created_at: datetime
    updated_at: Optional[datetime] = None
    version: int = 0

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        license_number: str,
        license_type_id: int,
        office_id: int,
        expiration_date: date,
        created_at: datetime,
        status: LicenseeStatus = LicenseeStatus.ACTIVE,
        issue_date: Optional[date] = None,
    ) -> "Licensee":
        """
        Create a new, not yet persisted Licensee.

        Args:
            first_name: First name
            last_name: Last name
            email: Contact email
            license_number: License number
            license_type_id: LicenseType identifier
            office_id: Office identifier
            expiration_date: Expiration date, today or later
            created_at: Creation instant
            status: Initial status, Active or Inactive
            issue_date: Optional issue date

        Returns:
            Licensee entity instance

        Raises:
            ValueError: If a field or the initial status is not allowed
        """
        if not email or "@" not in email:
            raise ValueError(f"Invalid email address: {email}")
        if not license_number:
            raise ValueError("License number is required")
        if issue_date and expiration_date < issue_date:
            raise ValueError("Expiration date cannot be before issue date")
        if status not in CREATABLE_STATUSES:
            raise ValueError(f"A licensee cannot be created as {status.label}")
        if expiration_date < created_at.date():
            raise ValueError("Expiration date cannot be in the past")
        return cls(
            id=None,
            first_name=first_name,
            last_name=last_name,
            email=email,
            license_number=license_number,
            license_type_id=license_type_id,
            office_id=office_id,
            status=status,
            issue_date=issue_date,
            expiration_date=expiration_date,
            created_at=created_at,
        )

    @property
    def full_name(self) -> str:
        """First and last name joined, trimmed."""
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def with_status(
        self, status: LicenseeStatus, updated_at: Optional[datetime] = None
    ) -> "Licensee":
        """
        Return a copy carrying a new status.

        ``updated_at`` is only replaced when given, so housekeeping
        changes leave the user-edit timestamp alone.
        """
        return replace(
            self,
            status=status,
            updated_at=updated_at if updated_at is not None else self.updated_at,
        )
