"""
Audit domain entity.

One immutable record per accepted status change.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.value_objects import LicenseeStatus


@dataclass(frozen=True)
class Audit:
    """A single licensee status change."""

    id: Optional[int]
    licensee_id: int
    old_status: LicenseeStatus
    new_status: LicenseeStatus
    changed_at: datetime

    def __post_init__(self):
        """Validate audit entity."""
        if not self.licensee_id:
            raise ValueError("Licensee ID is required")
        if self.old_status == self.new_status:
            raise ValueError("An audit record requires an actual status change")

    @classmethod
    def record(
        cls,
        licensee_id: int,
        old_status: LicenseeStatus,
        new_status: LicenseeStatus,
        changed_at: datetime,
    ) -> "Audit":
        """Create a new, not yet persisted audit record."""
        return cls(
            id=None,
            licensee_id=licensee_id,
            old_status=old_status,
            new_status=new_status,
            changed_at=changed_at,
        )
