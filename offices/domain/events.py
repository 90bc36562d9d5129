"""
Office domain events.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


@dataclass(frozen=True)
class OfficeDeactivated(DomainEvent):
    """Event raised when an office deactivation has been committed."""

    office_id: int
    replacement_office_id: Optional[int]
    reassigned_count: int
    stranded_count: int
    occurred_at: datetime
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def aggregate_id(self) -> str:
        return str(self.office_id)


@dataclass(frozen=True)
class OfficeReactivated(DomainEvent):
    """Event raised when an office is made active again."""

    office_id: int
    occurred_at: datetime
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def aggregate_id(self) -> str:
        return str(self.office_id)
