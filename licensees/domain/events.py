"""
Licensee domain events.

Domain events represent something that happened in the licensee domain.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from core.domain.events import DomainEvent
from core.domain.value_objects import LicenseeStatus, TransitionCaller


@dataclass(frozen=True)
class LicenseeStatusChanged(DomainEvent):
    """Event raised when a licensee status change has been committed."""

    licensee_id: int
    old_status: LicenseeStatus
    new_status: LicenseeStatus
    caller: TransitionCaller
    occurred_at: datetime
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def aggregate_id(self) -> str:
        return str(self.licensee_id)


@dataclass(frozen=True)
class ExpirationSweepCompleted(DomainEvent):
    """Event raised when an expiration sweep has finished."""

    as_of: date
    horizon_days: int
    expired_count: int
    expiring_soon_count: int
    failure_count: int
    occurred_at: datetime
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def aggregate_id(self) -> str:
        return self.as_of.isoformat()
