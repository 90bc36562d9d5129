"""
Domain events base classes and infrastructure.

Domain events represent something that happened in the domain.
They are used for decoupling modules and enabling event-driven architecture.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Concrete events are frozen dataclasses declaring ``occurred_at``
    and ``event_id`` fields.
    """

    @property
    def event_type(self) -> str:
        """Event type is the concrete class name."""
        return self.__class__.__name__

    @property
    @abstractmethod
    def aggregate_id(self) -> str:
        """Identifier of the aggregate the event belongs to."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Enum):
                value = value.value
            elif value is not None and not isinstance(value, (int, str, bool)):
                value = str(value)
            data[key] = value
        data["event_type"] = self.event_type
        data["aggregate_id"] = self.aggregate_id
        return data


class EventHandler(ABC):
    """
    Base class for event handlers.

    Event handlers run after the originating transaction has committed.
    """

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass
