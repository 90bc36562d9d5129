"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class LicenseeStatus(Enum):
    """Licensee status value object."""

    INACTIVE = "inactive"
    ACTIVE = "active"
    EXPIRED = "expired"

    @property
    def label(self) -> str:
        """Return the display label (e.g. ``Active``)."""
        return self.value.title()

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class TransitionCaller(Enum):
    """Who is asking for a status change."""

    MANUAL = "manual"
    SYSTEM = "system"

    def __str__(self) -> str:
        return self.value


class RejectionReason(Enum):
    """Typed reasons returned when a command is not applied."""

    NOT_FOUND = "NotFound"
    MANUAL_EXPIRATION_FORBIDDEN = "ManualExpirationForbidden"
    INVALID_TRANSITION = "InvalidTransition"
    REPLACEMENT_IS_SAME_OFFICE = "ReplacementIsSameOffice"
    REPLACEMENT_NOT_ACTIVE = "ReplacementNotActive"

    def __str__(self) -> str:
        return self.value
