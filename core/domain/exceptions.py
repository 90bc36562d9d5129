"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Optional

from core.domain.value_objects import RejectionReason


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    reason: Optional[RejectionReason] = None

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class NotFoundError(DomainException):
    """Base exception for a referenced entity that does not exist."""

    reason = RejectionReason.NOT_FOUND


class LicenseeNotFoundError(NotFoundError):
    """Raised when a licensee is not found."""

    def __init__(self, message: str = "Licensee not found"):
        super().__init__(message, code="LICENSEE_NOT_FOUND")


class OfficeNotFoundError(NotFoundError):
    """Raised when an office is not found."""

    def __init__(self, message: str = "Office not found"):
        super().__init__(message, code="OFFICE_NOT_FOUND")


class DomainValidationError(DomainException):
    """Base exception for requests that break a business rule."""


class ManualExpirationForbiddenError(DomainValidationError):
    """Raised when a manual edit asks for the Expired status."""

    reason = RejectionReason.MANUAL_EXPIRATION_FORBIDDEN

    def __init__(
        self,
        message: str = (
            "A licensee cannot be saved with an expired status. "
            "Please renew their license or mark them as inactive instead."
        ),
    ):
        super().__init__(message, code="MANUAL_EXPIRATION_FORBIDDEN")


class InvalidStatusTransitionError(DomainValidationError):
    """Raised when a status change is not allowed by the lifecycle."""

    reason = RejectionReason.INVALID_TRANSITION

    def __init__(self, message: str = "Invalid status transition"):
        super().__init__(message, code="INVALID_TRANSITION")


class ReplacementIsSameOfficeError(DomainValidationError):
    """Raised when an office is named as its own replacement."""

    reason = RejectionReason.REPLACEMENT_IS_SAME_OFFICE

    def __init__(self, message: str = "Replacement office must differ from the office being deactivated"):
        super().__init__(message, code="REPLACEMENT_IS_SAME_OFFICE")


class ReplacementNotActiveError(DomainValidationError):
    """Raised when the replacement office is not currently active."""

    reason = RejectionReason.REPLACEMENT_NOT_ACTIVE

    def __init__(self, message: str = "Replacement office is not active"):
        super().__init__(message, code="REPLACEMENT_NOT_ACTIVE")


class ConcurrencyConflictError(DomainException):
    """Raised when a conditional update loses to a concurrent writer."""

    def __init__(self, message: str = "The record was modified by another writer"):
        super().__init__(message, code="CONCURRENCY_CONFLICT")


class PersistenceError(DomainException):
    """Raised when the underlying store is unavailable or times out."""

    def __init__(self, message: str = "Persistence layer unavailable"):
        super().__init__(message, code="PERSISTENCE_ERROR")
