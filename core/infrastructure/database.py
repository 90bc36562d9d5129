"""
Database utilities and transaction management.
"""

import contextlib
from typing import Iterator

from django.db import DatabaseError, transaction

from core.domain.exceptions import PersistenceError


@contextlib.contextmanager
def atomic(using: str = None) -> Iterator[None]:
    """
    Context manager for an all-or-nothing unit of work.

    Storage failures (including statement timeouts) are re-raised as
    PersistenceError; domain exceptions pass through untouched after
    the transaction has been rolled back.

    Usage:
        with atomic():
            # Database operations
            pass
    """
    try:
        with transaction.atomic(using=using):
            yield
    except DatabaseError as exc:
        raise PersistenceError(f"Database operation failed: {exc}") from exc


def in_transaction(using: str = None) -> bool:
    """Return True when called inside an atomic block."""
    return transaction.get_connection(using).in_atomic_block


def publish_on_commit(event, using: str = None) -> None:
    """
    Publish a domain event once the current transaction commits.

    Nothing is published if the transaction rolls back.
    """
    from core.infrastructure.events import event_bus

    transaction.on_commit(lambda: event_bus.publish(event), using=using)
