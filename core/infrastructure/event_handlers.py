"""
Event handlers for domain events.

These handlers run after commit for side effects like structured
audit logging and metrics.
"""

import logging

from core import metrics
from core.domain.events import DomainEvent, EventHandler
from licensees.domain.events import ExpirationSweepCompleted, LicenseeStatusChanged
from offices.domain.events import OfficeDeactivated, OfficeReactivated

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every committed domain event to the structured log.
    """

    def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


class MetricsEventHandler(EventHandler):
    """Event handler updating Prometheus counters."""

    def handle(self, event: DomainEvent) -> None:
        if isinstance(event, LicenseeStatusChanged):
            metrics.licensee_status_transitions_total.labels(
                old_status=event.old_status.value,
                new_status=event.new_status.value,
                caller=event.caller.value,
            ).inc()
        elif isinstance(event, ExpirationSweepCompleted):
            metrics.expiration_sweeps_total.inc()
            metrics.expiration_sweep_failures_total.inc(event.failure_count)
            metrics.expiration_sweep_expired_licensees.observe(event.expired_count)
        elif isinstance(event, OfficeDeactivated):
            metrics.offices_deactivated_total.inc()
            metrics.licensees_reassigned_total.inc(event.reassigned_count)
        elif isinstance(event, OfficeReactivated):
            metrics.offices_reactivated_total.inc()


_audit_handler = AuditLogEventHandler()
_metrics_handler = MetricsEventHandler()


# Register event handlers
def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    for event_type in (
        LicenseeStatusChanged,
        ExpirationSweepCompleted,
        OfficeDeactivated,
        OfficeReactivated,
    ):
        event_bus.subscribe(event_type, _audit_handler)
        event_bus.subscribe(event_type, _metrics_handler)

    logger.info("Event handlers registered")
