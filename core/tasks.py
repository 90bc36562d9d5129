"""
Celery tasks for background processing.

The expiration sweep is scheduled daily by Celery beat.
"""
import logging
from typing import Optional

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(name="core.tasks.run_expiration_sweep_task")
def run_expiration_sweep_task(horizon_days: Optional[int] = None) -> dict:
    """
    Celery task running the expiration sweep for today.

    Args:
        horizon_days: Look-ahead for the expiring-soon count; the
            configured default is used when absent or non-positive

    Returns:
        Sweep report as a JSON-serialisable dict
    """
    from api.services import LicenseeLifecycleService

    service = LicenseeLifecycleService.default()
    report = service.run_expiration_sweep(horizon_days=horizon_days)
    if report.failures:
        logger.warning(
            "Expiration sweep finished with %d failure(s)", len(report.failures)
        )
    return report.to_dict()
