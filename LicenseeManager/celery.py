"""
Celery configuration for background tasks.

Used for the scheduled licensee expiration sweep.
"""
import os

from celery import Celery
from celery.schedules import crontab

# Set default Django settings module
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseeManager.settings.base")

app = Celery("LicenseeManager")

# Load configuration from Django settings
app.config_from_object("django.conf:settings", namespace="CELERY")

# Auto-discover tasks from all installed apps
app.autodiscover_tasks()


@app.on_after_finalize.connect
def setup_periodic_tasks(sender, **kwargs):
    """Schedule the daily expiration sweep."""
    from django.conf import settings

    hour = settings.LICENSEE_MANAGER.get("SWEEP_SCHEDULE_HOUR", 1)
    sender.add_periodic_task(
        crontab(hour=hour, minute=0),
        sender.signature("core.tasks.run_expiration_sweep_task"),
        name="daily licensee expiration sweep",
    )
