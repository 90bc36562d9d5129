"""
Test settings for LicenseeManager.

In-memory SQLite by default. Set TEST_DB=postgres to run the suite
against the PostgreSQL server configured in base.py (CI does this so
statement timeouts and row locking behave as in production).
"""
import os

from .base import *  # noqa: F403, F401

DEBUG = False

if os.environ.get("TEST_DB") != "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

LICENSEE_MANAGER = {
    **LICENSEE_MANAGER,  # noqa: F405
    "EXPIRATION_HORIZON_DAYS": 30,
}

# Run Celery tasks inline
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"

# Leave log handling to pytest's capture
LOGGING_CONFIG = None
