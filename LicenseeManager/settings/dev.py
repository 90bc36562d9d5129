"""
Development settings for LicenseeManager.

Uses the PostgreSQL database from base.py unless DB_ENGINE=sqlite is set,
in which case a local db.sqlite3 file is used instead.
"""
import os

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Run the sweep task in-process when no broker is running locally
CELERY_TASK_ALWAYS_EAGER = os.environ.get("CELERY_EAGER", "false").lower() == "true"

LOGGING = get_logging_config("development")
