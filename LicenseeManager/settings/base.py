"""
Base Django settings for LicenseeManager.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-7m2x$k!q0v@licensee-manager-local-only"
)

DEBUG = False

ALLOWED_HOSTS = []

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    # Local apps
    "core",
    "licensees",
    "offices",
]

# Domain configuration
LICENSEE_MANAGER = {
    # Look-ahead used when callers do not supply a positive horizon
    "EXPIRATION_HORIZON_DAYS": int(os.environ.get("EXPIRATION_HORIZON_DAYS", "30")),
    # Statement timeout applied to PostgreSQL sessions; a timed out
    # statement surfaces as PersistenceError
    "DB_STATEMENT_TIMEOUT_MS": int(os.environ.get("DB_STATEMENT_TIMEOUT_MS", "5000")),
    # Hour of day (UTC) at which Celery beat runs the expiration sweep
    "SWEEP_SCHEDULE_HOUR": int(os.environ.get("SWEEP_SCHEDULE_HOUR", "1")),
}

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ.get("DB_NAME", "licensee_manager"),
        "USER": os.environ.get("DB_USER", "postgres"),
        "PASSWORD": os.environ.get("DB_PASSWORD", "postgres"),
        "HOST": os.environ.get("DB_HOST", "localhost"),
        "PORT": os.environ.get("DB_PORT", "5432"),
        "OPTIONS": {
            "connect_timeout": 10,
            "options": f"-c statement_timeout={LICENSEE_MANAGER['DB_STATEMENT_TIMEOUT_MS']}",
        },
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Celery
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://127.0.0.1:6379/0")
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_TIMEZONE = TIME_ZONE

# Observability
LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
