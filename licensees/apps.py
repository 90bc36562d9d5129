from django.apps import AppConfig


class LicenseesConfig(AppConfig):
    """App configuration for licensees."""

    name = "licensees"
    verbose_name = "Licensees"
