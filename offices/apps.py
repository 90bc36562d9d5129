from django.apps import AppConfig


class OfficesConfig(AppConfig):
    """App configuration for offices."""

    name = "offices"
    verbose_name = "Offices"
