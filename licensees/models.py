"""
Model registry for the licensees app.

Django discovers models through ``<app>.models``.
"""
from licensees.infrastructure.models import (  # noqa: F401
    LicenseeStatusAudit,
    Licensee,
    LicenseType,
)
