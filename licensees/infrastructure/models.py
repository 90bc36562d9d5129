"""
LicenseType, Licensee and LicenseeStatusAudit models.
"""
from django.db import models
from django.utils import timezone

# Persisted status codes. These integers are part of the stored data
# contract and must never be renumbered.
STATUS_INACTIVE = 1
STATUS_ACTIVE = 2
STATUS_EXPIRED = 3

STATUS_CHOICES = [
    (STATUS_INACTIVE, "Inactive"),
    (STATUS_ACTIVE, "Active"),
    (STATUS_EXPIRED, "Expired"),
]


class LicenseType(models.Model):
    """
    A type of license that can be assigned to a licensee.
    """

    name = models.CharField(max_length=50, help_text="License type name")

    class Meta:
        db_table = "license_types"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Licensee(models.Model):
    """
    A licensed professional attached to an office.

    ``version`` is bumped on every conditional update and is the
    optimistic-concurrency token.
    """

    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField()
    license_number = models.CharField(max_length=50)
    license_type = models.ForeignKey(
        LicenseType, on_delete=models.PROTECT, related_name="licensees"
    )
    office = models.ForeignKey(
        "offices.Office", on_delete=models.PROTECT, related_name="licensees"
    )
    status = models.PositiveSmallIntegerField(choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    issue_date = models.DateField(null=True, blank=True)
    expiration_date = models.DateField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True)
    version = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "licensees"
        ordering = ["last_name", "first_name"]
        indexes = [
            models.Index(fields=["status", "expiration_date"]),
            models.Index(fields=["office"]),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name}".strip()


class ImmutableRecordError(Exception):
    """Raised when code tries to change or remove an audit row."""


class LicenseeStatusAudit(models.Model):
    """
    Immutable audit trail of licensee status changes.
    """

    licensee = models.ForeignKey(
        Licensee, on_delete=models.PROTECT, related_name="status_audits"
    )
    old_status = models.PositiveSmallIntegerField(choices=STATUS_CHOICES)
    new_status = models.PositiveSmallIntegerField(choices=STATUS_CHOICES)
    changed_at = models.DateTimeField()

    class Meta:
        db_table = "licensee_status_audit"
        ordering = ["changed_at", "id"]
        indexes = [
            models.Index(fields=["licensee", "changed_at"]),
        ]

    def __str__(self):
        return f"Licensee {self.licensee_id}: {self.old_status} -> {self.new_status}"

    def save(self, *args, **kwargs):
        """Allow inserts only."""
        if not self._state.adding:
            raise ImmutableRecordError("Audit records cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableRecordError("Audit records cannot be deleted")
