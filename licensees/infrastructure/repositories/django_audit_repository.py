"""
Django implementation of AuditRepository port.
"""
from typing import List

from core.domain.exceptions import PersistenceError
from core.infrastructure.database import in_transaction
from licensees.domain.audit import Audit
from licensees.infrastructure.models import LicenseeStatusAudit as AuditModel
from licensees.infrastructure.repositories.status_codes import to_code, to_status
from licensees.ports.audit_repository import AuditRepository


class DjangoAuditRepository(AuditRepository):
    """Django ORM implementation of the append-only audit store."""

    def _to_domain(self, model: AuditModel) -> Audit:
        return Audit(
            id=model.id,
            licensee_id=model.licensee_id,
            old_status=to_status(model.old_status),
            new_status=to_status(model.new_status),
            changed_at=model.changed_at,
        )

    def append(self, audit: Audit) -> Audit:
        """
        Insert an audit row.

        Raises:
            PersistenceError: If no transaction is open, since the row
                must commit together with the status change it records
        """
        if audit.id is not None:
            raise ValueError("Audit records are append-only")
        if not in_transaction():
            raise PersistenceError(
                "Audit records must be written inside the status change transaction"
            )
        model = AuditModel.objects.create(
            licensee_id=audit.licensee_id,
            old_status=to_code(audit.old_status),
            new_status=to_code(audit.new_status),
            changed_at=audit.changed_at,
        )
        return self._to_domain(model)

    def find_by_licensee(self, licensee_id: int) -> List[Audit]:
        models = AuditModel.objects.filter(licensee_id=licensee_id).order_by(
            "changed_at", "id"
        )
        return [self._to_domain(model) for model in models]
