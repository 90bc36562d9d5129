"""
GetAuditTrailHandler.
"""
from typing import List

from licensees.application.dto.licensee_dto import AuditDTO
from licensees.application.queries.get_audit_trail import GetAuditTrailQuery
from licensees.ports.audit_repository import AuditRepository


class GetAuditTrailHandler:
    """Handler for GetAuditTrailQuery."""

    def __init__(self, audit_repository: AuditRepository):
        self.audit_repository = audit_repository

    def handle(self, query: GetAuditTrailQuery) -> List[AuditDTO]:
        """
        Status history of a licensee, oldest first.

        Unknown licensees have an empty history.
        """
        return [
            AuditDTO.from_entity(audit)
            for audit in self.audit_repository.find_by_licensee(query.licensee_id)
        ]
