"""
ListReplacementOfficesHandler.
"""
from typing import List

from offices.application.dto.office_dto import OfficeDTO
from offices.application.queries.list_replacement_offices import ListReplacementOfficesQuery
from offices.ports.office_repository import OfficeRepository


class ListReplacementOfficesHandler:
    """Handler for ListReplacementOfficesQuery."""

    def __init__(self, office_repository: OfficeRepository):
        self.office_repository = office_repository

    def handle(self, query: ListReplacementOfficesQuery) -> List[OfficeDTO]:
        """Active offices other than the one being deactivated."""
        return [
            OfficeDTO.from_entity(office)
            for office in self.office_repository.list_active(exclude_office_id=query.office_id)
        ]
