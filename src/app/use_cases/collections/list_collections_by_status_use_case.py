"""
List Collections By Status Use Case
"""

from dataclasses import replace

from libs.result import Error, Result, Return
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from src.domain.entities import CollectionStatus
from .dtos import CollectionFilters, CollectionView
from .list_collections_use_case import ListCollectionsUseCase


class ListCollectionsByStatusUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: ActorContext,
        status: str,
        filters: CollectionFilters,
        page: PageRequest,
    ) -> Result[Paginated[CollectionView]]:
        try:
            collection_status = CollectionStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in CollectionStatus)
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid status: {status}. Must be one of: {allowed}",
                )
            )
        return await ListCollectionsUseCase(self.uow).execute(
            actor, replace(filters, status=collection_status), page
        )
