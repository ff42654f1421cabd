"""
List Collections By Client Use Case
"""

from dataclasses import replace
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import is_assigned_client
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from .dtos import CollectionFilters, CollectionView
from .list_collections_use_case import ListCollectionsUseCase


class ListCollectionsByClientUseCase:
    """
    Business Rules:
    - The client must be assigned to the actor, whatever the actor's role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: ActorContext,
        client_id: UUID,
        filters: CollectionFilters,
        page: PageRequest,
    ) -> Result[Paginated[CollectionView]]:
        if not is_assigned_client(actor, client_id):
            return Return.err(
                Error("FORBIDDEN", "You are not authorized to view collections for this client")
            )
        return await ListCollectionsUseCase(self.uow).execute(
            actor, replace(filters, client_id=client_id), page
        )
