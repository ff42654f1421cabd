"""
Get Collection Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import can_view_collection
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import CollectionView
from .support import COLLECTION_NOT_FOUND, build_view


class GetCollectionUseCase:
    """
    Business Rules:
    - Only collections of the actor's organization exist for the actor
    - Managers and admins see any of them; others need authorship or an
      assigned client (FORBIDDEN otherwise)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext, collection_id: UUID) -> Result[CollectionView]:
        if actor.organization_id is None:
            return Return.err(COLLECTION_NOT_FOUND)

        async with self.uow:
            collection = await self.uow.collections.get_by_id(
                collection_id, actor.organization_id
            )
            if collection is None:
                return Return.err(COLLECTION_NOT_FOUND)
            if not can_view_collection(actor, collection):
                return Return.err(
                    Error("FORBIDDEN", "You are not authorized to view this collection")
                )
            return Return.ok(await build_view(self.uow, collection))
