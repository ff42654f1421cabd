"""
Delete Collection Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import (
    COLLECTOR_OR_ABOVE,
    can_delete_collection,
    require_role,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .support import COLLECTION_NOT_FOUND

logger = logging.getLogger(__name__)


class DeleteCollectionUseCase:
    """
    Use case for soft deleting a collection.

    Business Rules:
    - Collector or above
    - The collection's client must be assigned to the actor, whatever the
      actor's role
    - On top of that the actor must be a manager/admin or the collection's
      author; client assignment alone is not enough
    - A second delete is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext, collection_id: UUID) -> Result[None]:
        denied = require_role(actor, COLLECTOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if actor.organization_id is None:
            return Return.err(COLLECTION_NOT_FOUND)

        async with self.uow:
            collection = await self.uow.collections.get_by_id(
                collection_id, actor.organization_id
            )
            if collection is None:
                return Return.err(COLLECTION_NOT_FOUND)
            if not can_delete_collection(actor, collection):
                return Return.err(
                    Error("FORBIDDEN", "You are not authorized to delete this collection")
                )

            deleted = await self.uow.collections.mark_deleted(
                collection_id, actor.organization_id, actor.id
            )
            if not deleted:
                return Return.err(COLLECTION_NOT_FOUND)
            await self.uow.commit()
            logger.info(f"Collection deleted: {collection.collection_code} by {actor.id}")

        return Return.ok(None)
