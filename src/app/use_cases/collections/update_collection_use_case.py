"""
Update Collection Use Case

Moves a collection through the status pipeline and edits its notes and items.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import can_update_collection
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import provided_fields
from src.domain.actor import ActorContext
from .dtos import CollectionView, UpdateCollectionCommand
from .support import COLLECTION_NOT_FOUND, build_view

logger = logging.getLogger(__name__)


class UpdateCollectionUseCase:
    """
    Business Rules:
    - Same access as viewing
    - Partial update of date_time, status, notes and items
    - The write only applies to a live collection (NOT_FOUND otherwise)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, collection_id: UUID, command: UpdateCollectionCommand
    ) -> Result[CollectionView]:
        if actor.organization_id is None:
            return Return.err(COLLECTION_NOT_FOUND)

        values = provided_fields(command)

        async with self.uow:
            collection = await self.uow.collections.get_by_id(
                collection_id, actor.organization_id
            )
            if collection is None:
                return Return.err(COLLECTION_NOT_FOUND)
            if not can_update_collection(actor, collection):
                return Return.err(
                    Error("FORBIDDEN", "You are not authorized to update this collection")
                )

            if values:
                updated = await self.uow.collections.update_fields(
                    collection_id, actor.organization_id, values
                )
                if not updated:
                    return Return.err(COLLECTION_NOT_FOUND)
                await self.uow.commit()
                if "status" in values:
                    logger.info(
                        f"Collection {collection.collection_code} status: "
                        f"{collection.status.value} -> {values['status'].value}"
                    )

            collection = await self.uow.collections.get_by_id(
                collection_id, actor.organization_id
            )
            if collection is None:
                return Return.err(COLLECTION_NOT_FOUND)
            return Return.ok(await build_view(self.uow, collection))
