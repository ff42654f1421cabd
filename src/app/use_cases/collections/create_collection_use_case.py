"""
Create Collection Use Case

Records a pickup of items from a client and assigns it a collection code.
"""

import logging
import re

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.access_control import (
    COLLECTOR_OR_ABOVE,
    is_assigned_client,
    require_role,
)
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.app.use_cases.common import stored_value
from src.domain.actor import ActorContext
from src.domain.base import utc_now
from src.domain.entities import Collection
from .dtos import CollectionView, CreateCollectionCommand
from .support import NO_ORGANIZATION, build_view

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 5


class CreateCollectionUseCase:
    """
    Use case for creating a collection.

    Business Rules:
    - Collector or above
    - The client must be in the actor's assigned clients, whatever the
      actor's role
    - The client must be live and belong to the actor's organization
    - Without a supplied code the code is PREFIX + YYYYMMDD (UTC creation
      date) + 4-digit daily sequence reserved from the counter
    - A supplied code is kept as is; a duplicate in the organization is
      CONFLICT
    - A generated code never reuses a stored one, and a supplied code shaped
      like a generated one moves that day's counter past it
    """

    def __init__(
        self, uow: UnitOfWork, code_prefix: str = ApplicationConfig.COLLECTION_CODE_PREFIX
    ):
        self.uow = uow
        self.code_prefix = code_prefix

    async def execute(
        self, actor: ActorContext, command: CreateCollectionCommand
    ) -> Result[CollectionView]:
        denied = require_role(actor, COLLECTOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not is_assigned_client(actor, command.client_id):
            return Return.err(
                Error(
                    "FORBIDDEN",
                    "You are not authorized to create collections for this client",
                )
            )
        if actor.organization_id is None:
            return Return.err(NO_ORGANIZATION)

        async with self.uow:
            client = await self.uow.clients.get_by_id(
                command.client_id, actor.organization_id
            )
            if client is None:
                return Return.err(Error("NOT_FOUND", "Client not found"))

            now = utc_now()
            if command.collection_code:
                code = command.collection_code
                await self._claim_supplied_code(actor, code)
            else:
                code = await self._next_code(actor, now)

            collection = Collection(
                collection_code=code,
                organization_id=actor.organization_id,
                client_id=client.id,
                collected_by=actor.id,
                date_time=command.date_time or now,
                status=command.status,
                notes=command.notes,
                items=stored_value(command.items),
            )
            try:
                collection = await self.uow.collections.create(collection)
            except UniqueViolation:
                return Return.err(
                    Error("CONFLICT", f"Collection code {code} already exists")
                )

            await self.uow.commit()
            logger.info(f"Collection created: {collection.collection_code} by {actor.id}")
            return Return.ok(await build_view(self.uow, collection))

    async def _next_code(self, actor: ActorContext, now) -> str:
        day = now.strftime("%Y%m%d")
        prefix = f"{self.code_prefix}{day}"
        for _ in range(MAX_CODE_ATTEMPTS):
            sequence = await self.uow.collections.reserve_code_sequence(
                actor.organization_id, day, prefix
            )
            code = f"{prefix}{sequence:04d}"
            if not await self.uow.collections.code_exists(actor.organization_id, code):
                return code
            # Taken by a supplied code; skip past everything stored for the day
            logger.warning(f"Collection code {code} already taken, resyncing counter")
            await self.uow.collections.sync_code_sequence(
                actor.organization_id, day, prefix
            )
        return code

    async def _claim_supplied_code(self, actor: ActorContext, code: str) -> None:
        """A supplied code shaped like a generated one moves that day's counter past it"""
        match = re.fullmatch(rf"{re.escape(self.code_prefix)}(\d{{8}})(\d{{4}})", code)
        if match:
            day, sequence = match.groups()
            await self.uow.collections.advance_code_sequence(
                actor.organization_id, day, int(sequence)
            )
