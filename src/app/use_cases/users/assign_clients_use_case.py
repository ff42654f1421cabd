"""
Assign Clients Use Case

Replaces the set of clients a user works for.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import MANAGER_OR_ADMIN, can_access_user, require_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import AssignClientsCommand, UserView
from .support import USER_NOT_FOUND, as_client_ids, build_view, validate_client_ids

logger = logging.getLogger(__name__)


class AssignClientsUseCase:
    """
    Business Rules:
    - Manager or admin, inside the actor's organization unless admin
    - Every client must be a live client of the user's organization
    - The list replaces the previous assignment; an empty list clears it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, user_id: UUID, command: AssignClientsCommand
    ) -> Result[UserView]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not can_access_user(actor, user):
                return Return.err(USER_NOT_FOUND)

            invalid = await validate_client_ids(
                self.uow, user.organization_id, command.clients
            )
            if invalid:
                return Return.err(invalid)

            client_ids = as_client_ids(command.clients)
            if not await self.uow.users.update_fields(user_id, {"client_ids": client_ids}):
                return Return.err(USER_NOT_FOUND)
            await self.uow.commit()
            logger.info(f"User clients assigned: {user_id} ({len(client_ids)}) by {actor.id}")

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)
            return Return.ok(await build_view(self.uow, user))
