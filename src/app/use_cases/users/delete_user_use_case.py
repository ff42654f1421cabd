"""
Delete User Use Case
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import MANAGER_OR_ADMIN, can_access_user, require_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .support import USER_NOT_FOUND

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Business Rules:
    - Manager or admin, inside the actor's organization unless admin
    - Soft delete deactivates the account; a second delete is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext, user_id: UUID) -> Result[None]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not can_access_user(actor, user):
                return Return.err(USER_NOT_FOUND)

            deleted = await self.uow.users.mark_deleted(user_id, actor.id)
            if not deleted:
                return Return.err(USER_NOT_FOUND)
            await self.uow.commit()
            logger.info(f"User deleted: {user_id} by {actor.id}")

        return Return.ok(None)
