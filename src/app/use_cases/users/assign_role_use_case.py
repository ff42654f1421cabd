"""
Assign Role Use Case
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import MANAGER_OR_ADMIN, can_access_user, require_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import AssignRoleCommand, UserView
from .support import USER_NOT_FOUND, build_view, check_role_grant

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """
    Business Rules:
    - Manager or admin, inside the actor's organization unless admin
    - Only admins grant the admin role
    - Takes effect on the user's next request; issued tokens stay valid
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, user_id: UUID, command: AssignRoleCommand
    ) -> Result[UserView]:
        denied = require_role(actor, MANAGER_OR_ADMIN) or check_role_grant(
            actor, command.role
        )
        if denied:
            return Return.err(denied)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not can_access_user(actor, user):
                return Return.err(USER_NOT_FOUND)

            old_role = user.role
            if not await self.uow.users.update_fields(user_id, {"role": command.role}):
                return Return.err(USER_NOT_FOUND)
            await self.uow.commit()
            logger.info(
                f"User role changed: {user_id} {old_role.value} -> {command.role.value} by {actor.id}"
            )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)
            return Return.ok(await build_view(self.uow, user))
