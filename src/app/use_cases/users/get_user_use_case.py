"""
Get User Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import can_access_user
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import UserView
from .support import USER_NOT_FOUND, build_view


class GetUserUseCase:
    """Users outside the actor's organization are NOT_FOUND, except for admins"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext, user_id: UUID) -> Result[UserView]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not can_access_user(actor, user):
                return Return.err(USER_NOT_FOUND)
            return Return.ok(await build_view(self.uow, user))
