"""
Get Profile Use Case

The authenticated caller's own account.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserView
from src.app.use_cases.users.support import build_view
from src.domain.actor import ActorContext


class GetProfileUseCase:
    """
    Business Rules:
    - Any role; no organization needed
    - Includes organization name and assigned clients
    - A caller deleted or deactivated since the token was checked is
      UNAUTHENTICATED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext) -> Result[UserView]:
        async with self.uow:
            user = await self.uow.users.get_by_id(actor.id)
            if user is None or not user.is_active:
                return Return.err(Error("UNAUTHENTICATED", "User not found or inactive"))
            return Return.ok(await build_view(self.uow, user))
