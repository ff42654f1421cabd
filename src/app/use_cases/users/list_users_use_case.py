"""
List Users Use Case
"""

from dataclasses import replace

from libs.result import Result, Return
from src.app.repositories.user_repository import UserFilters
from src.app.services.pagination import PageRequest, build_pagination
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from src.domain.entities import UserRole
from .dtos import UserView
from .support import build_views


class ListUsersUseCase:
    """
    Business Rules:
    - Admins list every live user and may filter by organization
    - Everyone else only lists users of their own organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, filters: UserFilters, page: PageRequest
    ) -> Result[Paginated[UserView]]:
        if actor.role != UserRole.admin:
            if actor.organization_id is None:
                return Return.ok(Paginated(items=[], pagination=build_pagination(page, 0)))
            filters = replace(filters, organization_id=actor.organization_id)

        async with self.uow:
            users, total = await self.uow.users.list(filters, page.offset, page.limit)
            items = await build_views(self.uow, users)

        return Return.ok(Paginated(items=items, pagination=build_pagination(page, total)))
