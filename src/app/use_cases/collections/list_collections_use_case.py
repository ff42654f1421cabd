"""
List Collections Use Case
"""

from libs.result import Result, Return
from src.app.services.pagination import PageRequest, build_pagination
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from .dtos import CollectionFilters, CollectionView
from .support import NO_ORGANIZATION, build_views, visible_query


class ListCollectionsUseCase:
    """
    Business Rules:
    - Always limited to the actor's organization
    - Non-privileged actors only get rows they collected or whose client is
      assigned to them, ANDed with the explicit filters
    - Ordered by date_time, newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, filters: CollectionFilters, page: PageRequest
    ) -> Result[Paginated[CollectionView]]:
        if actor.organization_id is None:
            return Return.err(NO_ORGANIZATION)

        query = visible_query(actor, filters)
        async with self.uow:
            collections, total = await self.uow.collections.list(
                query, page.offset, page.limit
            )
            items = await build_views(self.uow, collections)

        return Return.ok(Paginated(items=items, pagination=build_pagination(page, total)))
