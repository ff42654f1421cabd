"""
Get Collection Stats Use Case

Status breakdown and most recent collections for the actor's view of the
organization.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from src.domain.entities import CollectionStatus
from .dtos import CollectionFilters, CollectionStatsView
from .support import NO_ORGANIZATION, build_views, visible_query

RECENT_LIMIT = 10


class GetCollectionStatsUseCase:
    """
    Business Rules:
    - Same predicate as listing (filters + visibility), so the status
      counts always add up to the total
    - Every status is present in the counts, zero when absent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, filters: CollectionFilters
    ) -> Result[CollectionStatsView]:
        if actor.organization_id is None:
            return Return.err(NO_ORGANIZATION)

        query = visible_query(actor, filters)
        async with self.uow:
            counts = await self.uow.collections.count_by_status(query)
            recent, _ = await self.uow.collections.list(query, 0, RECENT_LIMIT)
            recent_views = await build_views(self.uow, recent)

        status_counts = {status.value: counts.get(status.value, 0) for status in CollectionStatus}
        return Return.ok(
            CollectionStatsView(
                total_collections=sum(status_counts.values()),
                status_counts=status_counts,
                recent_collections=recent_views,
            )
        )
