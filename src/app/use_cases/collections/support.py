"""
Helpers shared by the collection use cases.
"""

from typing import List

from libs.result import Error
from src.app.repositories.collection_repository import (
    CollectionQuery,
    CollectionVisibility,
)
from src.app.services.access_control import is_privileged
from src.app.services.references import client_labels, organization_names, usernames
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from src.domain.entities import Collection
from .dtos import CollectionFilters, CollectionView

COLLECTION_NOT_FOUND = Error("NOT_FOUND", "Collection not found")
NO_ORGANIZATION = Error("FORBIDDEN", "User is not assigned to an organization")


def visible_query(actor: ActorContext, filters: CollectionFilters) -> CollectionQuery:
    """
    Explicit filters ANDed with the actor's visibility: managers and admins
    see the whole organization, everyone else only what they collected or
    what belongs to an assigned client.
    """
    visibility = None
    if not is_privileged(actor):
        visibility = CollectionVisibility(user_id=actor.id, client_ids=actor.client_ids)
    return CollectionQuery(
        organization_id=actor.organization_id,
        status=filters.status,
        client_id=filters.client_id,
        collected_by=filters.collected_by,
        date_from=filters.date_from,
        date_to=filters.date_to,
        search=filters.search,
        visibility=visibility,
    )


async def build_views(uow: UnitOfWork, collections: List[Collection]) -> List[CollectionView]:
    organizations = await organization_names(uow, [c.organization_id for c in collections])
    clients = await client_labels(uow, [c.client_id for c in collections])
    collectors = await usernames(uow, [c.collected_by for c in collections])
    views = []
    for collection in collections:
        client_name, client_code = clients.get(collection.client_id, (None, None))
        views.append(
            CollectionView.build(
                collection,
                organization_name=organizations.get(collection.organization_id),
                client_name=client_name,
                client_code=client_code,
                collected_by_username=collectors.get(collection.collected_by),
            )
        )
    return views


async def build_view(uow: UnitOfWork, collection: Collection) -> CollectionView:
    return (await build_views(uow, [collection]))[0]
