"""
Display enrichment for related records.

Views show the names of the organization, creator, client and collector a
record points at. These lookups are batched per response and read-only; a
reference to a missing record resolves to None.
"""

from typing import Dict, Iterable, Optional, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork


def _present(ids: Iterable[Optional[UUID]]):
    return [i for i in ids if i is not None]


async def user_names(uow: UnitOfWork, user_ids: Iterable[Optional[UUID]]) -> Dict[UUID, str]:
    users = await uow.users.get_by_ids(_present(user_ids))
    return {user.id: user.display_name for user in users}


async def usernames(uow: UnitOfWork, user_ids: Iterable[Optional[UUID]]) -> Dict[UUID, str]:
    users = await uow.users.get_by_ids(_present(user_ids))
    return {user.id: user.username for user in users}


async def organization_names(
    uow: UnitOfWork, organization_ids: Iterable[Optional[UUID]]
) -> Dict[UUID, str]:
    organizations = await uow.organizations.get_by_ids(_present(organization_ids))
    return {org.id: org.name for org in organizations}


async def client_labels(
    uow: UnitOfWork, client_ids: Iterable[Optional[UUID]]
) -> Dict[UUID, Tuple[str, Optional[str]]]:
    """client id -> (name, client_code)"""
    clients = await uow.clients.get_by_ids(_present(client_ids))
    return {client.id: (client.name, client.client_code) for client in clients}
