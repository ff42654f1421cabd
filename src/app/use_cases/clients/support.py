"""
Helpers shared by the client use cases.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Error
from src.app.services.references import organization_names, user_names
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Client
from .dtos import ClientView

CLIENT_NOT_FOUND = Error("NOT_FOUND", "Client not found")
ORGANIZATION_NOT_FOUND = Error("NOT_FOUND", "Organization not found")
EMAIL_TAKEN = Error("CONFLICT", "Client with this email already exists in this organization")
CODE_TAKEN = Error("CONFLICT", "Client with this code already exists in this organization")
DUPLICATE_CLIENT = Error("CONFLICT", "Client email or code already exists in this organization")


async def find_duplicate(
    uow: UnitOfWork,
    organization_id: UUID,
    email: Optional[str],
    client_code: Optional[str],
    exclude_id: Optional[UUID] = None,
) -> Optional[Error]:
    """CONFLICT error when a live client of the organization holds the email or code"""
    if email and await uow.clients.get_live_by_email(organization_id, email, exclude_id):
        return EMAIL_TAKEN
    if client_code and await uow.clients.get_live_by_code(
        organization_id, client_code, exclude_id
    ):
        return CODE_TAKEN
    return None


async def build_views(uow: UnitOfWork, clients: List[Client]) -> List[ClientView]:
    organizations = await organization_names(uow, [c.organization_id for c in clients])
    creators = await user_names(uow, [c.created_by for c in clients])
    return [
        ClientView.build(
            client,
            organization_name=organizations.get(client.organization_id),
            created_by_name=creators.get(client.created_by),
        )
        for client in clients
    ]


async def build_view(uow: UnitOfWork, client: Client) -> ClientView:
    return (await build_views(uow, [client]))[0]
