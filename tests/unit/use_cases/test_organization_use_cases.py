from uuid import uuid4

import pytest

from src.app.repositories.organization_repository import OrganizationFilters
from src.app.services.pagination import PageRequest
from src.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    GetOrganizationUseCase,
    ListOrganizationsUseCase,
    RestoreOrganizationUseCase,
)
from src.domain.base import utc_now
from src.domain.entities import Organization, UserRole
from tests.fixtures.json_loader import TestDataLoader


@pytest.mark.asyncio
async def test_admin_creates_organization(mock_uow, make_actor):
    mock_uow.organizations.get_live_by_email.return_value = None
    mock_uow.organizations.create.side_effect = lambda organization: organization
    actor = make_actor(UserRole.admin)

    result = await CreateOrganizationUseCase(mock_uow).execute(
        actor, CreateOrganizationCommand(**TestDataLoader.get_copy("organization"))
    )

    assert result.is_ok()
    assert result.value.email == "contact@freshlinen.example"
    assert result.value.created_by == actor.id
    assert result.value.is_deleted is False


@pytest.mark.asyncio
async def test_manager_cannot_create_organization(mock_uow, make_actor):
    result = await CreateOrganizationUseCase(mock_uow).execute(
        make_actor(UserRole.manager),
        CreateOrganizationCommand(**TestDataLoader.get_copy("organization")),
    )

    assert result.error.code == "FORBIDDEN"
    assert result.error.message == (
        "Access denied. Required role(s): admin. Your role: manager"
    )


@pytest.mark.asyncio
async def test_duplicate_live_email_is_conflict(mock_uow, make_actor):
    mock_uow.organizations.get_live_by_email.return_value = Organization(
        name="Existing", email="contact@freshlinen.example"
    )

    result = await CreateOrganizationUseCase(mock_uow).execute(
        make_actor(UserRole.admin),
        CreateOrganizationCommand(**TestDataLoader.get_copy("organization")),
    )

    assert result.error.code == "CONFLICT"


@pytest.mark.asyncio
async def test_manager_list_is_limited_to_own_organization(mock_uow, make_actor, organization_id):
    mock_uow.organizations.list.return_value = ([], 0)

    await ListOrganizationsUseCase(mock_uow).execute(
        make_actor(UserRole.manager), OrganizationFilters(name="linen"), PageRequest()
    )

    filters = mock_uow.organizations.list.await_args.args[0]
    assert filters.organization_id == organization_id
    assert filters.name == "linen"


@pytest.mark.asyncio
async def test_manager_reading_other_organization_gets_not_found(mock_uow, make_actor):
    result = await GetOrganizationUseCase(mock_uow).execute(make_actor(UserRole.manager), uuid4())

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_supervisor_cannot_read_organizations(mock_uow, make_actor, organization_id):
    result = await GetOrganizationUseCase(mock_uow).execute(
        make_actor(UserRole.supervisor), organization_id
    )

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_delete_then_restore(mock_uow, make_actor):
    organization = Organization(name="Fresh Linen Co", email="contact@freshlinen.example")
    actor = make_actor(UserRole.admin)
    mock_uow.organizations.mark_deleted.return_value = True

    deleted = await DeleteOrganizationUseCase(mock_uow).execute(actor, organization.id)
    assert deleted.is_ok()
    mock_uow.organizations.mark_deleted.assert_awaited_once_with(organization.id, actor.id)

    organization.deleted_at = utc_now()
    restored_row = Organization(
        id=organization.id, name=organization.name, email=organization.email
    )
    mock_uow.organizations.get_by_id.side_effect = [organization, restored_row]
    mock_uow.organizations.get_live_by_email.return_value = None
    mock_uow.organizations.mark_restored.return_value = True

    restored = await RestoreOrganizationUseCase(mock_uow).execute(actor, organization.id)

    assert restored.is_ok()
    assert restored.value.is_deleted is False
    assert restored.value.is_active is True


@pytest.mark.asyncio
async def test_restore_of_live_organization_is_not_found(mock_uow, make_actor):
    mock_uow.organizations.get_by_id.return_value = Organization(
        name="Fresh Linen Co", email="contact@freshlinen.example"
    )

    result = await RestoreOrganizationUseCase(mock_uow).execute(
        make_actor(UserRole.admin), uuid4()
    )

    assert result.error.code == "NOT_FOUND"
