from uuid import uuid4

import pytest

from src.app.use_cases.auth import GetProfileUseCase
from src.domain.entities import Organization, User, UserRole


@pytest.mark.asyncio
async def test_profile_includes_organization_and_clients(mock_uow, make_actor, organization_id):
    """
    Given a signed-in collector with one assigned client
    When they ask for their profile
    Then they see their organization name and client assignment
    """
    # Arrange
    client_id = uuid4()
    actor = make_actor(UserRole.collector, [client_id])
    mock_uow.users.get_by_id.return_value = User(
        id=actor.id,
        username="collector_jo",
        email="jo@freshlinen.example",
        role=UserRole.collector,
        organization_id=organization_id,
        client_ids=[str(client_id)],
    )
    mock_uow.organizations.get_by_ids.return_value = [
        Organization(id=organization_id, name="Fresh Linen Co", email="hq@freshlinen.example")
    ]

    # Act
    result = await GetProfileUseCase(mock_uow).execute(actor)

    # Assert
    assert result.is_ok()
    profile = result.value
    assert profile.id == actor.id
    assert profile.organization_name == "Fresh Linen Co"
    assert profile.clients == [str(client_id)]
    mock_uow.users.get_by_id.assert_awaited_once_with(actor.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("deleted", [True, False])
async def test_profile_of_removed_user_is_unauthenticated(mock_uow, make_actor, deleted):
    actor = make_actor(UserRole.manager)
    if deleted:
        mock_uow.users.get_by_id.return_value = None
    else:
        mock_uow.users.get_by_id.return_value = User(
            id=actor.id,
            username="gone",
            email="gone@freshlinen.example",
            is_active=False,
        )

    result = await GetProfileUseCase(mock_uow).execute(actor)

    assert result.error.code == "UNAUTHENTICATED"
