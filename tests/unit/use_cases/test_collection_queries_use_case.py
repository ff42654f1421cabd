from uuid import uuid4

import pytest

from src.app.services.pagination import PageRequest
from src.app.use_cases.collections import (
    CollectionFilters,
    GetCollectionStatsUseCase,
    GetCollectionUseCase,
    ListCollectionsByClientUseCase,
    ListCollectionsByStatusUseCase,
    ListCollectionsUseCase,
)
from src.domain.entities import Collection, CollectionStatus, UserRole


@pytest.mark.asyncio
async def test_non_privileged_listing_is_narrowed_to_visibility(mock_uow, make_actor):
    client_id = uuid4()
    actor = make_actor(UserRole.collector, [client_id])
    mock_uow.collections.list.return_value = ([], 0)

    result = await ListCollectionsUseCase(mock_uow).execute(
        actor, CollectionFilters(status=CollectionStatus.washing), PageRequest()
    )

    assert result.is_ok()
    query = mock_uow.collections.list.await_args.args[0]
    assert query.organization_id == actor.organization_id
    assert query.status == CollectionStatus.washing
    assert query.visibility.user_id == actor.id
    assert query.visibility.client_ids == (str(client_id),)


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [UserRole.admin, UserRole.manager])
async def test_privileged_listing_sees_whole_organization(mock_uow, make_actor, role):
    mock_uow.collections.list.return_value = ([], 0)

    await ListCollectionsUseCase(mock_uow).execute(
        make_actor(role), CollectionFilters(), PageRequest()
    )

    query = mock_uow.collections.list.await_args.args[0]
    assert query.visibility is None


@pytest.mark.asyncio
async def test_listing_pagination(mock_uow, make_actor):
    mock_uow.collections.list.return_value = ([], 25)

    result = await ListCollectionsUseCase(mock_uow).execute(
        make_actor(UserRole.manager), CollectionFilters(), PageRequest(page=3, limit=10)
    )

    meta = result.value.pagination
    assert (meta.total_pages, meta.has_next, meta.has_prev) == (3, False, True)
    assert mock_uow.collections.list.await_args.args[1:] == (20, 10)


@pytest.mark.asyncio
async def test_unknown_status_is_validation_error(mock_uow, make_actor):
    result = await ListCollectionsByStatusUseCase(mock_uow).execute(
        make_actor(UserRole.manager), "lost", CollectionFilters(), PageRequest()
    )

    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.collections.list.assert_not_awaited()


@pytest.mark.asyncio
async def test_by_client_requires_assignment_even_for_admin(mock_uow, make_actor):
    result = await ListCollectionsByClientUseCase(mock_uow).execute(
        make_actor(UserRole.admin), uuid4(), CollectionFilters(), PageRequest()
    )

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_by_client_filters_on_client(mock_uow, make_actor):
    client_id = uuid4()
    mock_uow.collections.list.return_value = ([], 0)

    result = await ListCollectionsByClientUseCase(mock_uow).execute(
        make_actor(UserRole.collector, [client_id]), client_id, CollectionFilters(), PageRequest()
    )

    assert result.is_ok()
    assert mock_uow.collections.list.await_args.args[0].client_id == client_id


@pytest.mark.asyncio
async def test_stats_zero_fill_and_total(mock_uow, make_actor):
    mock_uow.collections.count_by_status.return_value = {"pending": 3, "delivered": 2}
    mock_uow.collections.list.return_value = ([], 5)

    result = await GetCollectionStatsUseCase(mock_uow).execute(
        make_actor(UserRole.supervisor), CollectionFilters()
    )

    stats = result.value
    assert set(stats.status_counts) == {s.value for s in CollectionStatus}
    assert stats.status_counts["washing"] == 0
    assert stats.total_collections == 5
    assert sum(stats.status_counts.values()) == stats.total_collections
    # Same predicate for counts and recent rows
    count_query = mock_uow.collections.count_by_status.await_args.args[0]
    list_query = mock_uow.collections.list.await_args.args[0]
    assert count_query == list_query
    assert mock_uow.collections.list.await_args.args[1:] == (0, 10)


@pytest.mark.asyncio
async def test_view_denied_without_authorship_or_assignment(mock_uow, make_actor, organization_id):
    mock_uow.collections.get_by_id.return_value = Collection(
        collection_code="COL202401010001",
        organization_id=organization_id,
        client_id=uuid4(),
        collected_by=uuid4(),
    )

    result = await GetCollectionUseCase(mock_uow).execute(
        make_actor(UserRole.supervisor, [uuid4()]), uuid4()
    )

    assert result.error.code == "FORBIDDEN"
