import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from src.domain.actor import ActorContext
from src.domain.entities import UserRole


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    # Display enrichment finds nothing unless a test says otherwise
    repo.get_by_ids = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.organizations = _repository(
        "get_by_id", "get_by_ids", "get_live_by_email", "list", "create",
        "update_fields", "mark_deleted", "mark_restored",
    )
    uow.clients = _repository(
        "get_by_id", "get_by_ids", "get_live_by_email", "get_live_by_code",
        "get_live_ids", "list", "search", "create", "update_fields",
        "mark_deleted", "mark_restored",
    )
    uow.collections = _repository(
        "get_by_id", "list", "count_by_status", "create", "update_fields",
        "mark_deleted", "reserve_code_sequence", "advance_code_sequence",
        "sync_code_sequence",
    )
    uow.collections.code_exists = AsyncMock(return_value=False)
    uow.users = _repository(
        "get_by_id", "get_by_ids", "get_by_email", "find_conflicting", "list",
        "create", "update", "update_fields", "mark_deleted",
    )
    return uow


@pytest.fixture
def organization_id():
    return uuid4()


@pytest.fixture
def make_actor(organization_id):
    def _make(role=UserRole.collector, client_ids=(), organization=None, actor_id=None):
        return ActorContext(
            id=actor_id or uuid4(),
            role=role,
            organization_id=organization or organization_id,
            client_ids=tuple(str(c) for c in client_ids),
        )

    return _make
