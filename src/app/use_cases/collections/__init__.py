"""
Collection Use Cases

Collection recording, visibility-scoped queries and statistics.
"""

from .create_collection_use_case import CreateCollectionUseCase
from .get_collection_use_case import GetCollectionUseCase
from .update_collection_use_case import UpdateCollectionUseCase
from .delete_collection_use_case import DeleteCollectionUseCase
from .list_collections_use_case import ListCollectionsUseCase
from .list_collections_by_client_use_case import ListCollectionsByClientUseCase
from .list_collections_by_status_use_case import ListCollectionsByStatusUseCase
from .get_collection_stats_use_case import GetCollectionStatsUseCase
from .dtos import (
    CreateCollectionCommand,
    UpdateCollectionCommand,
    CollectionFilters,
    CollectionItem,
    CollectionView,
    CollectionStatsView,
)

__all__ = [
    # Use Cases
    "CreateCollectionUseCase",
    "GetCollectionUseCase",
    "UpdateCollectionUseCase",
    "DeleteCollectionUseCase",
    "ListCollectionsUseCase",
    "ListCollectionsByClientUseCase",
    "ListCollectionsByStatusUseCase",
    "GetCollectionStatsUseCase",
    # DTOs - Commands
    "CreateCollectionCommand",
    "UpdateCollectionCommand",
    "CollectionFilters",
    # DTOs - Nested Models
    "CollectionItem",
    # DTOs - Responses
    "CollectionView",
    "CollectionStatsView",
]
