"""
Collection Use Case DTOs (Data Transfer Objects)

Commands carry validated input into the use cases; views are what the API
returns. Field names are camelCase on the wire.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from src.app.use_cases.common import CamelModel, naive_utc
from src.domain.entities import Collection, CollectionStatus


# ============================================================================
# Nested Models
# ============================================================================


class CollectionItem(CamelModel):
    description: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=1)
    category: Optional[str] = Field(default=None, max_length=50)


# ============================================================================
# Command DTOs
# ============================================================================


class CreateCollectionCommand(CamelModel):
    client_id: UUID
    collection_code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    date_time: Optional[datetime] = None
    status: CollectionStatus = CollectionStatus.pending
    notes: Optional[str] = Field(default=None, max_length=500)
    items: List[CollectionItem] = Field(default_factory=list)

    @field_validator("collection_code")
    @classmethod
    def uppercase_code(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if value else value

    @field_validator("date_time")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)


class UpdateCollectionCommand(CamelModel):
    """Partial update: only fields present in the request are changed"""

    date_time: Optional[datetime] = None
    status: Optional[CollectionStatus] = None
    notes: Optional[str] = Field(default=None, max_length=500)
    items: Optional[List[CollectionItem]] = None

    @field_validator("date_time")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)


@dataclass
class CollectionFilters:
    """Explicit filters from the caller; visibility narrowing is added by the use case"""

    status: Optional[CollectionStatus] = None
    client_id: Optional[UUID] = None
    collected_by: Optional[UUID] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    search: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class CollectionView(CamelModel):
    id: UUID
    collection_code: str
    organization_id: UUID
    organization_name: Optional[str] = None
    client_id: UUID
    client_name: Optional[str] = None
    client_code: Optional[str] = None
    collected_by: UUID
    collected_by_username: Optional[str] = None
    date_time: datetime
    status: CollectionStatus
    notes: Optional[str] = None
    items: List[dict] = Field(default_factory=list)
    total_items: int = 0
    uploaded_documents: List[dict] = Field(default_factory=list)
    is_active: bool
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls,
        collection: Collection,
        organization_name: Optional[str] = None,
        client_name: Optional[str] = None,
        client_code: Optional[str] = None,
        collected_by_username: Optional[str] = None,
    ) -> "CollectionView":
        view = cls.model_validate(collection)
        view.organization_name = organization_name
        view.client_name = client_name
        view.client_code = client_code
        view.collected_by_username = collected_by_username
        return view


class CollectionStatsView(CamelModel):
    total_collections: int
    status_counts: Dict[str, int]
    recent_collections: List[CollectionView]
