"""
Collection Entity

A recorded pickup of items from a client, tracked through the status
pipeline until delivery.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index

from src.domain.base import LifecycleFields, utc_now
from .enums import CollectionStatus


class Collection(LifecycleFields, table=True):
    """
    Collection entity.

    Business Rules:
    - collection_code unique per organization, generated as
      PREFIX + YYYYMMDD + 4-digit daily sequence when not supplied
    - Belongs to one organization and one client, authored by one user
    - items: [{description, quantity >= 1, category}]
    - uploaded_documents: [{file_name, file_path, uploaded_by, uploaded_at}]
    """

    __tablename__ = "collections"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    collection_code: str = Field(max_length=20)

    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    client_id: UUID = Field(foreign_key="clients.id", index=True)
    collected_by: UUID = Field(foreign_key="users.id", index=True)

    date_time: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, index=True, nullable=False)
    )
    status: CollectionStatus = Field(default=CollectionStatus.pending, index=True)
    notes: Optional[str] = Field(default=None, max_length=500)

    items: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    uploaded_documents: List[dict] = Field(
        default_factory=list, sa_column=Column(JSON)
    )

    __table_args__ = (
        Index(
            "uq_collection_org_code", "organization_id", "collection_code", unique=True
        ),
        Index("idx_collection_org_live", "organization_id", "deleted_at", "is_active"),
        Index("idx_collection_client_date", "client_id", "date_time"),
        Index("idx_collection_collector_date", "collected_by", "date_time"),
    )

    @property
    def total_items(self) -> int:
        return sum(int(item.get("quantity", 0)) for item in self.items or [])
