"""
User Entity

A person acting inside one organization with a single role.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field

from src.domain.base import LifecycleFields
from .enums import UserRole


class User(LifecycleFields, table=True):
    """
    User entity.

    Business Rules:
    - username and email unique across all users
    - Password stored as bcrypt hash, never serialized
    - client_ids is the assigned client scope (client ids as strings)
    - role, organization, client assignment and activation are changed by
      managers and admins only
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=30)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    profile_picture: Optional[str] = Field(default=None, max_length=500)

    role: UserRole = Field(default=UserRole.user, index=True)
    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )
    client_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    @property
    def display_name(self) -> str:
        full_name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return full_name or self.username
