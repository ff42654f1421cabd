"""
User Use Case DTOs (Data Transfer Objects)

Commands carry validated input into the use cases; views are what the API
returns. The password hash never leaves the domain layer.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.common import CamelModel
from src.domain.entities import User, UserRole

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


# ============================================================================
# Command DTOs
# ============================================================================


class _UserFields(CamelModel):
    @field_validator("email", check_fields=False)
    @classmethod
    def lowercase_email(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value else value


class CreateUserCommand(_UserFields):
    username: str = Field(..., min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    profile_picture: Optional[str] = Field(default=None, max_length=500)
    role: Optional[UserRole] = None
    organization_id: Optional[UUID] = None
    clients: Optional[List[UUID]] = None


class UpdateUserCommand(_UserFields):
    """
    Partial update. Profile fields may be edited by the user themselves;
    role, organization_id, clients and is_active need a manager or admin.
    """

    username: Optional[str] = Field(
        default=None, min_length=3, max_length=30, pattern=USERNAME_PATTERN
    )
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    profile_picture: Optional[str] = Field(default=None, max_length=500)
    role: Optional[UserRole] = None
    organization_id: Optional[UUID] = None
    clients: Optional[List[UUID]] = None
    is_active: Optional[bool] = None


RESTRICTED_FIELDS = ("role", "organization_id", "clients", "is_active")


class AssignRoleCommand(CamelModel):
    role: UserRole


class AssignClientsCommand(CamelModel):
    clients: List[UUID]


# ============================================================================
# Response DTOs
# ============================================================================


class UserView(CamelModel):
    id: UUID
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: str
    profile_picture: Optional[str] = None
    role: UserRole
    organization_id: Optional[UUID] = None
    organization_name: Optional[str] = None
    clients: List[str] = Field(default_factory=list)
    is_active: bool
    last_login_at: Optional[datetime] = None
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, user: User, organization_name: Optional[str] = None) -> "UserView":
        view = cls.model_validate(user)
        view.clients = list(user.client_ids or [])
        view.organization_name = organization_name
        return view
