"""
Organization Use Case DTOs (Data Transfer Objects)

Commands carry validated input into the use cases; views are what the API
returns. Field names are camelCase on the wire.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.common import CamelModel
from src.domain.entities import Organization, OrganizationSize


# ============================================================================
# Nested Models
# ============================================================================


class OrganizationAddress(CamelModel):
    street: Optional[str] = Field(default=None, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)


# ============================================================================
# Command DTOs
# ============================================================================


class CreateOrganizationCommand(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=30)
    website: Optional[str] = Field(default=None, max_length=255)
    address: Optional[OrganizationAddress] = None
    industry: Optional[str] = Field(default=None, max_length=100)
    size: Optional[OrganizationSize] = None
    logo: Optional[str] = Field(default=None, max_length=500)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


class UpdateOrganizationCommand(CamelModel):
    """Partial update: only fields present in the request are changed"""

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    website: Optional[str] = Field(default=None, max_length=255)
    address: Optional[OrganizationAddress] = None
    industry: Optional[str] = Field(default=None, max_length=100)
    size: Optional[OrganizationSize] = None
    logo: Optional[str] = Field(default=None, max_length=500)
    is_active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value else value


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationView(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    email: str
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[dict] = None
    industry: Optional[str] = None
    size: Optional[OrganizationSize] = None
    logo: Optional[str] = None
    is_active: bool
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[UUID] = None
    created_by: Optional[UUID] = None
    created_by_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, organization: Organization, created_by_name: Optional[str] = None
    ) -> "OrganizationView":
        view = cls.model_validate(organization)
        view.created_by_name = created_by_name
        return view
