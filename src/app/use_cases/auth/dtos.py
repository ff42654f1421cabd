"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.common import CamelModel
from src.app.use_cases.users.dtos import UserView


class LoginCommand(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.strip().lower()


class LoginResponse(CamelModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    user: UserView
