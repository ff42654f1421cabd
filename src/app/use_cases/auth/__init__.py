"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .get_profile_use_case import GetProfileUseCase
from .dtos import LoginCommand, LoginResponse

__all__ = [
    # Use Cases
    "LoginUseCase",
    "GetProfileUseCase",
    # DTOs - Commands
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
]
