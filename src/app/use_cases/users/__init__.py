"""
User Management Use Cases

All user-related business logic.
"""

from .create_user_use_case import CreateUserUseCase
from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .assign_role_use_case import AssignRoleUseCase
from .assign_clients_use_case import AssignClientsUseCase
from .dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    AssignRoleCommand,
    AssignClientsCommand,
    UserView,
)

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "AssignRoleUseCase",
    "AssignClientsUseCase",
    # DTOs - Commands
    "CreateUserCommand",
    "UpdateUserCommand",
    "AssignRoleCommand",
    "AssignClientsCommand",
    # DTOs - Responses
    "UserView",
]
