"""
User Management Use Cases
"""

from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .create_user_use_case import CreateUserUseCase
from .update_user_role_use_case import UpdateUserRoleUseCase
from .deactivate_user_use_case import DeactivateUserUseCase
from .reactivate_user_use_case import ReactivateUserUseCase
from .force_password_reset_use_case import ForcePasswordResetUseCase
from .seed_admin import seed_admin
from .dtos import (
    CreateUserCommand,
    CreateUserResponse,
    TemporaryPasswordResponse,
    Pagination,
    UserListResponse,
)

__all__ = [
    # Use Cases
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserRoleUseCase",
    "DeactivateUserUseCase",
    "ReactivateUserUseCase",
    "ForcePasswordResetUseCase",
    "seed_admin",
    # DTOs
    "CreateUserCommand",
    "CreateUserResponse",
    "TemporaryPasswordResponse",
    "Pagination",
    "UserListResponse",
]
