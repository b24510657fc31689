"""
Use Cases

Organized into domain folders:
- auth/: Authentication, session and password recovery flows
- users/: Admin user management

Import from subdirectories for better organization.
"""

from .auth import (
    LoginUseCase,
    LogoutUseCase,
    GetCurrentUserUseCase,
    ChangePasswordUseCase,
    UpdateProfileUseCase,
    ForgotPasswordUseCase,
    VerifyResetTokenUseCase,
    ResetPasswordWithTokenUseCase,
)
from .users import (
    ListUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    UpdateUserRoleUseCase,
    DeactivateUserUseCase,
    ReactivateUserUseCase,
    ForcePasswordResetUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    "GetCurrentUserUseCase",
    "ChangePasswordUseCase",
    "UpdateProfileUseCase",
    "ForgotPasswordUseCase",
    "VerifyResetTokenUseCase",
    "ResetPasswordWithTokenUseCase",
    # Users
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserRoleUseCase",
    "DeactivateUserUseCase",
    "ReactivateUserUseCase",
    "ForcePasswordResetUseCase",
]
