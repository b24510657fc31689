"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .change_password_use_case import ChangePasswordUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .reset_password_with_token_use_case import ResetPasswordWithTokenUseCase
from .dtos import (
    AuthUser,
    UserView,
    LoginResponse,
    LogoutResponse,
    MessageResponse,
    VerifyResetTokenResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    "GetCurrentUserUseCase",
    "ChangePasswordUseCase",
    "UpdateProfileUseCase",
    "ForgotPasswordUseCase",
    "VerifyResetTokenUseCase",
    "ResetPasswordWithTokenUseCase",
    # DTOs - Views
    "AuthUser",
    "UserView",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "MessageResponse",
    "VerifyResetTokenResponse",
]
