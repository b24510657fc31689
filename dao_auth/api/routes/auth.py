from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from dao_auth.api.error import raise_for_error
from dao_auth.app.services.auth_service import AuthService
from dao_auth.app.use_cases.auth import (
    AuthUser,
    LoginResponse,
    LogoutResponse,
    MessageResponse,
    VerifyResetTokenResponse,
)
from dao_auth.depends import get_auth_service, get_current_user, get_optional_token

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    User Login

    Authenticates the user and returns a bearer token. A login with a
    temporary password sets requires_password_change.

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown email, wrong password,
          inactive account, expired or already used temporary password)
        - 422 Unprocessable Entity: Invalid input
    """
    result = await service.login(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    token: Optional[str] = Depends(get_optional_token),
    service: AuthService = Depends(get_auth_service),
):
    """
    Logout

    Revokes the session when tokens are stateful. Always succeeds.
    """
    result = await service.logout(token)
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=AuthUser)
async def me(current_user: AuthUser = Depends(get_current_user)):
    """
    Get the authenticated user.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token, or inactive user
    """
    return current_user


class ChangePasswordRequest(BaseModel):
    new_password: str = Field(..., description="New password")


@router.post("/change-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: AuthUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """
    Change Password

    Replaces the caller's password and clears any temporary-password state.

    Raises:
        - 401 Unauthorized: Not authenticated
        - 422 Unprocessable Entity: Password too short
    """
    result = await service.change_password(UUID(current_user.id), request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateProfileRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Email address")


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=AuthUser)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: AuthUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """
    Update Profile

    Raises:
        - 401 Unauthorized: Not authenticated
        - 409 Conflict: Email already used by another account
    """
    result = await service.update_profile(
        UUID(current_user.id), request.name.strip(), request.email
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest, service: AuthService = Depends(get_auth_service)
):
    """
    Request a password reset code.

    The response is identical whether or not the email belongs to an
    active account.
    """
    result = await service.forgot_password(request.email)
    return result.value


class VerifyResetTokenRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")
    token: str = Field(..., description="6-digit reset code")


@router.post(
    "/verify-reset-token", status_code=status.HTTP_200_OK, response_model=VerifyResetTokenResponse
)
async def verify_reset_token(
    request: VerifyResetTokenRequest, service: AuthService = Depends(get_auth_service)
):
    """Check a reset code without consuming it."""
    result = await service.verify_reset_token(request.email, request.token)
    return result.value


class ResetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")
    token: str = Field(..., description="6-digit reset code")
    new_password: str = Field(..., description="New password")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest, service: AuthService = Depends(get_auth_service)
):
    """
    Reset password with a reset code.

    Raises:
        - 400 Bad Request: Code invalid, expired or already used
        - 422 Unprocessable Entity: Password too short
    """
    result = await service.reset_password_with_token(
        request.email, request.token, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
