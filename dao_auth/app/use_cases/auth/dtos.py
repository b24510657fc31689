"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from dao_auth.domain.entities import User


# ============================================================================
# User views
# ============================================================================


class AuthUser(BaseModel):
    """Authenticated user, as carried by a session"""

    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "AuthUser":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
        )


class UserView(BaseModel):
    """Public user record (no credentials)"""

    id: str
    name: str
    email: str
    role: str
    is_active: bool
    is_temporary_password: bool
    last_login_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            is_temporary_password=user.is_temporary_password,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    token: str
    user: AuthUser
    requires_password_change: bool = False
    message: Optional[str] = None


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    revoked: bool


class MessageResponse(BaseModel):
    """Generic status/message response"""

    status: str
    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for reset code verification"""

    valid: bool
