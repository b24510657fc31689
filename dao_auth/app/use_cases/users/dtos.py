"""
User Management Use Case DTOs
"""

from typing import List

from pydantic import BaseModel

from dao_auth.app.use_cases.auth.dtos import UserView


class CreateUserCommand(BaseModel):
    """Validated intent to register a new user"""

    name: str
    email: str
    role: str


class CreateUserResponse(BaseModel):
    """
    New user plus the temporary password.

    The temporary password is returned only here, once.
    """

    user: UserView
    temporary_password: str
    message: str


class TemporaryPasswordResponse(BaseModel):
    """Result of an admin-forced password reset"""

    user: UserView
    temporary_password: str
    sessions_revoked: int
    message: str


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class UserListResponse(BaseModel):
    users: List[UserView]
    pagination: Pagination
