from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from dao_auth.api.error import raise_for_error
from dao_auth.app.services.auth_service import AuthService
from dao_auth.app.use_cases.auth import AuthUser, UserView
from dao_auth.app.use_cases.users import (
    CreateUserResponse,
    TemporaryPasswordResponse,
    UserListResponse,
)
from dao_auth.depends import get_auth_service, get_current_user, require_capability
from dao_auth.domain.entities import Capability, UserRole

router = APIRouter(prefix="/users", tags=["Users"])

require_manage_users = require_capability(Capability.manage_users)


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    List users, newest first.

    Raises:
        - 401 Unauthorized: Not authenticated
        - 403 Forbidden: Caller lacks manage_users
    """
    result = await service.list_users(page, limit)
    return result.value


class CreateUserRequest(BaseModel):
    """
    Create user HTTP request payload

    The password is never supplied: a temporary one is generated.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    role: UserRole = Field(UserRole.user, description="admin, user or viewer")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse)
async def create_user(
    request: CreateUserRequest,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    Create a user with a temporary password.

    The temporary password is returned in this response only and emailed
    to the new user.

    Raises:
        - 401 Unauthorized: Not authenticated
        - 403 Forbidden: Caller lacks manage_users
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input
    """
    result = await service.create_user(request.name.strip(), request.email, request.role.value)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserView)
async def get_user(
    user_id: UUID,
    current_user: AuthUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """
    Get a user record.

    Raises:
        - 403 Forbidden: Reading another user without manage_users
        - 404 Not Found: User does not exist
    """
    result = await service.get_user(UUID(current_user.id), current_user.role, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateRoleRequest(BaseModel):
    role: UserRole = Field(..., description="admin, user or viewer")


@router.put("/{user_id}/role", status_code=status.HTTP_200_OK, response_model=UserView)
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleRequest,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    Change a user's role.

    Raises:
        - 403 Forbidden: Caller lacks manage_users
        - 404 Not Found: User does not exist
    """
    result = await service.update_user_role(user_id, request.role.value)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


async def _deactivate(user_id: UUID, current_user: AuthUser, service: AuthService) -> UserView:
    result = await service.deactivate_user(UUID(current_user.id), user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{user_id}/deactivate", status_code=status.HTTP_200_OK, response_model=UserView)
async def deactivate_user(
    user_id: UUID,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    Deactivate a user (soft delete) and revoke their sessions.

    Raises:
        - 403 Forbidden: Caller lacks manage_users, or targets themselves
        - 404 Not Found: User does not exist
    """
    return await _deactivate(user_id, current_user, service)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserView)
async def delete_user(
    user_id: UUID,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """Alias of POST /users/{user_id}/deactivate. Records are never hard-deleted."""
    return await _deactivate(user_id, current_user, service)


@router.post("/{user_id}/reactivate", status_code=status.HTTP_200_OK, response_model=UserView)
async def reactivate_user(
    user_id: UUID,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    Reactivate a deactivated user.

    Raises:
        - 403 Forbidden: Caller lacks manage_users
        - 404 Not Found: User does not exist
    """
    result = await service.reactivate_user(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{user_id}/force-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=TemporaryPasswordResponse,
)
async def force_password_reset(
    user_id: UUID,
    current_user: AuthUser = Depends(require_manage_users),
    service: AuthService = Depends(get_auth_service),
):
    """
    Issue a fresh temporary password and revoke the user's sessions.

    Raises:
        - 403 Forbidden: Caller lacks manage_users
        - 404 Not Found: User does not exist
    """
    result = await service.force_password_reset(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
