"""
AuthService

Single entry point composing the auth use cases over one unit of work.
The HTTP layer and scripts call these methods; each delegates to the
use case implementing the operation.
"""

from typing import Optional
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.reset_token_manager import ResetTokenManager
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth import (
    AuthUser,
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    MessageResponse,
    ResetPasswordWithTokenUseCase,
    UpdateProfileUseCase,
    UserView,
    VerifyResetTokenResponse,
    VerifyResetTokenUseCase,
)
from dao_auth.app.use_cases.users import (
    CreateUserCommand,
    CreateUserResponse,
    CreateUserUseCase,
    DeactivateUserUseCase,
    ForcePasswordResetUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ReactivateUserUseCase,
    TemporaryPasswordResponse,
    UpdateUserRoleUseCase,
    UserListResponse,
)
from dao_auth.libs.result import Result


class AuthService:
    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    # Sessions

    async def login(self, email: str, password: str) -> Result[LoginResponse]:
        return await LoginUseCase(self.uow, self.ctx).execute(email, password)

    async def logout(self, token: Optional[str]) -> Result[LogoutResponse]:
        return await LogoutUseCase(self.ctx).execute(token)

    async def get_current_user(self, token: str) -> Result[AuthUser]:
        return await GetCurrentUserUseCase(self.uow, self.ctx).execute(token)

    # Self service

    async def change_password(self, user_id: UUID, new_password: str) -> Result[MessageResponse]:
        return await ChangePasswordUseCase(self.uow, self.ctx).execute(user_id, new_password)

    async def update_profile(self, user_id: UUID, name: str, email: str) -> Result[AuthUser]:
        return await UpdateProfileUseCase(self.uow, self.ctx).execute(user_id, name, email)

    # Password recovery

    async def forgot_password(self, email: str) -> Result[MessageResponse]:
        return await ForgotPasswordUseCase(self.uow, self.ctx).execute(email)

    async def generate_reset_token(self, email: str) -> Optional[str]:
        """Issue a reset code without sending it. None if no active user owns the email."""
        async with self.uow:
            code = await self._reset_tokens().generate(email)
            await self.uow.commit()
        return code

    async def verify_reset_token(self, email: str, code: str) -> Result[VerifyResetTokenResponse]:
        return await VerifyResetTokenUseCase(self.uow, self.ctx).execute(email, code)

    async def reset_password_with_token(
        self, email: str, code: str, new_password: str
    ) -> Result[MessageResponse]:
        return await ResetPasswordWithTokenUseCase(self.uow, self.ctx).execute(
            email, code, new_password
        )

    # Administration

    async def list_users(self, page: int = 1, limit: int = 20) -> Result[UserListResponse]:
        return await ListUsersUseCase(self.uow).execute(page, limit)

    async def get_user(
        self, actor_user_id: UUID, actor_role: str, target_user_id: UUID
    ) -> Result[UserView]:
        return await GetUserUseCase(self.uow).execute(actor_user_id, actor_role, target_user_id)

    async def create_user(self, name: str, email: str, role: str) -> Result[CreateUserResponse]:
        command = CreateUserCommand(name=name, email=email, role=role)
        return await CreateUserUseCase(self.uow, self.ctx).execute(command)

    async def update_user_role(self, target_user_id: UUID, role: str) -> Result[UserView]:
        return await UpdateUserRoleUseCase(self.uow, self.ctx).execute(target_user_id, role)

    async def deactivate_user(self, actor_user_id: UUID, target_user_id: UUID) -> Result[UserView]:
        return await DeactivateUserUseCase(self.uow, self.ctx).execute(
            actor_user_id, target_user_id
        )

    async def reactivate_user(self, target_user_id: UUID) -> Result[UserView]:
        return await ReactivateUserUseCase(self.uow, self.ctx).execute(target_user_id)

    async def force_password_reset(self, target_user_id: UUID) -> Result[TemporaryPasswordResponse]:
        return await ForcePasswordResetUseCase(self.uow, self.ctx).execute(target_user_id)

    def _reset_tokens(self) -> ResetTokenManager:
        return ResetTokenManager.from_settings(self.uow.users, self.ctx.clock, self.ctx.settings)
