"""
Change Password Use Case
"""

import logging
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Error, Result, Return
from .dtos import MessageResponse
from .password_rules import validate_new_password

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for the authenticated user replacing their password.

    Business Rules:
    - New password must meet the minimum length
    - Password is hashed with bcrypt
    - Temporary-password state is cleared (account becomes active-permanent)
    - Any outstanding reset code is discarded
    - A confirmation email is queued
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, user_id: UUID, new_password: str) -> Result[MessageResponse]:
        password_validation = validate_new_password(
            new_password, self.ctx.settings.min_password_length
        )
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            user.password_hash = self.ctx.hasher.hash(new_password)
            user.is_temporary_password = False
            user.temporary_password_expires_at = None
            user.reset_token_hash = None
            user.reset_token_expires_at = None
            user.updated_at = self.ctx.clock.now()
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"Password changed for user {user.id}")
        self.ctx.notifier.send_password_changed(user)

        return Return.ok(
            MessageResponse(status="success", message="Password changed successfully")
        )
