"""
Reset Password With Token Use Case

Consumes a reset code and sets a new permanent password.
"""

import logging

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.reset_token_manager import ResetTokenManager
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Error, Result, Return
from .dtos import MessageResponse
from .password_rules import validate_new_password

logger = logging.getLogger(__name__)

INVALID_RESET_CODE = Error("INVALID_RESET_CODE", "Invalid or expired reset code")


class ResetPasswordWithTokenUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Wrong, expired and already-used codes fail with one error
    - Check-and-clear is atomic at the storage layer
    - A failed attempt counts toward the attempt limit, after which the
      outstanding code is discarded
    - The account returns to active-permanent (temporary flag cleared)
    - Existing sessions are revoked
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(
        self, email: str, code: str, new_password: str
    ) -> Result[MessageResponse]:
        password_validation = validate_new_password(
            new_password, self.ctx.settings.min_password_length
        )
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            manager = ResetTokenManager.from_settings(
                self.uow.users, self.ctx.clock, self.ctx.settings
            )
            new_password_hash = self.ctx.hasher.hash(new_password)
            consumed = await manager.consume(email, code, new_password_hash)
            if not consumed:
                await self.uow.commit()
                logger.info("Password reset rejected: invalid, expired or used code")
                return Return.err(INVALID_RESET_CODE)

            user = await self.uow.users.get_by_email(email)
            await self.uow.commit()

        revoked = self.ctx.tokens.revoke_all_for_user(user.id)
        logger.info(f"Password reset completed for user {user.id} ({revoked} sessions revoked)")

        return Return.ok(
            MessageResponse(status="success", message="Password has been reset successfully")
        )
