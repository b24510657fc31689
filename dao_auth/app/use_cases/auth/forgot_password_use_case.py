"""
Forgot Password Use Case

Issues a reset code and emails it to the account owner.
"""

import logging

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.reset_token_manager import ResetTokenManager
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_RESPONSE = MessageResponse(
    status="sent",
    message="If the email exists, a password reset code has been sent",
)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - No email enumeration: the response is identical whether or not the
      email belongs to an active account
    - Known and unknown emails go through the same lookup, conditional
      write and commit before responding
    - A new code replaces any outstanding one
    - The code is delivered by email, fire-and-forget
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, email: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            manager = ResetTokenManager.from_settings(
                self.uow.users, self.ctx.clock, self.ctx.settings
            )
            code = await manager.generate(email)
            await self.uow.commit()

        if code is None or user is None:
            logger.info("Password reset requested for unknown or inactive account")
            return Return.ok(FORGOT_PASSWORD_RESPONSE.model_copy())

        logger.info(f"Password reset code issued for user {user.id}")
        self.ctx.notifier.send_password_reset(
            user, code, self.ctx.settings.reset_code_ttl_minutes
        )

        return Return.ok(FORGOT_PASSWORD_RESPONSE.model_copy())
