"""
Force Password Reset Use Case

Admin replaces a user's password with a new temporary one.
"""

import logging
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.libs.result import Error, Result, Return
from .dtos import TemporaryPasswordResponse
from .temporary_password import assign_temporary_password

logger = logging.getLogger(__name__)


class ForcePasswordResetUseCase:
    """
    Business Rules:
    - Target user must exist
    - Account moves to active-temporary with a fresh 24-hour window
    - Outstanding reset codes are discarded and sessions revoked
    - The temporary password is returned once and queued for email delivery
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, target_user_id: UUID) -> Result[TemporaryPasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            temporary_password = assign_temporary_password(user, self.ctx)
            await self.uow.users.update(user)
            await self.uow.commit()

        revoked = self.ctx.tokens.revoke_all_for_user(user.id)
        logger.info(f"Password reset forced for user {user.id} ({revoked} sessions revoked)")
        self.ctx.notifier.send_temporary_password(
            user, temporary_password, self.ctx.settings.temporary_password_ttl_hours
        )

        return Return.ok(
            TemporaryPasswordResponse(
                user=UserView.from_user(user),
                temporary_password=temporary_password,
                sessions_revoked=revoked,
                message="Temporary password has been sent by email.",
            )
        )
