"""
Deactivate User Use Case

Soft delete: the record is kept, the account can no longer authenticate.
"""

import logging
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeactivateUserUseCase:
    """
    Business Rules:
    - An admin cannot deactivate their own account
    - Target user must exist
    - All sessions of the user are revoked immediately
    - The email stays reserved by the inactive record
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, actor_user_id: UUID, target_user_id: UUID) -> Result[UserView]:
        if actor_user_id == target_user_id:
            return Return.err(
                Error("SELF_DEACTIVATION", "Cannot deactivate your own account")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            user.is_active = False
            user.updated_at = self.ctx.clock.now()
            await self.uow.users.update(user)
            await self.uow.commit()

        revoked = self.ctx.tokens.revoke_all_for_user(user.id)
        logger.info(f"User {user.id} deactivated by {actor_user_id} ({revoked} sessions revoked)")
        return Return.ok(UserView.from_user(user))
