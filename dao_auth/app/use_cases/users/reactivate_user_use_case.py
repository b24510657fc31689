"""
Reactivate User Use Case
"""

import logging
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ReactivateUserUseCase:
    """The only way out of the inactive state"""

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, target_user_id: UUID) -> Result[UserView]:
        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            if not user.is_active:
                user.is_active = True
                user.updated_at = self.ctx.clock.now()
                await self.uow.users.update(user)
                await self.uow.commit()
                logger.info(f"User {user.id} reactivated")

            return Return.ok(UserView.from_user(user))
