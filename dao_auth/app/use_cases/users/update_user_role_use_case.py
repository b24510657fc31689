"""
Update User Role Use Case
"""

import logging
from uuid import UUID

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.domain.entities import UserRole
from dao_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class UpdateUserRoleUseCase:
    """
    Business Rules:
    - Role must be admin, user or viewer
    - Target user must exist
    - Existing tokens stay valid; the new role applies from the next request
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, target_user_id: UUID, new_role: str) -> Result[UserView]:
        try:
            role = UserRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid role: {new_role}. Must be one of: admin, user, viewer",
                )
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            old_role = user.role
            user.role = role
            user.updated_at = self.ctx.clock.now()
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"User {user.id} role changed from {old_role.value} to {role.value}")
        return Return.ok(UserView.from_user(user))
