"""
Update Profile Use Case
"""

import logging
from uuid import UUID

from dao_auth.app.repositories.user_repository import DuplicateEmailError
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Error, Result, Return
from .dtos import AuthUser

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Business Rules:
    - Email is normalised to lowercase
    - New email must not belong to any other user, active or inactive
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, user_id: UUID, name: str, email: str) -> Result[AuthUser]:
        email = email.strip().lower()

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            if email != user.email:
                existing = await self.uow.users.get_by_email(email)
                if existing is not None and existing.id != user.id:
                    return Return.err(Error("CONFLICT", "Email already exists"))

            user.name = name
            user.email = email
            user.updated_at = self.ctx.clock.now()
            try:
                await self.uow.users.update(user)
            except DuplicateEmailError:
                return Return.err(Error("CONFLICT", "Email already exists"))
            await self.uow.commit()

        logger.info(f"Profile updated for user {user.id}")
        return Return.ok(AuthUser.from_user(user))
