"""
Get User Use Case
"""

from uuid import UUID

from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.domain.entities import Capability
from dao_auth.domain.permissions import has_capability
from dao_auth.libs.result import Error, Result, Return


class GetUserUseCase:
    """
    Business Rules:
    - Users may read their own record
    - Reading other records requires the manage_users capability
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, actor_role: str, target_user_id: UUID
    ) -> Result[UserView]:
        if actor_user_id != target_user_id and not has_capability(
            actor_role, Capability.manage_users
        ):
            return Return.err(Error("FORBIDDEN", "Access denied"))

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            return Return.ok(UserView.from_user(user))
