"""
List Users Use Case
"""

import math

from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.libs.result import Result, Return
from .dtos import Pagination, UserListResponse


class ListUsersUseCase:
    """Paginated user listing, newest first, inactive users included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int = 1, limit: int = 20) -> Result[UserListResponse]:
        page = max(page, 1)
        limit = max(limit, 1)

        async with self.uow:
            users = await self.uow.users.list(offset=(page - 1) * limit, limit=limit)
            total = await self.uow.users.count()

            return Return.ok(
                UserListResponse(
                    users=[UserView.from_user(u) for u in users],
                    pagination=Pagination(
                        page=page, limit=limit, total=total, pages=math.ceil(total / limit)
                    ),
                )
            )
