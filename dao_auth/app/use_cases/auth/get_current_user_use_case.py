"""
Get Current User Use Case

Resolves a bearer token to the authenticated user.
"""

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Error, Result, Return
from .dtos import AuthUser

UNAUTHENTICATED = Error("UNAUTHENTICATED", "Invalid or expired token")


class GetCurrentUserUseCase:
    """
    Business Rules:
    - Token must verify (signature/lookup and expiry)
    - Owning user must still exist and be active, so deactivation takes
      effect immediately in both token modes
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, token: str) -> Result[AuthUser]:
        user_id = self.ctx.tokens.verify(token)
        if user_id is None:
            return Return.err(UNAUTHENTICATED)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return Return.err(UNAUTHENTICATED)

            return Return.ok(AuthUser.from_user(user))
