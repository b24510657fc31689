"""
Verify Reset Token Use Case
"""

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.reset_token_manager import ResetTokenManager
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Result, Return
from .dtos import VerifyResetTokenResponse


class VerifyResetTokenUseCase:
    """Checks a reset code without consuming it"""

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, email: str, code: str) -> Result[VerifyResetTokenResponse]:
        async with self.uow:
            manager = ResetTokenManager.from_settings(
                self.uow.users, self.ctx.clock, self.ctx.settings
            )
            valid = await manager.verify(email, code)
            # A failed check counts toward the attempt limit
            await self.uow.commit()
        return Return.ok(VerifyResetTokenResponse(valid=valid))
