"""
Logout Use Case
"""

import logging
from typing import Optional

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for ending a session.

    Business Rules:
    - Stateful tokens are revoked in the session directory
    - Stateless tokens cannot be revoked before expiry: logout is a no-op
    - A missing token means already logged out, never an error
    """

    def __init__(self, ctx: AuthContext):
        self.ctx = ctx

    async def execute(self, token: Optional[str]) -> Result[LogoutResponse]:
        revoked = False
        if token:
            revoked = self.ctx.tokens.revoke(token)
        if revoked:
            logger.info("Session revoked on logout")
        return Return.ok(LogoutResponse(status="logged_out", revoked=revoked))
