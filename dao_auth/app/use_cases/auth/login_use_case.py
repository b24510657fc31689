"""
Login Use Case

Handles credential check and bearer token issuance.
"""

import logging

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.libs.result import Error, Result, Return
from .dtos import AuthUser, LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email, inactive user, wrong password and expired temporary
      password all fail with the same INVALID_CREDENTIALS error
    - Password hashing work is spent even when the user does not exist
    - A temporary password succeeds once: the login closes its window and
      flags requires_password_change
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email (any case)
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token, or INVALID_CREDENTIALS
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None or not user.is_active:
                # Keep timing close to a real verification
                self.ctx.hasher.verify_dummy(password)
                logger.info("Login rejected: unknown or inactive account")
                return Return.err(INVALID_CREDENTIALS)

            if not self.ctx.hasher.verify(password, user.password_hash):
                logger.info(f"Login rejected for user {user.id}: wrong password")
                return Return.err(INVALID_CREDENTIALS)

            now = self.ctx.clock.now()
            if user.temporary_password_expired(now):
                logger.info(f"Login rejected for user {user.id}: temporary password expired")
                return Return.err(INVALID_CREDENTIALS)

            requires_password_change = user.is_temporary_password
            if requires_password_change:
                # Single use: the window closes with this login
                user.temporary_password_expires_at = now

            user.last_login_at = now
            user.updated_at = now
            await self.uow.users.update(user)
            await self.uow.commit()

            token = self.ctx.tokens.issue(user.id)
            logger.info(f"User {user.id} logged in (role={user.role.value})")

            return Return.ok(
                LoginResponse(
                    token=token,
                    user=AuthUser.from_user(user),
                    requires_password_change=requires_password_change,
                    message=(
                        "Please change your temporary password"
                        if requires_password_change
                        else None
                    ),
                )
            )
