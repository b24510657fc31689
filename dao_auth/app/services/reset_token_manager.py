"""
Reset-Token Manager

Short-lived, single-use numeric codes proving ownership of an email.
"""

import hashlib
import hmac
import secrets
from datetime import timedelta
from typing import Optional

from dao_auth.app.repositories.user_repository import IUserRepository
from dao_auth.app.services.auth_settings import AuthSettings
from dao_auth.app.services.clock import IClock

CODE_DIGITS = 6


def hash_reset_code(code: str) -> str:
    return hashlib.sha256(code.encode()).hexdigest()


def generate_reset_code() -> str:
    """Uniform 6-digit code in 100000..999999"""
    return str(10 ** (CODE_DIGITS - 1) + secrets.randbelow(9 * 10 ** (CODE_DIGITS - 1)))


class ResetTokenManager:
    """
    Business Rules:
    - Code is 6 digits, stored only as SHA-256 hash
    - Code expires after ttl_minutes (15 by default)
    - Issuing a new code replaces any outstanding one (at most one live code)
    - Issuing runs the same conditional write whether or not the email is
      registered
    - Consumption is an atomic check-and-clear
    - Each failed verify or consume counts against the outstanding code;
      after max_attempts failures the code is discarded
    - Only active users can hold, verify or consume codes

    The caller owns the unit of work and commits after generate/verify/consume.
    """

    def __init__(
        self,
        users: IUserRepository,
        clock: IClock,
        ttl_minutes: int = 15,
        max_attempts: int = 5,
    ):
        self.users = users
        self.clock = clock
        self.ttl_minutes = ttl_minutes
        self.max_attempts = max_attempts

    @classmethod
    def from_settings(
        cls, users: IUserRepository, clock: IClock, settings: AuthSettings
    ) -> "ResetTokenManager":
        return cls(
            users,
            clock,
            ttl_minutes=settings.reset_code_ttl_minutes,
            max_attempts=settings.reset_code_max_attempts,
        )

    async def generate(self, email: str) -> Optional[str]:
        """Issue a code for the email, or None if no active user owns it"""
        code = generate_reset_code()
        now = self.clock.now()
        stored = await self.users.store_reset_token(
            email,
            hash_reset_code(code),
            now + timedelta(minutes=self.ttl_minutes),
            now,
        )
        return code if stored else None

    async def verify(self, email: str, code: str) -> bool:
        user = await self.users.get_by_email(email)
        if user is None or not user.is_active:
            return False
        if user.reset_token_hash is None or user.reset_token_expires_at is None:
            return False
        if user.reset_token_expires_at <= self.clock.now():
            return False
        if hmac.compare_digest(user.reset_token_hash, hash_reset_code(code)):
            return True
        await self.users.record_reset_failure(user.id, self.max_attempts)
        return False

    async def consume(self, email: str, code: str, new_password_hash: str) -> bool:
        user = await self.users.get_by_email(email)
        if user is None:
            return False
        consumed = await self.users.consume_reset_token(
            user.id, hash_reset_code(code), self.clock.now(), new_password_hash
        )
        if not consumed:
            await self.users.record_reset_failure(user.id, self.max_attempts)
        return consumed
