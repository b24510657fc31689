from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from dao_auth.domain.entities import User


class DuplicateEmailError(Exception):
    """Raised by create/update when the email already belongs to another user"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list(self, offset: int, limit: int) -> List[User]:
        """List users, newest first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users, active and inactive"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user

        Raises:
            DuplicateEmailError: if the email is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user

        Raises:
            DuplicateEmailError: if the new email is already taken
        """
        pass

    @abstractmethod
    async def consume_reset_token(
        self,
        user_id: UUID,
        token_hash: str,
        now: datetime,
        new_password_hash: str,
    ) -> bool:
        """
        Atomically replace the password if the stored reset token still matches.

        The update only applies when the user is active, its reset_token_hash
        equals token_hash and reset_token_expires_at is after now. On success
        the reset token and temporary-password state are cleared.
        Returns True if a row was updated.
        """
        pass

    @abstractmethod
    async def store_reset_token(
        self,
        email: str,
        token_hash: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        """
        Set the reset token on the active user owning email.

        Replaces any outstanding token and zeroes its failed-attempt count.
        Runs as one conditional write whether or not the email is registered.
        Returns True if a user was updated.
        """
        pass

    @abstractmethod
    async def record_reset_failure(self, user_id: UUID, max_attempts: int) -> None:
        """
        Count a failed verify/consume against the user's outstanding reset token.

        The token is cleared once max_attempts failures have been counted.
        Does nothing when the user holds no token.
        """
        pass
