"""In-memory user storage.

Fallback store for single-process deployments and tests. Records are kept
as copies so callers cannot mutate stored state without update().
Data is lost on restart.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from dao_auth.app.repositories.user_repository import DuplicateEmailError, IUserRepository
from dao_auth.domain.entities import User


def _clone(user: User) -> User:
    return User(**user.model_dump())


class InMemoryUserStore:
    """Shared state behind InMemoryUserRepository instances"""

    def __init__(self) -> None:
        self.users: Dict[UUID, User] = {}
        self.lock = asyncio.Lock()

    def clear(self) -> None:
        """Clear all users - useful for testing."""
        self.users.clear()


class InMemoryUserRepository(IUserRepository):
    """User repository implementation over an InMemoryUserStore"""

    def __init__(self, store: InMemoryUserStore):
        self.store = store

    async def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        for user in self.store.users.values():
            if user.email == email:
                return _clone(user)
        return None

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        user = self.store.users.get(user_id)
        return _clone(user) if user is not None else None

    async def list(self, offset: int, limit: int) -> List[User]:
        users = sorted(self.store.users.values(), key=lambda u: u.created_at, reverse=True)
        return [_clone(u) for u in users[offset:offset + limit]]

    async def count(self) -> int:
        return len(self.store.users)

    async def create(self, user: User) -> User:
        async with self.store.lock:
            self._check_email_free(user)
            self.store.users[user.id] = _clone(user)
        return user

    async def update(self, user: User) -> User:
        async with self.store.lock:
            self._check_email_free(user)
            self.store.users[user.id] = _clone(user)
        return user

    async def consume_reset_token(
        self,
        user_id: UUID,
        token_hash: str,
        now: datetime,
        new_password_hash: str,
    ) -> bool:
        async with self.store.lock:
            user = self.store.users.get(user_id)
            if (
                user is None
                or not user.is_active
                or user.reset_token_hash != token_hash
                or user.reset_token_expires_at is None
                or user.reset_token_expires_at <= now
            ):
                return False
            updated = _clone(user)
            updated.password_hash = new_password_hash
            updated.reset_token_hash = None
            updated.reset_token_expires_at = None
            updated.reset_failed_attempts = 0
            updated.is_temporary_password = False
            updated.temporary_password_expires_at = None
            updated.updated_at = now
            self.store.users[user_id] = updated
            return True

    async def store_reset_token(
        self,
        email: str,
        token_hash: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        email = email.strip().lower()
        async with self.store.lock:
            for user_id, user in self.store.users.items():
                if user.email != email or not user.is_active:
                    continue
                updated = _clone(user)
                updated.reset_token_hash = token_hash
                updated.reset_token_expires_at = expires_at
                updated.reset_failed_attempts = 0
                updated.updated_at = now
                self.store.users[user_id] = updated
                return True
            return False

    async def record_reset_failure(self, user_id: UUID, max_attempts: int) -> None:
        async with self.store.lock:
            user = self.store.users.get(user_id)
            if user is None or user.reset_token_hash is None:
                return
            updated = _clone(user)
            updated.reset_failed_attempts += 1
            if updated.reset_failed_attempts >= max_attempts:
                updated.reset_token_hash = None
                updated.reset_token_expires_at = None
            self.store.users[user_id] = updated

    def _check_email_free(self, user: User) -> None:
        for other in self.store.users.values():
            if other.email == user.email and other.id != user.id:
                raise DuplicateEmailError(f"Email already in use: {user.email}")
