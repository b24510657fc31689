from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dao_auth.app.repositories.user_repository import DuplicateEmailError, IUserRepository
from dao_auth.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (stored lowercase)"""
        stmt = select(User).where(User.email == email.strip().lower()).execution_options(
            populate_existing=True
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, offset: int, limit: int) -> List[User]:
        """List users, newest first"""
        stmt = select(User).order_by(User.created_at.desc()).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        """Count all users"""
        stmt = select(func.count()).select_from(User)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self._flush_unique(user)
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self._flush_unique(user)
        await self.session.refresh(user)
        return user

    async def consume_reset_token(
        self,
        user_id: UUID,
        token_hash: str,
        now: datetime,
        new_password_hash: str,
    ) -> bool:
        """Conditional UPDATE matching the current reset token hash"""
        stmt = (
            update(User)
            .where(
                User.id == user_id,
                User.is_active == True,  # noqa: E712
                User.reset_token_hash == token_hash,
                User.reset_token_expires_at > now,
            )
            .values(
                password_hash=new_password_hash,
                reset_token_hash=None,
                reset_token_expires_at=None,
                reset_failed_attempts=0,
                is_temporary_password=False,
                temporary_password_expires_at=None,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        updated = result.rowcount == 1
        if updated:
            # Drop the stale identity-map copy so later reads see the new row
            user = await self.session.get(User, user_id)
            if user is not None:
                await self.session.refresh(user)
        return updated

    async def store_reset_token(
        self,
        email: str,
        token_hash: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        """Conditional UPDATE on the active user with this email"""
        stmt = (
            update(User)
            .where(
                User.email == email.strip().lower(),
                User.is_active == True,  # noqa: E712
            )
            .values(
                reset_token_hash=token_hash,
                reset_token_expires_at=expires_at,
                reset_failed_attempts=0,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def record_reset_failure(self, user_id: UUID, max_attempts: int) -> None:
        """Increment the attempt counter, then clear the token at the limit"""
        await self.session.execute(
            update(User)
            .where(User.id == user_id, User.reset_token_hash.is_not(None))
            .values(reset_failed_attempts=User.reset_failed_attempts + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            update(User)
            .where(User.id == user_id, User.reset_failed_attempts >= max_attempts)
            .values(reset_token_hash=None, reset_token_expires_at=None)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()

    async def _flush_unique(self, user: User) -> None:
        # users.email is the only unique column besides the primary key
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(f"Email already in use: {user.email}") from exc
