"""
User Entity

Credential record for a member of the DAO management team.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserRole


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class User(SQLModel, table=True):
    """
    User entity - credential record and account state.

    Business Rules:
    - Email is stored lowercase and unique across active and inactive users
    - Password stored as bcrypt hash, never in plaintext
    - Deactivation is a soft delete: is_active=False, record retained
    - Temporary passwords (admin-created or admin-forced) expire after 24 hours
      and are usable for a single login
    - At most one live reset code per user, stored as SHA-256 hash
    - A reset code is discarded after too many failed verify/reset attempts
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.user)
    is_active: bool = Field(default=True)

    # Temporary credentials
    is_temporary_password: bool = Field(default=False)
    temporary_password_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Password recovery
    reset_token_hash: Optional[str] = Field(default=None, max_length=64)  # SHA-256 output
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    reset_failed_attempts: int = Field(default=0)

    # Timestamps
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_user_is_active", "is_active"),
        Index("idx_user_role", "role"),
    )

    def temporary_password_expired(self, now: datetime) -> bool:
        """True once a temporary password can no longer be used to log in"""
        if not self.is_temporary_password:
            return False
        if self.temporary_password_expires_at is None:
            return True
        return self.temporary_password_expires_at <= now
