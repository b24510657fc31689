"""
Session Entity

Server-held record behind an opaque bearer token.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel


class Session(SQLModel):
    """
    Session entity - identity mapped to an opaque bearer token.

    Business Rules:
    - Lives only in the session directory (process memory)
    - Revoked on logout, user deactivation and admin-forced password reset
    - Unusable after expires_at
    """

    user_id: UUID
    created_at: datetime
    expires_at: datetime
