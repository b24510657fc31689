"""In-memory session directory.

Opaque bearer tokens mapped to a user identity in process memory.
Suitable for single-process deployments; sessions are lost on restart.
"""

import secrets
from datetime import datetime, timedelta
from typing import Dict, Optional
from uuid import UUID

from dao_auth.app.services.clock import IClock
from dao_auth.app.services.token_service import ITokenService
from dao_auth.domain.entities import Session


class InMemorySessionDirectory(ITokenService):
    stateful = True

    def __init__(self, clock: IClock, ttl_minutes: int = 7 * 24 * 60):
        self.clock = clock
        self.ttl_minutes = ttl_minutes
        self._sessions: Dict[str, Session] = {}

    def issue(self, user_id: UUID) -> str:
        now = self.clock.now()
        self._purge_expired(now)
        token = secrets.token_urlsafe(32)
        self._sessions[token] = Session(
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(minutes=self.ttl_minutes),
        )
        return token

    def verify(self, token: str) -> Optional[UUID]:
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.expires_at <= self.clock.now():
            del self._sessions[token]
            return None
        return session.user_id

    def revoke(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def revoke_all_for_user(self, user_id: UUID) -> int:
        self._purge_expired(self.clock.now())
        tokens_to_remove = [k for k, v in self._sessions.items() if v.user_id == user_id]
        for token in tokens_to_remove:
            del self._sessions[token]
        return len(tokens_to_remove)

    def _purge_expired(self, now: datetime) -> None:
        expired = [k for k, v in self._sessions.items() if v.expires_at <= now]
        for token in expired:
            del self._sessions[token]

    @property
    def active_count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        """Clear all sessions - useful for testing."""
        self._sessions.clear()
