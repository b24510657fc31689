from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class ITokenService(ABC):
    """Issues and validates bearer tokens"""

    #: True when tokens are held server-side and can be revoked before expiry
    stateful: bool = False

    @abstractmethod
    def issue(self, user_id: UUID) -> str:
        """Issue a bearer token for the user"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[UUID]:
        """
        Return the user ID the token was issued for.

        Malformed, expired, revoked and mis-signed tokens all return None.
        """
        pass

    @abstractmethod
    def revoke(self, token: str) -> bool:
        """Revoke a single token. Returns True if something was revoked."""
        pass

    @abstractmethod
    def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke every token of a user. Returns count of revoked tokens."""
        pass
