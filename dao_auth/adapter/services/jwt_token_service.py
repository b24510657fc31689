from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from dao_auth.app.services.clock import IClock
from dao_auth.app.services.token_service import ITokenService


class JwtTokenService(ITokenService):
    """
    Stateless signed tokens.

    Claims: user_id, iat, exp. Expiry is checked against the injected clock.
    Tokens cannot be revoked before they expire, so revoke() is a no-op.
    """

    stateful = False

    def __init__(
        self,
        secret: str,
        clock: IClock,
        ttl_minutes: int = 7 * 24 * 60,
        algorithm: str = "HS256",
    ):
        self.secret = secret
        self.clock = clock
        self.ttl_minutes = ttl_minutes
        self.algorithm = algorithm

    def issue(self, user_id: UUID) -> str:
        """
        Generate JWT access token

        Args:
            user_id: User UUID

        Returns:
            JWT token string signed with the configured algorithm
        """
        now = self.clock.now().replace(tzinfo=UTC)
        payload = {
            "user_id": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.ttl_minutes)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[UUID]:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
            user_id = UUID(payload["user_id"])
        except (JWTError, KeyError, TypeError, ValueError):
            return None

        if expires_at <= self.clock.now().replace(tzinfo=UTC):
            return None
        return user_id

    def revoke(self, token: str) -> bool:
        return False

    def revoke_all_for_user(self, user_id: UUID) -> int:
        return 0
