import secrets

import bcrypt

from dao_auth.app.services.password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt with a configurable cost factor (12 in production)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = self.hash(secrets.token_urlsafe(16)).encode()

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, AttributeError, TypeError):
            # Empty or malformed hashes never match
            return False

    def verify_dummy(self, password: str) -> None:
        bcrypt.checkpw(password.encode(), self._dummy_hash)
