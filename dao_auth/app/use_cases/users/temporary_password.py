import secrets
import string
from datetime import timedelta

from dao_auth.app.services.auth_context import AuthContext
from dao_auth.domain.entities import User

TEMPORARY_PASSWORD_LENGTH = 12
_ALPHABET = string.ascii_letters + string.digits


def generate_temporary_password(length: int = TEMPORARY_PASSWORD_LENGTH) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def assign_temporary_password(user: User, ctx: AuthContext) -> str:
    """
    Put the user in the active-temporary state.

    Returns the plaintext password; only its hash is kept on the user.
    """
    password = generate_temporary_password()
    now = ctx.clock.now()
    user.password_hash = ctx.hasher.hash(password)
    user.is_temporary_password = True
    user.temporary_password_expires_at = now + timedelta(
        hours=ctx.settings.temporary_password_ttl_hours
    )
    user.reset_token_hash = None
    user.reset_token_expires_at = None
    user.updated_at = now
    return password
