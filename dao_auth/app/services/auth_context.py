from dataclasses import dataclass, field

from dao_auth.app.services.account_notifier import AccountNotifier
from dao_auth.app.services.auth_settings import AuthSettings
from dao_auth.app.services.clock import IClock
from dao_auth.app.services.password_hasher import IPasswordHasher
from dao_auth.app.services.token_service import ITokenService


@dataclass
class AuthContext:
    """Process-wide collaborators shared by every auth use case"""

    hasher: IPasswordHasher
    tokens: ITokenService
    clock: IClock
    notifier: AccountNotifier
    settings: AuthSettings = field(default_factory=AuthSettings)
