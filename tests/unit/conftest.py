from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from dao_auth.adapter.repositories.in_memory_user_repository import InMemoryUserStore
from dao_auth.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from dao_auth.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from dao_auth.adapter.services.jwt_token_service import JwtTokenService
from dao_auth.adapter.services.logging_email_sender import LoggingEmailSender
from dao_auth.adapter.services.session_directory import InMemorySessionDirectory
from dao_auth.app.services.account_notifier import AccountNotifier
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.auth_service import AuthService
from dao_auth.app.services.clock import IClock
from dao_auth.app.services.email_dispatcher import EmailDispatcher
from dao_auth.domain.entities import User, UserRole


class FrozenClock(IClock):
    """Clock that only moves when told to"""

    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now += timedelta(**kwargs)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.store_reset_token = AsyncMock(return_value=False)
    uow.users.record_reset_failure = AsyncMock()
    return uow


@pytest.fixture
def clock():
    return FrozenClock(datetime(2025, 3, 1, 9, 0, 0))


@pytest.fixture(scope="session")
def hasher():
    # Minimum cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def email_sender():
    return LoggingEmailSender()


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def uow(store):
    return InMemoryUnitOfWork(store)


def _build_ctx(hasher, tokens, clock, email_sender) -> AuthContext:
    return AuthContext(
        hasher=hasher,
        tokens=tokens,
        clock=clock,
        notifier=AccountNotifier(EmailDispatcher(email_sender)),
    )


@pytest.fixture
def ctx(hasher, clock, email_sender):
    """Context with stateless JWT tokens"""
    return _build_ctx(hasher, JwtTokenService("test-secret", clock), clock, email_sender)


@pytest.fixture
def session_ctx(hasher, clock, email_sender):
    """Context with stateful, revocable session tokens"""
    return _build_ctx(hasher, InMemorySessionDirectory(clock), clock, email_sender)


@pytest.fixture
def service(uow, ctx):
    return AuthService(uow, ctx)


@pytest.fixture
def session_service(uow, session_ctx):
    return AuthService(uow, session_ctx)


@pytest.fixture
def make_user(store, hasher, clock):
    """Insert a user straight into the in-memory store"""

    def _make_user(
        email: str = "bob@x.com",
        password: str = "Secret123",
        name: str = "Bob",
        role: UserRole = UserRole.user,
        is_active: bool = True,
        temporary: bool = False,
    ) -> User:
        now = clock.now()
        user = User(
            name=name,
            email=email,
            password_hash=hasher.hash(password),
            role=role,
            is_active=is_active,
            is_temporary_password=temporary,
            temporary_password_expires_at=now + timedelta(hours=24) if temporary else None,
            created_at=now,
            updated_at=now,
        )
        store.users[user.id] = user
        return user

    return _make_user
