import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from dao_auth.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from dao_auth.adapter.services.jwt_token_service import JwtTokenService
from dao_auth.adapter.services.logging_email_sender import LoggingEmailSender
from dao_auth.adapter.services.system_clock import SystemClock
from dao_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from dao_auth.app.services.account_notifier import AccountNotifier
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.email_dispatcher import EmailDispatcher
from dao_auth.depends import get_auth_context, get_unit_of_work
from dao_auth.domain.entities import User, UserRole

ADMIN_EMAIL = "admin@x.com"
ADMIN_PASSWORD = "AdminPass1"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def email_sender():
    return LoggingEmailSender()


@pytest.fixture
def auth_ctx(email_sender):
    clock = SystemClock()
    return AuthContext(
        hasher=BcryptPasswordHasher(rounds=4),
        tokens=JwtTokenService("test-secret", clock),
        clock=clock,
        notifier=AccountNotifier(EmailDispatcher(email_sender)),
    )


@pytest_asyncio.fixture
async def admin(db_session, auth_ctx):
    """Seed an admin directly; returns plain values only"""
    now = auth_ctx.clock.now()
    user = User(
        name="Admin",
        email=ADMIN_EMAIL,
        password_hash=auth_ctx.hasher.hash(ADMIN_PASSWORD),
        role=UserRole.admin,
        created_at=now,
        updated_at=now,
    )
    db_session.add(user)
    await db_session.commit()
    return {"id": str(user.id), "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest_asyncio.fixture
async def client(db_session, auth_ctx):
    from config import ApplicationConfig
    from dao_auth.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_auth_context] = lambda: auth_ctx

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await auth_ctx.notifier.dispatcher.drain()


@pytest_asyncio.fixture
async def admin_headers(client, admin):
    response = await client.post(
        "/auth/login", json={"email": admin["email"], "password": admin["password"]}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
