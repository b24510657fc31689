import logging
from typing import Callable, Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from dao_auth.adapter.repositories.in_memory_user_repository import InMemoryUserStore
from dao_auth.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from dao_auth.adapter.services.database import create_tables
from dao_auth.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from dao_auth.adapter.services.jwt_token_service import JwtTokenService
from dao_auth.adapter.services.logging_email_sender import LoggingEmailSender
from dao_auth.adapter.services.session_directory import InMemorySessionDirectory
from dao_auth.adapter.services.smtp_email_sender import SmtpEmailSender
from dao_auth.adapter.services.system_clock import SystemClock
from dao_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from dao_auth.api.error import ClientError
from dao_auth.app.services.account_notifier import AccountNotifier
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.auth_service import AuthService
from dao_auth.app.services.auth_settings import AuthSettings
from dao_auth.app.services.clock import IClock
from dao_auth.app.services.email_dispatcher import EmailDispatcher
from dao_auth.app.services.email_sender import IEmailSender
from dao_auth.app.services.token_service import ITokenService
from dao_auth.app.use_cases.auth import AuthUser
from dao_auth.app.use_cases.users import seed_admin
from dao_auth.domain.entities import Capability
from dao_auth.domain.permissions import has_capability
from dao_auth.libs.result import Error

logger = logging.getLogger(__name__)


def build_token_service(config, clock: IClock) -> ITokenService:
    if config.TOKEN_MODE == "session":
        return InMemorySessionDirectory(clock, ttl_minutes=config.ACCESS_TOKEN_TTL_MINUTES)
    if config.TOKEN_MODE == "jwt":
        return JwtTokenService(
            config.JWT_SECRET,
            clock,
            ttl_minutes=config.ACCESS_TOKEN_TTL_MINUTES,
            algorithm=config.JWT_ALGORITHM,
        )
    raise ValueError(f"Unknown TOKEN_MODE: {config.TOKEN_MODE}")


def build_email_sender(config) -> IEmailSender:
    if not config.SMTP_USER or not config.SMTP_PASSWORD:
        logger.info("Email service not configured - emails will be logged")
        return LoggingEmailSender()
    return SmtpEmailSender(
        host=config.SMTP_HOST,
        port=config.SMTP_PORT,
        user=config.SMTP_USER,
        password=config.SMTP_PASSWORD,
        from_name=config.SMTP_FROM_NAME,
        timeout=config.SMTP_TIMEOUT_SECONDS,
    )


def build_auth_context(config) -> AuthContext:
    clock = SystemClock()
    return AuthContext(
        hasher=BcryptPasswordHasher(rounds=config.BCRYPT_ROUNDS),
        tokens=build_token_service(config, clock),
        clock=clock,
        notifier=AccountNotifier(EmailDispatcher(build_email_sender(config))),
        settings=AuthSettings.from_config(config),
    )


auth_context = build_auth_context(ApplicationConfig)

if ApplicationConfig.STORAGE_BACKEND == "memory":
    engine = None
    memory_store = InMemoryUserStore()

    async def _provide_unit_of_work():
        yield InMemoryUnitOfWork(memory_store)

elif ApplicationConfig.STORAGE_BACKEND == "sql":
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    memory_store = None

    AsyncSessionLocal = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async def _provide_unit_of_work():
        async with AsyncSessionLocal() as session:
            yield SqlAlchemyUnitOfWork(session)

else:
    raise ValueError(f"Unknown STORAGE_BACKEND: {ApplicationConfig.STORAGE_BACKEND}")


async def startup() -> None:
    if engine is not None:
        await create_tables(engine)
    if memory_store is not None or ApplicationConfig.FIRST_ADMIN_EMAIL:
        # The in-memory store starts empty on every boot
        async for uow in get_unit_of_work():
            await seed_admin(uow, auth_context, ApplicationConfig)
    logger.info(
        f"Auth service started (storage={ApplicationConfig.STORAGE_BACKEND}, "
        f"tokens={ApplicationConfig.TOKEN_MODE})"
    )


async def shutdown() -> None:
    await auth_context.notifier.dispatcher.drain()
    if engine is not None:
        await engine.dispose()


async def get_unit_of_work():
    async for uow in _provide_unit_of_work():
        yield uow


def get_auth_context() -> AuthContext:
    return auth_context


async def get_auth_service(
    uow=Depends(get_unit_of_work), ctx: AuthContext = Depends(get_auth_context)
) -> AuthService:
    return AuthService(uow, ctx)


security = HTTPBearer(auto_error=False)


async def get_optional_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


async def get_bearer_token(token: Optional[str] = Depends(get_optional_token)) -> str:
    """
    Dependency to extract the bearer token from the Authorization header.

    Raises:
        ClientError: 401 if the header is missing or not a Bearer credential
    """
    if token is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "No token provided"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return token


async def get_current_user(
    request: Request,
    token: str = Depends(get_bearer_token),
    service: AuthService = Depends(get_auth_service),
) -> AuthUser:
    """
    Dependency resolving the bearer token to the authenticated user.

    Raises:
        ClientError: 401 if the token is invalid, expired, revoked
            or belongs to an inactive user
    """
    result = await service.get_current_user(token)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    user = result.value
    request.state.user_id = user.id
    return user


def require_capability(capability: Capability) -> Callable:
    """Dependency factory rejecting users whose role lacks the capability (403)"""

    async def dependency(current_user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if not has_capability(current_user.role, capability):
            raise ClientError(
                Error("FORBIDDEN", "Insufficient permissions"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return current_user

    return dependency
