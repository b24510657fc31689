from unittest.mock import MagicMock

import pytest

from dao_auth.app.use_cases.auth.login_use_case import LoginUseCase
from dao_auth.domain.entities import User, UserRole


@pytest.mark.asyncio
async def test_successful_login(mock_uow, ctx, hasher):
    """Valid credentials yield a token that resolves to the user"""
    # Arrange
    password = "Secret123"
    mock_user = User(
        name="Bob",
        email="bob@x.com",
        password_hash=hasher.hash(password),
        role=UserRole.user,
    )
    mock_uow.users.get_by_email.return_value = mock_user

    use_case = LoginUseCase(mock_uow, ctx)

    # Act
    result = await use_case.execute("bob@x.com", password)

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.user.email == "bob@x.com"
    assert data.user.role == "user"
    assert data.requires_password_change is False
    assert data.message is None
    assert ctx.tokens.verify(data.token) == mock_user.id

    # Verify UnitOfWork calls
    mock_uow.users.get_by_email.assert_called_once_with("bob@x.com")
    mock_uow.users.update.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_updates_last_login_at(mock_uow, ctx, hasher, clock):
    mock_user = User(name="Bob", email="bob@x.com", password_hash=hasher.hash("Secret123"))
    mock_uow.users.get_by_email.return_value = mock_user

    result = await LoginUseCase(mock_uow, ctx).execute("bob@x.com", "Secret123")

    assert result.is_ok()
    assert mock_user.last_login_at == clock.now()


@pytest.mark.asyncio
async def test_login_invalid_credentials_wrong_password(mock_uow, ctx, hasher):
    """Wrong password fails without touching the account"""
    # Arrange
    mock_user = User(name="Bob", email="bob@x.com", password_hash=hasher.hash("Secret123"))
    mock_uow.users.get_by_email.return_value = mock_user

    use_case = LoginUseCase(mock_uow, ctx)

    # Act
    result = await use_case.execute("bob@x.com", "WrongPassword!")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_invalid_credentials_nonexistent_user(mock_uow, ctx):
    """Unknown email gets the same error and still spends hashing work"""
    # Arrange
    mock_uow.users.get_by_email.return_value = None
    ctx.hasher = MagicMock(wraps=ctx.hasher)

    use_case = LoginUseCase(mock_uow, ctx)

    # Act
    result = await use_case.execute("nobody@x.com", "SomePassword!")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    ctx.hasher.verify_dummy.assert_called_once_with("SomePassword!")
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_inactive_user(mock_uow, ctx, hasher):
    """Deactivated users are indistinguishable from unknown ones"""
    mock_user = User(
        name="Bob",
        email="bob@x.com",
        password_hash=hasher.hash("Secret123"),
        is_active=False,
    )
    mock_uow.users.get_by_email.return_value = mock_user

    result = await LoginUseCase(mock_uow, ctx).execute("bob@x.com", "Secret123")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(uow, ctx, make_user):
    make_user(email="bob@x.com", password="Secret123")

    result = await LoginUseCase(uow, ctx).execute("Bob@X.com", "Secret123")

    assert result.is_ok()
    assert result.value.user.email == "bob@x.com"


@pytest.mark.asyncio
async def test_temporary_password_login_succeeds_once(uow, ctx, make_user, store):
    """First login with a temporary password flags a required change, the second fails"""
    user = make_user(password="TempPass1234", temporary=True)
    use_case = LoginUseCase(uow, ctx)

    first = await use_case.execute("bob@x.com", "TempPass1234")
    second = await use_case.execute("bob@x.com", "TempPass1234")

    assert first.is_ok()
    assert first.value.requires_password_change is True
    assert first.value.message == "Please change your temporary password"
    assert second.is_err()
    assert second.error.code == "INVALID_CREDENTIALS"
    assert store.users[user.id].is_temporary_password is True


@pytest.mark.asyncio
async def test_temporary_password_valid_just_before_expiry(uow, ctx, make_user, clock):
    make_user(password="TempPass1234", temporary=True)
    clock.advance(hours=23, minutes=59)

    result = await LoginUseCase(uow, ctx).execute("bob@x.com", "TempPass1234")

    assert result.is_ok()
    assert result.value.requires_password_change is True


@pytest.mark.asyncio
async def test_temporary_password_expires_after_24_hours(uow, ctx, make_user, clock):
    make_user(password="TempPass1234", temporary=True)
    clock.advance(hours=24, seconds=1)

    result = await LoginUseCase(uow, ctx).execute("bob@x.com", "TempPass1234")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_session_mode_login_issues_revocable_token(uow, session_ctx, make_user):
    user = make_user()

    result = await LoginUseCase(uow, session_ctx).execute("bob@x.com", "Secret123")

    assert result.is_ok()
    assert session_ctx.tokens.verify(result.value.token) == user.id
    assert session_ctx.tokens.revoke(result.value.token) is True
    assert session_ctx.tokens.verify(result.value.token) is None
