from uuid import uuid4

import pytest

from dao_auth.app.use_cases.auth import GetCurrentUserUseCase, LoginUseCase
from dao_auth.app.use_cases.users import (
    DeactivateUserUseCase,
    ForcePasswordResetUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ReactivateUserUseCase,
    UpdateUserRoleUseCase,
)
from dao_auth.domain.entities import UserRole


# ============================================================================
# Role changes
# ============================================================================


@pytest.mark.asyncio
async def test_update_user_role(uow, ctx, make_user, store):
    user = make_user(role=UserRole.viewer)

    result = await UpdateUserRoleUseCase(uow, ctx).execute(user.id, "user")

    assert result.is_ok()
    assert result.value.role == "user"
    assert store.users[user.id].role == UserRole.user


@pytest.mark.asyncio
async def test_update_user_role_applies_on_next_request(uow, ctx, make_user):
    user = make_user(role=UserRole.admin)
    token = ctx.tokens.issue(user.id)

    await UpdateUserRoleUseCase(uow, ctx).execute(user.id, "viewer")
    current = await GetCurrentUserUseCase(uow, ctx).execute(token)

    assert current.is_ok()
    assert current.value.role == "viewer"


@pytest.mark.asyncio
async def test_update_user_role_invalid(uow, ctx, make_user, store):
    user = make_user(role=UserRole.viewer)

    result = await UpdateUserRoleUseCase(uow, ctx).execute(user.id, "owner")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert store.users[user.id].role == UserRole.viewer


@pytest.mark.asyncio
async def test_update_user_role_not_found(mock_uow, ctx):
    mock_uow.users.get_by_id.return_value = None

    result = await UpdateUserRoleUseCase(mock_uow, ctx).execute(uuid4(), "user")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    mock_uow.commit.assert_not_called()


# ============================================================================
# Deactivation
# ============================================================================


@pytest.mark.asyncio
async def test_deactivate_user_blocks_login(uow, ctx, make_user, store):
    admin = make_user(email="admin@x.com", role=UserRole.admin)
    bob = make_user(email="bob@x.com", password="Secret123")

    result = await DeactivateUserUseCase(uow, ctx).execute(admin.id, bob.id)

    assert result.is_ok()
    assert result.value.is_active is False
    assert bob.id in store.users
    login = await LoginUseCase(uow, ctx).execute("bob@x.com", "Secret123")
    assert login.is_err()
    assert login.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_deactivate_user_revokes_sessions(uow, session_ctx, make_user):
    admin = make_user(email="admin@x.com", role=UserRole.admin)
    bob = make_user(email="bob@x.com")
    tokens = [session_ctx.tokens.issue(bob.id) for _ in range(2)]
    admin_token = session_ctx.tokens.issue(admin.id)

    result = await DeactivateUserUseCase(uow, session_ctx).execute(admin.id, bob.id)

    assert result.is_ok()
    assert all(session_ctx.tokens.verify(t) is None for t in tokens)
    assert session_ctx.tokens.verify(admin_token) == admin.id


@pytest.mark.asyncio
async def test_deactivate_self_is_forbidden(mock_uow, ctx):
    admin_id = uuid4()

    result = await DeactivateUserUseCase(mock_uow, ctx).execute(admin_id, admin_id)

    assert result.is_err()
    assert result.error.code == "SELF_DEACTIVATION"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_deactivate_unknown_user(uow, ctx, make_user):
    admin = make_user(email="admin@x.com", role=UserRole.admin)

    result = await DeactivateUserUseCase(uow, ctx).execute(admin.id, uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_reactivate_user_restores_login(uow, ctx, make_user):
    bob = make_user(password="Secret123", is_active=False)

    result = await ReactivateUserUseCase(uow, ctx).execute(bob.id)
    login = await LoginUseCase(uow, ctx).execute("bob@x.com", "Secret123")

    assert result.is_ok()
    assert result.value.is_active is True
    assert login.is_ok()


@pytest.mark.asyncio
async def test_reactivate_unknown_user(uow, ctx):
    result = await ReactivateUserUseCase(uow, ctx).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


# ============================================================================
# Forced password reset
# ============================================================================


@pytest.mark.asyncio
async def test_force_password_reset(uow, session_ctx, make_user, email_sender):
    bob = make_user(password="Secret123")
    token = session_ctx.tokens.issue(bob.id)

    result = await ForcePasswordResetUseCase(uow, session_ctx).execute(bob.id)
    await session_ctx.notifier.dispatcher.drain()

    assert result.is_ok()
    data = result.value
    assert data.sessions_revoked == 1
    assert data.user.is_temporary_password is True
    assert session_ctx.tokens.verify(token) is None

    old_login = await LoginUseCase(uow, session_ctx).execute("bob@x.com", "Secret123")
    temp_login = await LoginUseCase(uow, session_ctx).execute(
        "bob@x.com", data.temporary_password
    )
    assert old_login.is_err()
    assert temp_login.is_ok()
    assert temp_login.value.requires_password_change is True

    emails = email_sender.get_emails_to("bob@x.com")
    assert [e.subject for e in emails] == ["Your password has been reset"]
    assert data.temporary_password in emails[0].html_body


@pytest.mark.asyncio
async def test_force_password_reset_unknown_user(uow, ctx):
    result = await ForcePasswordResetUseCase(uow, ctx).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


# ============================================================================
# Listing and reading
# ============================================================================


@pytest.mark.asyncio
async def test_list_users_paginates_newest_first(uow, make_user, clock):
    for i in range(5):
        make_user(email=f"user{i}@x.com", name=f"User {i}")
        clock.advance(minutes=1)

    result = await ListUsersUseCase(uow).execute(page=2, limit=2)

    assert result.is_ok()
    data = result.value
    assert [u.email for u in data.users] == ["user2@x.com", "user1@x.com"]
    assert data.pagination.page == 2
    assert data.pagination.limit == 2
    assert data.pagination.total == 5
    assert data.pagination.pages == 3


@pytest.mark.asyncio
async def test_list_users_includes_inactive(uow, make_user):
    make_user(email="bob@x.com")
    make_user(email="gone@x.com", is_active=False)

    result = await ListUsersUseCase(uow).execute()

    assert result.value.pagination.total == 2
    assert {u.email for u in result.value.users} == {"bob@x.com", "gone@x.com"}


@pytest.mark.asyncio
async def test_get_user_self(uow, make_user):
    bob = make_user(role=UserRole.viewer)

    result = await GetUserUseCase(uow).execute(bob.id, "viewer", bob.id)

    assert result.is_ok()
    assert result.value.email == "bob@x.com"


@pytest.mark.asyncio
async def test_get_user_other_requires_manage_users(uow, make_user):
    bob = make_user(role=UserRole.user)
    alice = make_user(email="alice@x.com", name="Alice")

    result = await GetUserUseCase(uow).execute(bob.id, "user", alice.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_get_user_as_admin(uow, make_user):
    admin = make_user(email="admin@x.com", role=UserRole.admin)
    bob = make_user()

    found = await GetUserUseCase(uow).execute(admin.id, "admin", bob.id)
    missing = await GetUserUseCase(uow).execute(admin.id, "admin", uuid4())

    assert found.is_ok()
    assert found.value.id == str(bob.id)
    assert missing.is_err()
    assert missing.error.code == "NOT_FOUND"
