import pytest

from dao_auth.domain.entities import UserRole


@pytest.mark.asyncio
async def test_admin_created_user_temporary_password_lifecycle(service, make_user, clock):
    """Admin creates bob@x.com; the temporary password works once, then never after 24h"""
    make_user(email="admin@x.com", role=UserRole.admin)

    created = await service.create_user("Bob", "bob@x.com", "user")
    temporary_password = created.value.temporary_password
    login = await service.login("bob@x.com", temporary_password)

    assert login.is_ok()
    assert login.value.requires_password_change is True

    clock.advance(hours=24)
    expired = await service.login("bob@x.com", temporary_password)

    assert expired.is_err()
    assert expired.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_reset_code_scenario(service, make_user):
    """A generated code verifies, resets the password once and is then spent"""
    make_user(email="bob@x.com")

    code = await service.generate_reset_token("bob@x.com")
    verified = await service.verify_reset_token("bob@x.com", code)
    first = await service.reset_password_with_token("bob@x.com", code, "NewPass1")
    second = await service.reset_password_with_token("bob@x.com", code, "NewPass1")

    assert len(code) == 6 and code.isdigit()
    assert verified.value.valid is True
    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "INVALID_RESET_CODE"
    assert (await service.login("bob@x.com", "NewPass1")).is_ok()


@pytest.mark.asyncio
async def test_deactivation_invalidates_existing_sessions(session_service, make_user):
    admin = make_user(email="admin@x.com", role=UserRole.admin)
    bob = make_user(email="bob@x.com", password="Secret123")
    token = (await session_service.login("bob@x.com", "Secret123")).value.token
    assert (await session_service.get_current_user(token)).is_ok()

    await session_service.deactivate_user(admin.id, bob.id)
    current = await session_service.get_current_user(token)

    assert current.is_err()
    assert current.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_forgot_password_responses_are_identical(service, make_user):
    make_user(email="bob@x.com")

    known = await service.forgot_password("bob@x.com")
    unknown = await service.forgot_password("ghost@x.com")

    assert known.value.model_dump_json() == unknown.value.model_dump_json()


@pytest.mark.asyncio
async def test_logout_and_profile_through_service(session_service, make_user):
    bob = make_user(email="bob@x.com", password="Secret123")
    token = (await session_service.login("bob@x.com", "Secret123")).value.token

    profile = await session_service.update_profile(bob.id, "Robert", "robert@x.com")
    changed = await session_service.change_password(bob.id, "Changed99")
    logout = await session_service.logout(token)

    assert profile.value.email == "robert@x.com"
    assert changed.is_ok()
    assert logout.value.revoked is True
    assert (await session_service.get_current_user(token)).is_err()
    assert (await session_service.login("robert@x.com", "Changed99")).is_ok()
