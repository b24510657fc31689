"""
First-admin bootstrap.

Every user-management route needs an admin, so a fresh store is seeded
from the FIRST_ADMIN_* settings.
"""

import logging
from typing import Optional

from dao_auth.app.repositories.user_repository import DuplicateEmailError
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.domain.entities import User, UserRole

logger = logging.getLogger(__name__)


async def seed_admin(uow: UnitOfWork, ctx: AuthContext, config) -> Optional[User]:
    """
    Create the configured admin with a permanent password.

    Returns the new admin, or None when FIRST_ADMIN_EMAIL/FIRST_ADMIN_PASSWORD
    are unset or the email is already registered. Nothing is emailed.
    """
    if not config.FIRST_ADMIN_EMAIL or not config.FIRST_ADMIN_PASSWORD:
        logger.warning("FIRST_ADMIN_EMAIL or FIRST_ADMIN_PASSWORD not set - no admin seeded")
        return None

    email = config.FIRST_ADMIN_EMAIL.strip().lower()

    async with uow:
        if await uow.users.get_by_email(email) is not None:
            logger.info(f"Admin '{email}' already exists - skipping")
            return None

        now = ctx.clock.now()
        admin = User(
            name=config.FIRST_ADMIN_NAME,
            email=email,
            password_hash=ctx.hasher.hash(config.FIRST_ADMIN_PASSWORD),
            role=UserRole.admin,
            created_at=now,
            updated_at=now,
        )
        try:
            admin = await uow.users.create(admin)
        except DuplicateEmailError:
            logger.info(f"Admin '{email}' was created concurrently - skipping")
            return None
        await uow.commit()

    logger.info(f"Admin '{email}' created successfully")
    return admin
