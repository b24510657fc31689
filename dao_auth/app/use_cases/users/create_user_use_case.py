"""
Create User Use Case

Admin registration of a team member with a temporary password.
"""

import logging

from dao_auth.app.repositories.user_repository import DuplicateEmailError
from dao_auth.app.services.auth_context import AuthContext
from dao_auth.app.services.unit_of_work import UnitOfWork
from dao_auth.app.use_cases.auth.dtos import UserView
from dao_auth.domain.entities import User, UserRole
from dao_auth.libs.result import Error, Result, Return
from .dtos import CreateUserCommand, CreateUserResponse
from .temporary_password import assign_temporary_password

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for an admin creating a user.

    Business Rules:
    - Email is normalised to lowercase and must be unused, including by
      deactivated users
    - Role must be admin, user or viewer
    - A 12-character temporary password is generated, valid for 24 hours
    - The temporary password is returned once and queued for email delivery
    """

    def __init__(self, uow: UnitOfWork, ctx: AuthContext):
        self.uow = uow
        self.ctx = ctx

    async def execute(self, command: CreateUserCommand) -> Result[CreateUserResponse]:
        try:
            role = UserRole(command.role)
        except ValueError:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid role: {command.role}. Must be one of: admin, user, viewer",
                )
            )

        email = command.email.strip().lower()

        async with self.uow:
            existing = await self.uow.users.get_by_email(email)
            if existing is not None:
                return Return.err(Error("CONFLICT", "User already exists"))

            now = self.ctx.clock.now()
            user = User(
                name=command.name,
                email=email,
                role=role,
                password_hash="",
                created_at=now,
                updated_at=now,
            )
            temporary_password = assign_temporary_password(user, self.ctx)
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                # Lost a race with a concurrent create
                return Return.err(Error("CONFLICT", "User already exists"))
            await self.uow.commit()

        logger.info(f"User {user.id} created (role={role.value})")
        self.ctx.notifier.send_welcome(
            user, temporary_password, self.ctx.settings.temporary_password_ttl_hours
        )

        return Return.ok(
            CreateUserResponse(
                user=UserView.from_user(user),
                temporary_password=temporary_password,
                message="User created successfully. Temporary password has been sent by email.",
            )
        )
