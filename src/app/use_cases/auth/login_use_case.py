"""
Login Use Case

Checks a password and issues an access token.
"""

import logging

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.passwords import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.support import build_view
from src.domain.base import utc_now
from .dtos import LoginCommand, LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("UNAUTHENTICATED", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Deleted and deactivated accounts cannot log in
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            # Always perform a hash check even if the user is not found
            if user is None or not user.password_hash:
                burn_password_check()
                return Return.err(INVALID_CREDENTIALS)

            if not verify_password(command.password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            if user.is_deleted or not user.is_active:
                return Return.err(Error("UNAUTHENTICATED", "Account is inactive"))

            await self.uow.users.update_fields(user.id, {"last_login_at": utc_now()})
            await self.uow.commit()

            user = await self.uow.users.get_by_id(user.id)
            if user is None:
                return Return.err(INVALID_CREDENTIALS)
            logger.info(f"User logged in: {user.username}")

            return Return.ok(
                LoginResponse(
                    access_token=generate_jwt(user.id),
                    expires_in=ApplicationConfig.JWT_EXPIRE_MINUTES * 60,
                    user=await build_view(self.uow, user),
                )
            )
