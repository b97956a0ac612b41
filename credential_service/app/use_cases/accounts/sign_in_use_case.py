"""
Sign In Use Case

Checks a username-or-email and password against the stored credential.
"""

import logging
from typing import Optional

from credential_service.app.services.password_hasher import (
    generate_salt,
    hash_password,
    verify_password,
)
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import Account, ErrorCode
from credential_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class SignInUseCase:
    """
    Use case for signing in.

    Business Rules:
    - Identifier matches either username or email
    - Only active accounts can sign in; an inactive match is reported
      exactly like no match (NOT_FOUND)
    - Password checked with a constant-time comparison
    - No lockout or backoff
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username_or_email: str, password: Optional[str]) -> Result[Account]:
        """
        Execute sign in use case.

        Args:
            username_or_email: Username or email address
            password: Plain text password

        Returns:
            Result with the signed-in Account, or Error
            (INVALID_ARGUMENT, NOT_FOUND, UNAUTHORIZED)
        """
        if not username_or_email or password is None:
            return Return.err(
                Error(ErrorCode.INVALID_ARGUMENT, "Username and password are required")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_username_or_email(
                username_or_email, active_only=True
            )

            if account is None or not account.is_active:
                # Spend a hash anyway so a miss costs about as much as a check
                hash_password(generate_salt(), password)
                logger.debug(f"Sign in for unknown or inactive identifier {username_or_email!r}")
                return Return.err(
                    Error(ErrorCode.NOT_FOUND, "No active account matches the identifier")
                )

            if not verify_password(account.salt, account.password_hash, password):
                logger.warning(f"Sign in rejected for account {account.id}: wrong password")
                return Return.err(Error(ErrorCode.UNAUTHORIZED, "Password is incorrect"))

            return Return.ok(account)
