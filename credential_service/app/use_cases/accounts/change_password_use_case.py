"""
Change Password Use Case

Rotates an account's credential and closes any outstanding recovery.
"""

import logging
import re

from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.password_hasher import generate_salt, hash_password
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import Account, ErrorCode
from credential_service.domain.time import utc_now
from credential_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

_PASSWORD_RULES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d"),
    re.compile(r"[^a-zA-Z\d]"),
)


def validate_new_password(password: str) -> Result[None]:
    """
    Validate password complexity.

    Requires MIN_PASSWORD_LENGTH characters including a lowercase letter, an
    uppercase letter, a digit and a special character.
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                ErrorCode.INVALID_ARGUMENT,
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )

    if not all(rule.search(password) for rule in _PASSWORD_RULES):
        return Return.err(
            Error(
                ErrorCode.INVALID_ARGUMENT,
                "Password needs an uppercase letter, a lowercase letter, "
                "a digit and a special character",
            )
        )

    return Return.ok(None)


class ChangePasswordUseCase:
    """
    Use case for changing an account's password.

    Business Rules:
    - New password must pass validate_new_password
    - A fresh salt is generated on every change; salt and hash are written
      together in the same update
    - Recovery code and expiry are cleared in that same update, and the
      pending-reset and temporary-password flags are reset
    - last_password_change_at is set to now
    - Confirmation is mailed only after the commit
    """

    def __init__(self, uow: UnitOfWork, notifications: NotificationDispatcher):
        self.uow = uow
        self.notifications = notifications

    async def execute(self, account_id: int, new_password: str) -> Result[None]:
        """
        Execute change password use case.

        Args:
            account_id: Account whose password changes
            new_password: New plain text password

        Returns:
            Result with None on success, or Error
            (INVALID_ARGUMENT, NOT_FOUND, DELIVERY_FAILED)
        """
        validation = validate_new_password(new_password)
        if validation.is_err():
            return validation

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            return await self.rotate(account, new_password)

    async def rotate(self, account: Account, new_password: str) -> Result[None]:
        """
        Write a new credential for an already loaded account.

        Must run inside an entered unit of work; commits it.
        """
        salt = generate_salt()
        account.set_credentials(salt, hash_password(salt, new_password), utc_now())

        await self.uow.accounts.update(account)
        await self.uow.commit()
        logger.info(f"Password changed for account {account.id}")

        return await self.notifications.send_password_changed(account)
