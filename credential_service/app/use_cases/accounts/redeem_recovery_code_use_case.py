"""
Redeem Recovery Code Use Case

Resets a password with a recovery code instead of the current password.
"""

import logging

from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import ErrorCode
from credential_service.domain.time import utc_now
from credential_service.libs.result import Error, Result, Return

from .change_password_use_case import ChangePasswordUseCase, validate_new_password

logger = logging.getLogger(__name__)


class RedeemRecoveryCodeUseCase:
    """
    Use case for redeeming a recovery code.

    Business Rules:
    - The code must belong to an account and expire strictly after now
    - Unknown, expired and already redeemed codes all fail the same way
      (INVALID_OR_EXPIRED)
    - The credential rotation is the change-password rotation; it clears the
      code in the same update, so a code works once
    - Lookup and rotation share one unit of work
    """

    def __init__(self, uow: UnitOfWork, notifications: NotificationDispatcher):
        self.uow = uow
        self.change_password = ChangePasswordUseCase(uow, notifications)

    async def execute(self, code: str, new_password: str) -> Result[None]:
        """
        Execute redeem recovery code use case.

        Args:
            code: Recovery code from the recovery message
            new_password: New plain text password

        Returns:
            Result with None on success, or Error
            (INVALID_ARGUMENT, INVALID_OR_EXPIRED, DELIVERY_FAILED)
        """
        validation = validate_new_password(new_password)
        if validation.is_err():
            return validation

        if not code:
            return Return.err(
                Error(ErrorCode.INVALID_OR_EXPIRED, "Recovery code is invalid or has expired")
            )

        async with self.uow:
            now = utc_now()
            account = await self.uow.accounts.get_by_valid_recovery_code(code, now)

            if account is None or not account.is_recovery_code_valid(code, now):
                logger.warning("Recovery code redemption rejected")
                return Return.err(
                    Error(
                        ErrorCode.INVALID_OR_EXPIRED,
                        "Recovery code is invalid or has expired",
                    )
                )

            result = await self.change_password.rotate(account, new_password)
            logger.info(f"Recovery code redeemed for account {account.id}")
            return result
