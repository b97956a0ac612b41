"""
Request Recovery Code Use Case

Issues a short-lived recovery code and mails it to the account owner.
"""

import logging
import uuid

from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import ErrorCode
from credential_service.domain.time import utc_now
from credential_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

RECOVERY_CODE_LENGTH = 16


def generate_recovery_code() -> str:
    """16 hex characters taken from a random UUID"""
    return uuid.uuid4().hex[:RECOVERY_CODE_LENGTH]


class RequestRecoveryCodeUseCase:
    """
    Use case for requesting a password recovery code.

    Business Rules:
    - Identifier matches username or email, active or not
    - Code is 16 hex characters; a new request replaces any previous code
    - Code expires after CredentialPolicy.recovery_code_validity
    - Sets is_password_reset_pending and last_password_reset_request_at
    - Code is mailed only after the commit; the result covers both steps
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifications: NotificationDispatcher,
        policy: CredentialPolicy,
    ):
        self.uow = uow
        self.notifications = notifications
        self.policy = policy

    async def execute(self, username_or_email: str) -> Result[None]:
        """
        Execute request recovery code use case.

        Args:
            username_or_email: Username or email address

        Returns:
            Result with None on success, or Error
            (INVALID_ARGUMENT, NOT_FOUND, DELIVERY_FAILED)
        """
        if not username_or_email:
            return Return.err(
                Error(ErrorCode.INVALID_ARGUMENT, "Username or email is required")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_username_or_email(username_or_email)
            if account is None:
                return Return.err(
                    Error(ErrorCode.NOT_FOUND, "No account matches the identifier")
                )

            code = generate_recovery_code()
            now = utc_now()
            account.open_recovery(code, now + self.policy.recovery_code_validity, now)

            await self.uow.accounts.update(account)
            await self.uow.commit()
            logger.info(f"Recovery code issued for account {account.id}")

            return await self.notifications.send_recovery_code(account, code)
