"""
Create Account Use Case

Registers a new account with a system-generated password.
"""

import logging

from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.password_hasher import (
    generate_password,
    generate_salt,
    hash_password,
)
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import Account, ErrorCode
from credential_service.domain.time import utc_now
from credential_service.libs.result import Error, Result, Return

from .check_availability_use_case import is_username_or_email_available
from .dtos import CreateAccountCommand

logger = logging.getLogger(__name__)


class CreateAccountUseCase:
    """
    Create Account Use Case

    Command/Response Pattern:
    - Input: CreateAccountCommand
    - Output: Result[Account] (the stored account, never the plain password)

    Business Logic:
    1. Reject blank username or email
    2. Check username/email availability (single query)
    3. Generate a system password, a fresh salt and the matching hash
    4. Insert the account with is_password_temporary=True
    5. Fail with INVARIANT_VIOLATION if the store assigned no id
    6. Commit
    7. Mail the welcome message with the username and generated password
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

    async def execute(self, command: CreateAccountCommand) -> Result[Account]:
        """
        Execute create account use case

        Args:
            command: CreateAccountCommand with username, email, role_id

        Returns:
            Result[Account] with the stored account, or Error
            (INVALID_ARGUMENT, CONFLICT, INVARIANT_VIOLATION, DELIVERY_FAILED)
        """
        if not command.username or not command.username.strip():
            return Return.err(Error(ErrorCode.INVALID_ARGUMENT, "Username is required"))
        if not command.email or not command.email.strip():
            return Return.err(Error(ErrorCode.INVALID_ARGUMENT, "Email is required"))

        async with self.uow:
            available = await is_username_or_email_available(
                self.uow.accounts, command.username, command.email
            )
            if not available:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Username or email is not available")
                )

            # Plain password only lives until the welcome message is rendered
            password = generate_password(self.policy.generated_password_length)
            salt = generate_salt()
            now = utc_now()

            account = Account(
                username=command.username,
                email=command.email,
                role_id=command.role_id,
                is_active=command.is_active,
                salt=salt,
                password_hash=hash_password(salt, password),
                is_password_temporary=True,
                is_password_reset_pending=False,
                last_password_change_at=now,
                created_at=now,
            )
            account = await self.uow.accounts.create(account)

            if account is None or not account.id:
                await self.uow.rollback()
                logger.error("Account insert returned no identity")
                return Return.err(
                    Error(
                        ErrorCode.INVARIANT_VIOLATION,
                        "Account could not be created",
                    )
                )

            await self.uow.commit()
            logger.info(f"Account {account.id} created")

            sent = await self.notifications.send_welcome(account, password)
            if sent.is_err():
                return Return.err(sent.error)

            return Return.ok(account)
