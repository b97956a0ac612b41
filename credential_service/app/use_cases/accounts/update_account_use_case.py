"""
Update Account Use Case

Changes the profile fields of an account.
"""

import logging

from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import Account, ErrorCode
from credential_service.domain.time import utc_now
from credential_service.libs.result import Error, Result, Return

from .check_availability_use_case import is_username_or_email_available
from .dtos import UpdateAccountCommand

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """
    Use case for updating username, email and role.

    Business Rules:
    - Uniqueness re-checked excluding the account itself
    - Only username, email and role_id change; credential, recovery state
      and flags are left alone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateAccountCommand) -> Result[Account]:
        if not command.username or not command.username.strip():
            return Return.err(Error(ErrorCode.INVALID_ARGUMENT, "Username is required"))
        if not command.email or not command.email.strip():
            return Return.err(Error(ErrorCode.INVALID_ARGUMENT, "Email is required"))

        async with self.uow:
            available = await is_username_or_email_available(
                self.uow.accounts,
                command.username,
                command.email,
                exclude_account_id=command.account_id,
            )
            if not available:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Username or email is not available")
                )

            account = await self.uow.accounts.get_by_id(command.account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            account.username = command.username
            account.email = command.email
            account.role_id = command.role_id
            account.updated_at = utc_now()

            account = await self.uow.accounts.update(account)
            await self.uow.commit()
            logger.info(f"Account {account.id} updated")

            return Return.ok(account)
