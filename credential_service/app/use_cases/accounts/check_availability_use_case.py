"""
Check Availability Use Case

Answers whether a username/email pair is free to use.
"""

from typing import Optional

from credential_service.app.repositories.account_repository import IAccountRepository
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.libs.result import Result, Return


async def is_username_or_email_available(
    accounts: IAccountRepository,
    username: str,
    email: Optional[str],
    exclude_account_id: Optional[int] = None,
) -> bool:
    """
    Single-query uniqueness check.

    Matches any account where username equals username or email equals the
    email candidate, skipping exclude_account_id. When email is empty the
    username is used as the email candidate as well, so a username that is
    somebody's email address is reported as taken.
    """
    email_candidate = email if email else username
    existing = await accounts.find_by_username_or_email(
        username, email_candidate, exclude_id=exclude_account_id
    )
    return existing is None


class CheckAvailabilityUseCase:
    """
    Use case for checking username/email availability.

    Business Rules:
    - One predicate query: username OR email, excluding the given account
    - Empty email falls back to the username as email candidate
    - The check is advisory; the unique indexes on accounts are the backstop
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        username: str,
        email: Optional[str] = None,
        exclude_account_id: Optional[int] = None,
    ) -> Result[bool]:
        async with self.uow:
            available = await is_username_or_email_available(
                self.uow.accounts, username, email, exclude_account_id
            )
            return Return.ok(available)
