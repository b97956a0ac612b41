from typing import List, Optional

from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.notifier import INotifier
from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.app.use_cases.accounts import (
    ChangePasswordUseCase,
    CheckAvailabilityUseCase,
    CreateAccountCommand,
    CreateAccountUseCase,
    DeleteAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    RedeemRecoveryCodeUseCase,
    RequestRecoveryCodeUseCase,
    SignInUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from credential_service.domain.entities import Account
from credential_service.libs.result import Result


class CredentialLifecycleManager:
    """
    Entry point for the credential lifecycle.

    Holds the unit of work, notifier and policy for one request and runs the
    matching use case per call. Keeps no account state between calls.
    """

    def __init__(self, uow: UnitOfWork, notifier: INotifier, policy: CredentialPolicy):
        self.uow = uow
        self.policy = policy
        self.notifications = NotificationDispatcher(notifier, policy)

    async def create_account(self, command: CreateAccountCommand) -> Result[Account]:
        return await CreateAccountUseCase(self.uow, self.notifications, self.policy).execute(
            command
        )

    async def sign_in(self, username_or_email: str, password: str) -> Result[Account]:
        return await SignInUseCase(self.uow).execute(username_or_email, password)

    async def change_password(self, account_id: int, new_password: str) -> Result[None]:
        return await ChangePasswordUseCase(self.uow, self.notifications).execute(
            account_id, new_password
        )

    async def request_recovery_code(self, username_or_email: str) -> Result[None]:
        return await RequestRecoveryCodeUseCase(
            self.uow, self.notifications, self.policy
        ).execute(username_or_email)

    async def redeem_recovery_code(self, code: str, new_password: str) -> Result[None]:
        return await RedeemRecoveryCodeUseCase(self.uow, self.notifications).execute(
            code, new_password
        )

    async def is_username_or_email_available(
        self,
        username: str,
        email: Optional[str] = None,
        exclude_account_id: Optional[int] = None,
    ) -> Result[bool]:
        return await CheckAvailabilityUseCase(self.uow).execute(
            username, email, exclude_account_id
        )

    async def update_account(self, command: UpdateAccountCommand) -> Result[Account]:
        return await UpdateAccountUseCase(self.uow).execute(command)

    async def get_account(self, account_id: int) -> Result[Account]:
        return await GetAccountUseCase(self.uow).execute(account_id)

    async def list_accounts(self, is_active: Optional[bool] = None) -> Result[List[Account]]:
        return await ListAccountsUseCase(self.uow).execute(is_active)

    async def delete_account(self, account_id: int) -> Result[bool]:
        return await DeleteAccountUseCase(self.uow).execute(account_id)
