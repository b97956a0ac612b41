from typing import List, Optional

from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.domain.entities import Account, ErrorCode
from credential_service.libs.result import Error, Result, Return


class GetAccountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: int) -> Result[Account]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))
            return Return.ok(account)


class ListAccountsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, is_active: Optional[bool] = None) -> Result[List[Account]]:
        """List all accounts, or only active/inactive ones when is_active is given"""
        async with self.uow:
            accounts = await self.uow.accounts.list_all(is_active=is_active)
            return Return.ok(accounts)
