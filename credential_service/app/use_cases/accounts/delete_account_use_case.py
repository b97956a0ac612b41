import logging

from credential_service.app.services.unit_of_work import UnitOfWork
from credential_service.libs.result import Result, Return

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """Pass-through delete; returns whether an account was removed"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: int) -> Result[bool]:
        async with self.uow:
            deleted = await self.uow.accounts.delete(account_id)
            if deleted:
                await self.uow.commit()
                logger.info(f"Account {account_id} deleted")
            return Return.ok(deleted)
