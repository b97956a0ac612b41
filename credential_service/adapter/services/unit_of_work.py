from sqlmodel.ext.asyncio.session import AsyncSession

from credential_service.adapter.repositories.account_repository import AccountRepository
from credential_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.accounts = AccountRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Returned accounts must stay readable after the rollback expires the session
        self.session.expunge_all()
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
