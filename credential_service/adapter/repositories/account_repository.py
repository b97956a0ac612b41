from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from credential_service.app.repositories.account_repository import IAccountRepository
from credential_service.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, account: Account) -> Account:
        """Insert a new account and return it with its assigned id"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def get_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username_or_email(
        self, identifier: str, active_only: bool = False
    ) -> Optional[Account]:
        """Get the account whose username or email equals identifier"""
        stmt = select(Account).where(
            or_(Account.username == identifier, Account.email == identifier)
        )
        if active_only:
            stmt = stmt.where(Account.is_active == True)  # noqa: E712
        result = await self.session.exec(stmt.order_by(Account.id))
        return result.first()

    async def get_by_valid_recovery_code(
        self, code: str, now: datetime
    ) -> Optional[Account]:
        """Get the account holding code, if it expires strictly after now"""
        stmt = select(Account).where(
            Account.recovery_code == code,
            Account.recovery_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def find_by_username_or_email(
        self, username: str, email: str, exclude_id: Optional[int] = None
    ) -> Optional[Account]:
        """Get any account using username or email, other than exclude_id"""
        stmt = select(Account).where(
            or_(Account.username == username, Account.email == email)
        )
        if exclude_id is not None:
            stmt = stmt.where(Account.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self, is_active: Optional[bool] = None) -> List[Account]:
        """List accounts, optionally only active or only inactive ones"""
        stmt = select(Account)
        if is_active is not None:
            stmt = stmt.where(Account.is_active == is_active)
        result = await self.session.exec(stmt.order_by(Account.id))
        return list(result.all())

    async def update(self, account: Account) -> Account:
        """Overwrite the stored account with all of its current fields"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def delete(self, account_id: int) -> bool:
        """Delete account by ID"""
        account = await self.get_by_id(account_id)
        if account is None:
            return False
        await self.session.delete(account)
        await self.session.flush()
        return True
