from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from credential_service.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Insert a new account and return it with its assigned id"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_username_or_email(
        self, identifier: str, active_only: bool = False
    ) -> Optional[Account]:
        """Get the account whose username or email equals identifier"""
        pass

    @abstractmethod
    async def get_by_valid_recovery_code(
        self, code: str, now: datetime
    ) -> Optional[Account]:
        """Get the account holding code, if it expires strictly after now"""
        pass

    @abstractmethod
    async def find_by_username_or_email(
        self, username: str, email: str, exclude_id: Optional[int] = None
    ) -> Optional[Account]:
        """Get any account using username or email, other than exclude_id"""
        pass

    @abstractmethod
    async def list_all(self, is_active: Optional[bool] = None) -> List[Account]:
        """List accounts, optionally only active or only inactive ones"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Overwrite the stored account with all of its current fields"""
        pass

    @abstractmethod
    async def delete(self, account_id: int) -> bool:
        """Delete account by ID, returning whether a row was removed"""
        pass
