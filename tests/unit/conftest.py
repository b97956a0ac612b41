import pytest
from unittest.mock import AsyncMock, MagicMock

from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notification_dispatcher import NotificationDispatcher
from credential_service.app.services.notifier import INotifier


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the account repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    async def assign_id(account):
        account.id = 1
        return account

    uow.accounts = MagicMock()
    uow.accounts.create = AsyncMock(side_effect=assign_id)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_by_username_or_email = AsyncMock(return_value=None)
    uow.accounts.get_by_valid_recovery_code = AsyncMock(return_value=None)
    uow.accounts.find_by_username_or_email = AsyncMock(return_value=None)
    uow.accounts.list_all = AsyncMock(return_value=[])
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)
    uow.accounts.delete = AsyncMock(return_value=False)
    return uow


@pytest.fixture
def notifier():
    notifier = MagicMock(spec=INotifier)
    notifier.send = AsyncMock(return_value=True)
    return notifier


@pytest.fixture
def policy():
    return CredentialPolicy()


@pytest.fixture
def notifications(notifier, policy):
    return NotificationDispatcher(notifier, policy)
