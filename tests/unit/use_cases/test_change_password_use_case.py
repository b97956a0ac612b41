from datetime import timedelta

import pytest
from sqlalchemy.exc import SQLAlchemyError

from credential_service.app.services.notifier import DeliveryError
from credential_service.app.services.password_hasher import verify_password
from credential_service.app.services.templates import PASSWORD_CHANGED_SUBJECT
from credential_service.app.use_cases.accounts import (
    ChangePasswordUseCase,
    validate_new_password,
)
from credential_service.domain.entities import ErrorCode
from credential_service.domain.time import utc_now
from tests.fixtures.accounts import DEFAULT_PASSWORD, build_account

NEW_PASSWORD = "NewP@ss1"


def account_in_recovery():
    now = utc_now()
    return build_account(
        recovery_code="0123456789abcdef",
        recovery_expires_at=now + timedelta(minutes=30),
        is_password_reset_pending=True,
        is_password_temporary=True,
        last_password_change_at=now - timedelta(days=10),
    )


@pytest.fixture
def use_case(mock_uow, notifications):
    return ChangePasswordUseCase(mock_uow, notifications)


@pytest.mark.asyncio
async def test_change_password_rotates_credential(use_case, mock_uow, notifier):
    account = account_in_recovery()
    old_salt, old_hash = account.salt, account.password_hash
    old_change = account.last_password_change_at
    mock_uow.accounts.get_by_id.return_value = account

    result = await use_case.execute(1, NEW_PASSWORD)

    assert result.is_ok()
    assert account.salt != old_salt
    assert account.password_hash != old_hash
    assert verify_password(account.salt, account.password_hash, NEW_PASSWORD)
    assert not verify_password(account.salt, account.password_hash, DEFAULT_PASSWORD)
    assert account.last_password_change_at > old_change

    # Recovery closed in the same update
    assert account.recovery_code is None
    assert account.recovery_expires_at is None
    assert account.is_password_reset_pending is False
    assert account.is_password_temporary is False

    mock_uow.accounts.update.assert_awaited_once_with(account)
    mock_uow.commit.assert_awaited_once()
    address, subject, _ = notifier.send.await_args.args
    assert address == "alice@example.com"
    assert subject == PASSWORD_CHANGED_SUBJECT


@pytest.mark.asyncio
async def test_change_password_account_not_found(use_case, mock_uow, notifier):
    result = await use_case.execute(99, NEW_PASSWORD)

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND
    mock_uow.accounts.update.assert_not_called()
    notifier.send.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["", "Sh0rt!", "alllower1!", "ALLUPPER1!", "NoDigits!", "NoSpecial1"])
async def test_change_password_rejects_weak_password(use_case, mock_uow, password):
    result = await use_case.execute(1, password)

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_ARGUMENT
    mock_uow.accounts.get_by_id.assert_not_called()


def test_validate_new_password_accepts_complex_password():
    assert validate_new_password(NEW_PASSWORD).is_ok()


@pytest.mark.asyncio
async def test_store_failure_propagates_without_commit_or_notification(
    use_case, mock_uow, notifier
):
    mock_uow.accounts.get_by_id.return_value = build_account()
    mock_uow.accounts.update.side_effect = SQLAlchemyError("disk full")

    with pytest.raises(SQLAlchemyError):
        await use_case.execute(1, NEW_PASSWORD)

    mock_uow.commit.assert_not_called()
    notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_confirmation_failure_happens_after_commit(use_case, mock_uow, notifier):
    mock_uow.accounts.get_by_id.return_value = build_account()
    notifier.send.side_effect = DeliveryError("smtp down")

    with pytest.raises(DeliveryError):
        await use_case.execute(1, NEW_PASSWORD)

    mock_uow.commit.assert_awaited_once()
