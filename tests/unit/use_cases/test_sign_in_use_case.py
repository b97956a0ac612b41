from unittest.mock import patch

import pytest

from credential_service.app.use_cases.accounts import SignInUseCase
from credential_service.domain.entities import ErrorCode
from tests.fixtures.accounts import DEFAULT_PASSWORD, build_account


@pytest.mark.asyncio
async def test_sign_in_with_username(mock_uow):
    account = build_account()
    mock_uow.accounts.get_by_username_or_email.return_value = account

    result = await SignInUseCase(mock_uow).execute("alice", DEFAULT_PASSWORD)

    assert result.is_ok()
    assert result.value is account
    mock_uow.accounts.get_by_username_or_email.assert_awaited_once_with(
        "alice", active_only=True
    )


@pytest.mark.asyncio
async def test_sign_in_with_email(mock_uow):
    mock_uow.accounts.get_by_username_or_email.return_value = build_account()

    result = await SignInUseCase(mock_uow).execute("alice@example.com", DEFAULT_PASSWORD)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_sign_in_wrong_password(mock_uow):
    mock_uow.accounts.get_by_username_or_email.return_value = build_account()

    result = await SignInUseCase(mock_uow).execute("alice", "Wrong#Pass1")

    assert result.is_err()
    assert result.error.code == ErrorCode.UNAUTHORIZED


@pytest.mark.asyncio
async def test_sign_in_unknown_identifier_still_hashes(mock_uow):
    with patch(
        "credential_service.app.use_cases.accounts.sign_in_use_case.hash_password"
    ) as hash_password:
        result = await SignInUseCase(mock_uow).execute("nobody", "Whatever#1")

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND
    hash_password.assert_called_once()


@pytest.mark.asyncio
async def test_sign_in_inactive_account_is_reported_as_not_found(mock_uow):
    mock_uow.accounts.get_by_username_or_email.return_value = build_account(is_active=False)

    result = await SignInUseCase(mock_uow).execute("alice", DEFAULT_PASSWORD)

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier, password", [("", "secret"), ("alice", None)])
async def test_sign_in_requires_identifier_and_password(mock_uow, identifier, password):
    result = await SignInUseCase(mock_uow).execute(identifier, password)

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_ARGUMENT
    mock_uow.accounts.get_by_username_or_email.assert_not_called()


@pytest.mark.asyncio
async def test_sign_in_does_not_write(mock_uow):
    mock_uow.accounts.get_by_username_or_email.return_value = build_account()

    await SignInUseCase(mock_uow).execute("alice", DEFAULT_PASSWORD)

    mock_uow.accounts.update.assert_not_called()
    mock_uow.commit.assert_not_called()
