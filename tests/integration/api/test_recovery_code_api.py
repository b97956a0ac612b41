from datetime import timedelta

import pytest
import pytest_asyncio

from credential_service.adapter.repositories.account_repository import AccountRepository
from credential_service.app.services.templates import RECOVERY_CODE_SUBJECT
from credential_service.domain.time import utc_now


@pytest_asyncio.fixture
async def alice(client, notifier):
    response = await client.post(
        "/accounts", json={"username": "alice", "email": "alice@example.com", "role_id": 2}
    )
    assert response.status_code == 201, response.text
    return notifier.generated_password("alice@example.com")


async def request_code(client, identifier):
    return await client.post("/auth/recovery-code", json={"username_or_email": identifier})


async def redeem(client, code, new_password):
    return await client.post(
        "/auth/recovery-code/redeem", json={"code": code, "new_password": new_password}
    )


async def sign_in(client, identifier, password):
    return await client.post(
        "/auth/sign-in", json={"username_or_email": identifier, "password": password}
    )


@pytest.mark.asyncio
async def test_recovery_flow(client, notifier, alice):
    response = await request_code(client, "alice")

    assert response.status_code == 200
    assert response.json()["status"] == "sent"
    message = notifier.last_to("alice@example.com")
    assert message.subject == RECOVERY_CODE_SUBJECT
    assert "1 hour" in message.html_body
    code = notifier.recovery_code("alice@example.com")

    account = (await sign_in(client, "alice", alice)).json()
    assert account["is_password_reset_pending"] is True
    assert account["last_password_reset_request_at"] is not None

    response = await redeem(client, code, "NewP@ss1")
    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "message": "Password has been reset successfully",
    }

    assert (await sign_in(client, "alice", alice)).status_code == 401
    account = (await sign_in(client, "alice", "NewP@ss1")).json()
    assert account["is_password_reset_pending"] is False
    assert account["is_password_temporary"] is False


@pytest.mark.asyncio
async def test_code_can_be_redeemed_once(client, notifier, alice):
    await request_code(client, "alice@example.com")
    code = notifier.recovery_code("alice@example.com")

    assert (await redeem(client, code, "NewP@ss1")).status_code == 200
    second = await redeem(client, code, "Other#Pass2")

    assert second.status_code == 400
    assert second.json()["error"]["code"] == "INVALID_OR_EXPIRED"
    assert (await sign_in(client, "alice", "NewP@ss1")).status_code == 200


@pytest.mark.asyncio
async def test_new_request_invalidates_previous_code(client, notifier, alice):
    await request_code(client, "alice")
    first = notifier.recovery_code("alice@example.com")
    await request_code(client, "alice")
    second = notifier.recovery_code("alice@example.com")

    assert first != second
    assert (await redeem(client, first, "NewP@ss1")).status_code == 400
    assert (await redeem(client, second, "NewP@ss1")).status_code == 200


@pytest.mark.asyncio
async def test_expired_code_is_rejected(client, notifier, db_session, alice):
    await request_code(client, "alice")
    code = notifier.recovery_code("alice@example.com")

    accounts = AccountRepository(db_session)
    account = await accounts.get_by_username_or_email("alice")
    account.recovery_expires_at = utc_now() - timedelta(seconds=1)
    await accounts.update(account)
    await db_session.commit()
    db_session.expunge_all()

    response = await redeem(client, code, "NewP@ss1")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_OR_EXPIRED"
    assert (await sign_in(client, "alice", alice)).status_code == 200


@pytest.mark.asyncio
async def test_unknown_identifier_gets_same_answer(client, notifier, alice):
    known = await request_code(client, "alice")
    sent = len(notifier.messages)

    unknown = await request_code(client, "nobody")

    assert unknown.status_code == 200
    assert unknown.json() == known.json()
    assert len(notifier.messages) == sent


@pytest.mark.asyncio
async def test_unknown_code(client, alice):
    response = await redeem(client, "0000000000000000", "NewP@ss1")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_redeem_with_weak_password(client, notifier, alice):
    await request_code(client, "alice")
    code = notifier.recovery_code("alice@example.com")

    response = await redeem(client, code, "weakpassword")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ARGUMENT"
    assert (await redeem(client, code, "NewP@ss1")).status_code == 200
