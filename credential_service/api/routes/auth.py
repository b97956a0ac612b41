from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from credential_service.api.error import ClientError, ServerError, raise_for_error
from credential_service.app.services.credential_lifecycle_manager import (
    CredentialLifecycleManager,
)
from credential_service.app.use_cases.accounts import AccountResponse, StatusResponse
from credential_service.depends import get_lifecycle_manager
from credential_service.domain.entities import ErrorCode
from credential_service.libs.result import Error

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")

REDEEM_ERROR_STATUSES = {
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OR_EXPIRED: status.HTTP_400_BAD_REQUEST,
}

RECOVERY_REQUESTED_MESSAGE = (
    "If the account exists, a recovery code has been sent to its email address"
)


class SignInRequest(BaseModel):
    """
    Sign in HTTP request payload

    Validates incoming sign in request.
    """

    username_or_email: str = Field(..., min_length=1, max_length=255, description="Username or email")
    password: str = Field(..., min_length=1, description="Account password")


@router.post("/sign-in", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def sign_in(
    request: SignInRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Sign In

    Checks the credential and returns the account. Issues no session or token.

    Raises:
        - 401 Unauthorized: Unknown, inactive or wrong password, all reported alike
        - 500 Internal Server Error: Server error
    """
    result = await manager.sign_in(request.username_or_email, request.password)

    if result.is_err():
        error = result.error
        if error.code in (ErrorCode.NOT_FOUND, ErrorCode.UNAUTHORIZED, ErrorCode.INVALID_ARGUMENT):
            raise ClientError(INVALID_CREDENTIALS, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return AccountResponse.from_account(result.value)


class RecoveryCodeRequest(BaseModel):
    """
    Request recovery code HTTP request payload
    """

    username_or_email: str = Field(..., min_length=1, max_length=255, description="Username or email")


@router.post("/recovery-code", status_code=status.HTTP_200_OK, response_model=StatusResponse)
async def request_recovery_code(
    request: RecoveryCodeRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Request Recovery Code

    Issues a recovery code and mails it to the account's email address.

    Security:
        - No account enumeration (same response for known/unknown identifiers)

    Returns:
        - 200 OK: Always, unless the code could not be stored or sent
        - 500 Internal Server Error: Server error
    """
    result = await manager.request_recovery_code(request.username_or_email)

    if result.is_err():
        error = result.error
        if error.code != ErrorCode.NOT_FOUND:
            raise ServerError(error)

    return StatusResponse(status="sent", message=RECOVERY_REQUESTED_MESSAGE)


class RedeemRecoveryCodeRequest(BaseModel):
    """
    Redeem recovery code HTTP request payload
    """

    code: str = Field(..., min_length=1, max_length=16, description="Recovery code from email")
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post(
    "/recovery-code/redeem", status_code=status.HTTP_200_OK, response_model=StatusResponse
)
async def redeem_recovery_code(
    request: RedeemRecoveryCodeRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Redeem Recovery Code

    Sets a new password using a valid recovery code. The code works once.

    Raises:
        - 400 Bad Request: Invalid or expired code, or password too weak
        - 500 Internal Server Error: Server error
    """
    result = await manager.redeem_recovery_code(request.code, request.new_password)

    if result.is_err():
        raise_for_error(result.error, REDEEM_ERROR_STATUSES)

    return StatusResponse(status="success", message="Password has been reset successfully")
