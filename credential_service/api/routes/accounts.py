from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import AfterValidator, BaseModel, EmailStr, Field, TypeAdapter, ValidationError

from credential_service.api.error import ClientError, raise_for_error
from credential_service.app.services.credential_lifecycle_manager import (
    CredentialLifecycleManager,
)
from credential_service.app.use_cases.accounts import (
    AccountResponse,
    AvailabilityResponse,
    CreateAccountCommand,
    StatusResponse,
    UpdateAccountCommand,
)
from credential_service.depends import get_lifecycle_manager
from credential_service.domain.entities import ErrorCode
from credential_service.libs.result import Error

router = APIRouter(prefix="/accounts", tags=["Accounts"])

ERROR_STATUSES = {
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

_email_format = TypeAdapter(EmailStr)


def check_email_format(value: str) -> str:
    """Validate the address but keep it exactly as given; lookups match it byte for byte"""
    try:
        _email_format.validate_python(value)
    except ValidationError:
        raise ValueError("value is not a valid email address") from None
    return value


AccountEmail = Annotated[str, AfterValidator(check_email_format)]


class CreateAccountRequest(BaseModel):
    """
    Create account HTTP request payload

    No password: one is generated and mailed to the account.
    """

    username: str = Field(..., min_length=1, max_length=50, description="Unique username")
    email: AccountEmail = Field(..., description="Unique email address")
    role_id: int = Field(..., ge=0, description="Role reference")
    is_active: bool = Field(default=True)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
async def create_account(
    request: CreateAccountRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Create Account

    Raises:
        - 400 Bad Request: Blank username or email
        - 409 Conflict: Username or email not available
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = CreateAccountCommand(
        username=request.username,
        email=request.email,
        role_id=request.role_id,
        is_active=request.is_active,
    )
    result = await manager.create_account(command)

    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)

    return AccountResponse.from_account(result.value)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AccountResponse])
async def list_accounts(
    is_active: Optional[bool] = Query(default=None),
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    result = await manager.list_accounts(is_active)
    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)
    return [AccountResponse.from_account(account) for account in result.value]


@router.get(
    "/availability", status_code=status.HTTP_200_OK, response_model=AvailabilityResponse
)
async def check_availability(
    username: str = Query(..., min_length=1),
    email: Optional[str] = Query(default=None),
    exclude_account_id: Optional[int] = Query(default=None),
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Check Availability

    Reports whether a username/email pair is free. An empty email is checked
    using the username in its place.
    """
    result = await manager.is_username_or_email_available(username, email, exclude_account_id)
    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)
    return AvailabilityResponse(available=result.value)


@router.get("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def get_account(
    account_id: int,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    result = await manager.get_account(account_id)

    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)

    return AccountResponse.from_account(result.value)


class UpdateAccountRequest(BaseModel):
    """Update account HTTP request payload"""

    username: str = Field(..., min_length=1, max_length=50)
    email: AccountEmail
    role_id: int = Field(..., ge=0)


@router.put("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def update_account(
    account_id: int,
    request: UpdateAccountRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Update Account

    Changes username, email and role. Credentials are not touched.

    Raises:
        - 404 Not Found: Account does not exist
        - 409 Conflict: Username or email not available
        - 500 Internal Server Error: Server error
    """
    command = UpdateAccountCommand(
        account_id=account_id,
        username=request.username,
        email=request.email,
        role_id=request.role_id,
    )
    result = await manager.update_account(command)

    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)

    return AccountResponse.from_account(result.value)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: int,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    result = await manager.delete_account(account_id)

    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)
    if not result.value:
        raise ClientError(
            Error(ErrorCode.NOT_FOUND, "Account not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post(
    "/{account_id}/password", status_code=status.HTTP_200_OK, response_model=StatusResponse
)
async def change_password(
    account_id: int,
    request: ChangePasswordRequest,
    manager: CredentialLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: Password does not meet complexity requirements
        - 404 Not Found: Account does not exist
        - 500 Internal Server Error: Server error or notification failure
    """
    result = await manager.change_password(account_id, request.new_password)

    if result.is_err():
        raise_for_error(result.error, ERROR_STATUSES)

    return StatusResponse(status="success", message="Password has been changed")
