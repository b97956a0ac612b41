"""
Account Use Case DTOs (Data Transfer Objects)

Commands carry validated caller intent into the use cases.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from credential_service.domain.entities import Account


class CreateAccountCommand(BaseModel):
    """
    Create account command

    No password is supplied: the system generates one and mails it.
    """

    username: str
    email: str
    role_id: int
    is_active: bool = True


class UpdateAccountCommand(BaseModel):
    """Update account command - only profile fields, never credentials"""

    account_id: int
    username: str
    email: str
    role_id: int


# ============================================================================
# Response DTOs
# ============================================================================


class AccountResponse(BaseModel):
    """Account as shown to callers - no salt, hash or recovery code"""

    id: int
    username: str
    email: str
    role_id: int
    is_active: bool
    is_password_temporary: bool
    is_password_reset_pending: bool
    last_password_change_at: Optional[datetime] = None
    last_password_reset_request_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            role_id=account.role_id,
            is_active=account.is_active,
            is_password_temporary=account.is_password_temporary,
            is_password_reset_pending=account.is_password_reset_pending,
            last_password_change_at=account.last_password_change_at,
            last_password_reset_request_at=account.last_password_reset_request_at,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AvailabilityResponse(BaseModel):
    """Response for availability check use case"""

    available: bool


class StatusResponse(BaseModel):
    """Response for operations that only report an outcome"""

    status: str
    message: str
