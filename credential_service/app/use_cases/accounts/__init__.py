"""
Account Use Cases

Credential lifecycle business logic: account creation, sign in, password
change, recovery codes and profile maintenance.
"""

from .create_account_use_case import CreateAccountUseCase
from .sign_in_use_case import SignInUseCase
from .change_password_use_case import ChangePasswordUseCase, validate_new_password
from .request_recovery_code_use_case import (
    RequestRecoveryCodeUseCase,
    generate_recovery_code,
)
from .redeem_recovery_code_use_case import RedeemRecoveryCodeUseCase
from .check_availability_use_case import (
    CheckAvailabilityUseCase,
    is_username_or_email_available,
)
from .update_account_use_case import UpdateAccountUseCase
from .get_account_use_case import GetAccountUseCase, ListAccountsUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .dtos import (
    CreateAccountCommand,
    UpdateAccountCommand,
    AccountResponse,
    AvailabilityResponse,
    StatusResponse,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "SignInUseCase",
    "ChangePasswordUseCase",
    "RequestRecoveryCodeUseCase",
    "RedeemRecoveryCodeUseCase",
    "CheckAvailabilityUseCase",
    "UpdateAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "DeleteAccountUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "UpdateAccountCommand",
    # DTOs - Responses
    "AccountResponse",
    "AvailabilityResponse",
    "StatusResponse",
    # Helpers
    "validate_new_password",
    "generate_recovery_code",
    "is_username_or_email_available",
]
