"""
Use Cases

Organized by domain folder:
- accounts/: Credential lifecycle
"""

from .accounts import (
    CreateAccountUseCase,
    SignInUseCase,
    ChangePasswordUseCase,
    RequestRecoveryCodeUseCase,
    RedeemRecoveryCodeUseCase,
    CheckAvailabilityUseCase,
    UpdateAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    DeleteAccountUseCase,
    CreateAccountCommand,
    UpdateAccountCommand,
)

__all__ = [
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
    "CreateAccountCommand",
    "UpdateAccountCommand",
]
