"""
Account Entity

The persisted credential record of a user.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import LargeBinary
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from credential_service.domain.time import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - a user's identity and stored credential.

    Business Rules:
    - Username and email are unique across all accounts
    - salt and password_hash are always written together (SHA-256, 32 bytes each)
    - recovery_code and recovery_expires_at are both set or both empty
    - A recovery code is usable only strictly before recovery_expires_at
    - Inactive accounts never sign in
    - Created only through the create-account use case
    """

    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    role_id: int = Field(default=0, index=True)

    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)

    salt: bytes = Field(sa_column=Column(LargeBinary(32), nullable=False))
    password_hash: bytes = Field(sa_column=Column(LargeBinary(32), nullable=False))

    # Password recovery
    recovery_code: Optional[str] = Field(default=None, index=True, max_length=16)
    recovery_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    is_password_reset_pending: bool = Field(default=False)
    is_password_temporary: bool = Field(default=True)

    is_active: bool = Field(default=True)

    # Timestamps
    last_password_change_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )
    last_password_reset_request_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_is_active", "is_active"),)

    def set_credentials(self, salt: bytes, password_hash: bytes, now: datetime) -> None:
        """Replace the stored credential and close any outstanding recovery"""
        self.salt = salt
        self.password_hash = password_hash
        self.recovery_code = None
        self.recovery_expires_at = None
        self.is_password_reset_pending = False
        self.is_password_temporary = False
        self.last_password_change_at = now
        self.updated_at = now

    def open_recovery(self, code: str, expires_at: datetime, now: datetime) -> None:
        self.recovery_code = code
        self.recovery_expires_at = expires_at
        self.is_password_reset_pending = True
        self.last_password_reset_request_at = now
        self.updated_at = now

    def is_recovery_code_valid(self, code: str, now: datetime) -> bool:
        return (
            self.recovery_code is not None
            and self.recovery_expires_at is not None
            and self.recovery_code == code
            and now < self.recovery_expires_at
        )
