from datetime import timedelta

from pydantic import BaseModel, Field


class CredentialPolicy(BaseModel):
    """
    Rules applied by the credential lifecycle use cases.

    Built from ApplicationConfig at startup and passed in explicitly.
    """

    recovery_code_validity: timedelta = timedelta(hours=1)
    generated_password_length: int = Field(default=8, ge=6)
    # When True a failed notification fails the operation that triggered it
    notification_failure_is_fatal: bool = True
