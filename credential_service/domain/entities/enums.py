"""
Credential Service Domain Enums
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Failure kinds returned by the credential lifecycle use cases"""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_OR_EXPIRED = "INVALID_OR_EXPIRED"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    DELIVERY_FAILED = "DELIVERY_FAILED"
