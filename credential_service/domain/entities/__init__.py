"""
Credential Service Domain Entities
"""

from .enums import ErrorCode
from .account import Account

__all__ = [
    # Enums
    "ErrorCode",
    # Entities
    "Account",
]
