"""
Password Hasher

Salt generation, salted SHA-256 password hashing, constant-time verification
and generation of system passwords.

Passwords are encoded as UTF-16-LE before hashing so that credentials written
by the previous system keep verifying.
"""

import hashlib
import hmac
import secrets
import string
from typing import Optional

SALT_SIZE = 32
HASH_SIZE = 32
MIN_GENERATED_PASSWORD_LENGTH = 6
PASSWORD_ENCODING = "utf-16-le"

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[]{}|;:,.<>?"
ALL_CHARACTERS = LOWERCASE + UPPERCASE + DIGITS + SPECIAL_CHARACTERS

_random = secrets.SystemRandom()


class InvalidArgumentError(ValueError):
    """Raised for absent or malformed hasher inputs"""


def generate_salt() -> bytes:
    """Return SALT_SIZE bytes from the OS CSPRNG"""
    return secrets.token_bytes(SALT_SIZE)


def hash_password(salt: Optional[bytes], password: Optional[str]) -> bytes:
    """
    Hash a password with its salt.

    Args:
        salt: Per-account salt
        password: Plain text password

    Returns:
        32-byte SHA-256 digest of salt + encoded password

    Raises:
        InvalidArgumentError: salt or password is missing, or salt is empty
    """
    if salt is None:
        raise InvalidArgumentError("salt is required")
    if password is None:
        raise InvalidArgumentError("password is required")
    if len(salt) == 0:
        raise InvalidArgumentError("salt must not be empty")

    return hashlib.sha256(salt + password.encode(PASSWORD_ENCODING)).digest()


def verify_password(
    salt: Optional[bytes], stored_hash: Optional[bytes], password: Optional[str]
) -> bool:
    """Recompute the hash and compare it to stored_hash in constant time"""
    if stored_hash is None:
        raise InvalidArgumentError("stored hash is required")

    candidate = hash_password(salt, password)
    return hmac.compare_digest(candidate, bytes(stored_hash))


def generate_password(length: int = 8) -> str:
    """
    Generate a random password.

    The result holds at least one lowercase letter, one uppercase letter, one
    digit and one special character; the rest are drawn from all four classes
    and the whole sequence is shuffled.

    Raises:
        InvalidArgumentError: length is below 6
    """
    if length < MIN_GENERATED_PASSWORD_LENGTH:
        raise InvalidArgumentError(
            f"password length must be at least {MIN_GENERATED_PASSWORD_LENGTH}"
        )

    characters = [
        secrets.choice(LOWERCASE),
        secrets.choice(UPPERCASE),
        secrets.choice(DIGITS),
        secrets.choice(SPECIAL_CHARACTERS),
    ]
    characters.extend(secrets.choice(ALL_CHARACTERS) for _ in range(length - 4))
    _random.shuffle(characters)

    return "".join(characters)
