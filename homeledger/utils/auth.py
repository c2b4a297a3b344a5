"""
Password hashing and token signing helpers.

Passwords are stored as bcrypt digests. Tokens are HS256 JWTs carrying the
user id in a ``userId`` claim and expiring after ``JWT_EXPIRES_SECONDS``.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from homeledger.config import settings

# bcrypt only reads the first 72 bytes of a password; newer releases raise
# instead of truncating, so longer input is cut here before hashing/checking.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Return the bcrypt digest of a plaintext password."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt digest."""
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))


def create_access_token(user_id: str, now: Optional[datetime] = None) -> str:
    """
    Sign a token asserting ``user_id``.

    Args:
        user_id: Identifier of the authenticated user
        now: Issue time, defaults to the current UTC time

    Returns:
        Encoded JWT string
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.JWT_EXPIRES_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Validate a token and return the user id it carries.

    Raises:
        jwt.InvalidTokenError: bad signature, malformed or expired token
    """
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    return payload["userId"]
