"""
Password hashing and strength checks (bcrypt).
"""

import logging
import re
from typing import Optional, Tuple

import bcrypt

from accounts.config import settings

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password
        rounds: log2 cost factor, defaults to the configured BCRYPT_ROUNDS

    Returns:
        bcrypt hash as a str (salt and cost are embedded)
    """
    if not password:
        raise ValueError("Password must not be empty")
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext candidate against a stored bcrypt hash.

    Returns False for empty input, a candidate longer than bcrypt accepts,
    or a malformed stored hash.
    """
    if not password or not password_hash:
        return False
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def is_password_strong(password: str) -> Tuple[bool, str]:
    """
    Check a password against the strength policy.

    Returns:
        (is_strong, reason) where reason is empty when the password passes
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False, f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
    if not re.search(r"[a-z]", password):
        return False, "Password must contain a lowercase letter"
    if not re.search(r"[A-Z]", password):
        return False, "Password must contain an uppercase letter"
    if not re.search(r"[0-9]", password):
        return False, "Password must contain a digit"
    if not re.search(r"[^a-zA-Z0-9]", password):
        return False, "Password must contain a symbol"
    return True, ""
