"""
Input validation utilities for user directory operations.

Each validate_* function returns the normalized value or raises
ValidationError naming the offending field.
"""

import re
from typing import Optional

from bson import ObjectId

from accounts.auth.password import is_password_strong
from accounts.exceptions import ValidationError


# Common validation patterns
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9]+$')
MAX_EMAIL_LENGTH = 254


def is_email(value: str) -> bool:
    return bool(value) and len(value) <= MAX_EMAIL_LENGTH and EMAIL_PATTERN.match(value) is not None


def is_alphanumeric(value: str) -> bool:
    return bool(value) and USERNAME_PATTERN.match(value) is not None


def is_object_id(value: str) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def validate_email(email: str, operation: Optional[str] = None) -> str:
    """
    Validate email address format.

    Args:
        email: Email address to validate
        operation: Name of the calling operation, for error context

    Returns:
        Normalized email address (trimmed, lowercase)

    Raises:
        ValidationError: If email is invalid
    """
    normalized = (email or "").strip().lower()
    if not is_email(normalized):
        raise ValidationError("email", email, f"'{email}' is not a valid email", operation=operation)
    return normalized


def validate_username(username: str, operation: Optional[str] = None) -> str:
    """
    Validate a username: letters and digits only.

    Returns:
        Trimmed username

    Raises:
        ValidationError: If username is empty or not alphanumeric
    """
    normalized = (username or "").strip()
    if not is_alphanumeric(normalized):
        raise ValidationError("username", username, f"'{username}' is not a valid username", operation=operation)
    return normalized


def validate_password(password: str, operation: Optional[str] = None) -> str:
    """Check password strength. The value is never echoed back in the error."""
    is_strong, reason = is_password_strong(password or "")
    if not is_strong:
        raise ValidationError("password", "***", f"password is not strong enough: {reason}", operation=operation)
    return password


def validate_object_id(value: str, field: str = "id", operation: Optional[str] = None) -> ObjectId:
    """
    Validate a store identifier given as a string.

    Returns:
        The parsed ObjectId

    Raises:
        ValidationError: If value is not a 24-character hex identifier
    """
    if not is_object_id(value):
        raise ValidationError(field, value, f"'{value}' is not a valid ObjectId", operation=operation)
    return ObjectId(value)
