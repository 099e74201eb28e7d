"""
Domain exceptions for the user directory.
"""

from typing import Any, Optional


class UserDirectoryError(Exception):
    """Base exception for all user directory errors."""
    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class ValidationError(UserDirectoryError):
    """Raised when caller input is malformed. Checked before any store access."""
    def __init__(self, field: str, value: Any, message: str, operation: Optional[str] = None):
        super().__init__(message, operation=operation)
        self.field = field
        self.value = value


class ConflictError(UserDirectoryError):
    """Raised when a create would violate email uniqueness."""
    pass


class NotFoundError(UserDirectoryError):
    """Raised when no record exists for a given identifier."""
    pass


class AuthenticationError(UserDirectoryError):
    """Raised when a credential pair does not match any record."""
    pass


class PersistenceError(UserDirectoryError):
    """Raised when the store does not acknowledge the expected effect of a write."""
    pass


class ConfigurationError(UserDirectoryError):
    """Raised when settings are invalid or the store is used before initialization."""
    pass
