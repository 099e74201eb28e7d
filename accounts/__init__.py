"""
User account persistence: creation, lookup, authentication and
article authorship on top of a MongoDB collection.
"""

from accounts.database.models import User
from accounts.database.user_service import UserDirectory
from accounts.exceptions import (
    UserDirectoryError,
    ValidationError,
    ConflictError,
    NotFoundError,
    AuthenticationError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    "User",
    "UserDirectory",
    "UserDirectoryError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AuthenticationError",
    "PersistenceError",
    "ConfigurationError",
]
