"""
Database module for user accounts.

Provides connection management, the User model and the UserDirectory service.
"""

from .connection import (
    close_database,
    ensure_indexes,
    get_user_collection,
    init_database,
    open_user_directory,
)
from .models import User
from .user_service import UserDirectory

__all__ = [
    "init_database",
    "close_database",
    "ensure_indexes",
    "get_user_collection",
    "open_user_directory",
    "User",
    "UserDirectory",
]
