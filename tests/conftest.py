import os

# bcrypt's minimum cost keeps hashing fast; must be set before accounts is imported
os.environ.setdefault("ACCOUNTS_BCRYPT_ROUNDS", "4")

import pytest

from accounts.database.user_service import UserDirectory
from mocks.mongo_collection import MockCollection


STRONG_PASSWORD = "StrongPass123!"


@pytest.fixture
def users_collection():
    """An empty in-memory users collection with the unique email index."""
    return MockCollection(unique_fields=["email"])


@pytest.fixture
def directory(users_collection):
    """UserDirectory bound to the in-memory collection."""
    return UserDirectory(users_collection)


@pytest.fixture
def strong_password():
    return STRONG_PASSWORD
