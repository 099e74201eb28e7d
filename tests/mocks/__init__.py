# Mock Services Package
# Provides mock implementations of external services for testing

from .mongo_collection import MockCollection, MockCursor

__all__ = [
    "MockCollection",
    "MockCursor",
]
