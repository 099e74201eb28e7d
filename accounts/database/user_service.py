"""
User directory service: account creation, lookup, authentication and
article authorship against a MongoDB collection.
"""

import asyncio
import logging
from typing import Any, List, Optional

from pymongo.errors import DuplicateKeyError

from accounts.auth import hash_password, verify_password
from accounts.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
)
from accounts.utils.validation import (
    validate_email,
    validate_object_id,
    validate_password,
    validate_username,
)
from .models import User

logger = logging.getLogger(__name__)

# Verified against when no candidate record exists, so an unknown account
# costs the same bcrypt work as a wrong password. Built once, when the
# first UserDirectory is constructed.
_dummy_password_hash: Optional[str] = None


def _get_dummy_password_hash() -> str:
    global _dummy_password_hash
    if _dummy_password_hash is None:
        _dummy_password_hash = hash_password("DummyPassword1!")
    return _dummy_password_hash


class UserDirectory:
    """Service for user account operations.

    The collection is injected; every operation validates its input before
    touching the store and returns `User` objects with a string `id`.
    """

    def __init__(self, collection: Any):
        self.collection = collection
        self._dummy_password_hash = _get_dummy_password_hash()

    @staticmethod
    async def _run_blocking(func, *args):
        # bcrypt is CPU-bound; run it in the thread pool so the event loop keeps serving
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def create_user(self, email: str, username: str, password: str) -> User:
        """Create a new user account."""
        operation = "create_user"
        email = validate_email(email, operation)
        username = validate_username(username, operation)
        validate_password(password, operation)

        password_hash = await self._run_blocking(hash_password, password)
        document = {
            "email": email,
            "username": username,
            "password": password_hash,
            "articles": [],
        }

        # Fast path; the unique index on email is the authoritative check
        if await self.collection.find_one({"email": email}):
            logger.warning(f"User with email {email} already exists")
            raise ConflictError(f"user with email '{email}' already exists", operation=operation)

        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            logger.warning(f"User with email {email} already exists (rejected by unique index)")
            raise ConflictError(f"user with email '{email}' already exists", operation=operation)

        if not result.acknowledged or not result.inserted_id:
            logger.error(f"User {email} was not created: insert not acknowledged")
            raise PersistenceError(f"user with email '{email}' could not be created", operation=operation)

        created = await self.collection.find_one({"_id": result.inserted_id})
        if not created:
            logger.error(f"User {result.inserted_id} missing right after insert")
            raise PersistenceError(
                f"user '{result.inserted_id}' was not found after insert", operation=operation
            )

        logger.info(f"User {email} successfully created")
        return User.from_document(created)

    async def get_user_by_id(self, user_id: str) -> User:
        """Get user by ID."""
        operation = "get_user_by_id"
        object_id = validate_object_id(user_id, "id", operation)

        document = await self.collection.find_one({"_id": object_id})
        if not document:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError(f"user with id '{user_id}' not found", operation=operation)

        logger.info(f"User {user_id} retrieved from database")
        return User.from_document(document)

    async def get_all_users(self) -> List[User]:
        """Get every user, in store order."""
        documents = await self.collection.find({}).to_list(length=None)
        logger.debug(f"Retrieved {len(documents)} users from database")
        return User.from_documents(documents)

    async def delete_user_by_id(self, user_id: str) -> User:
        """Delete a user and return the record as it was before deletion."""
        operation = "delete_user_by_id"
        object_id = validate_object_id(user_id, "id", operation)

        document = await self.collection.find_one({"_id": object_id})
        if not document:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError(f"user with id '{user_id}' not found", operation=operation)

        result = await self.collection.delete_one({"_id": object_id})
        if not result.acknowledged:
            logger.error(f"Delete of user {user_id} not acknowledged")
            raise PersistenceError(f"user with id '{user_id}' could not be deleted", operation=operation)
        if result.deleted_count == 0:
            # Removed by someone else between the lookup and the delete
            logger.warning(f"User {user_id} disappeared before it could be deleted")
            raise NotFoundError(f"user with id '{user_id}' not found", operation=operation)
        if result.deleted_count != 1:
            raise PersistenceError(
                f"expected to delete 1 user, deleted {result.deleted_count}", operation=operation
            )

        logger.info(f"User {user_id} deleted from database")
        return User.from_document(document)

    async def add_article_to_author(self, user_id: str, article_id: str) -> User:
        """
        Record `article_id` as authored by `user_id`.

        Adding an article the user already has is a no-op and still succeeds.
        """
        operation = "add_article_to_author"
        object_id = validate_object_id(user_id, "user_id", operation)
        validate_object_id(article_id, "article_id", operation)

        result = await self.collection.update_one(
            {"_id": object_id},
            {"$addToSet": {"articles": article_id}},
        )
        if result.matched_count == 0:
            logger.warning(f"Article {article_id} not added: user {user_id} does not exist")
            raise PersistenceError(
                f"article '{article_id}' could not be added to user '{user_id}'", operation=operation
            )
        if result.modified_count == 0:
            logger.info(f"Article {article_id} already recorded for user {user_id}")

        document = await self.collection.find_one({"_id": object_id})
        if not document:
            logger.error(f"User {user_id} missing right after update")
            raise PersistenceError(f"user '{user_id}' was not found after update", operation=operation)

        logger.info(f"Article {article_id} added to user {user_id}")
        return User.from_document(document)

    async def authenticate_by_email(self, email: str, password: str) -> User:
        """Return the user whose email and password match."""
        operation = "authenticate_by_email"
        email = validate_email(email, operation)

        candidates = await self.collection.find({"email": email}).to_list(length=None)
        user = await self._first_verified(candidates, password)
        if user is None:
            logger.warning(f"Authentication failed for email {email}")
            raise AuthenticationError("email/password combination not found", operation=operation)

        logger.info(f"Validated user with email {email}")
        return user

    async def authenticate_by_username(self, username: str, password: str) -> User:
        """Return the first user with this username whose password matches."""
        operation = "authenticate_by_username"
        username = validate_username(username, operation)

        candidates = await self.collection.find({"username": username}).to_list(length=None)
        user = await self._first_verified(candidates, password)
        if user is None:
            logger.warning(f"Authentication failed for username {username}")
            raise AuthenticationError("username/password combination not found", operation=operation)

        logger.info(f"Validated user with username {username}")
        return user

    async def _first_verified(self, candidates: List[dict], password: str) -> Optional[User]:
        if not candidates:
            await self._run_blocking(verify_password, password or "", self._dummy_password_hash)
            return None
        for candidate in candidates:
            if await self._run_blocking(verify_password, password, candidate.get("password", "")):
                return User.from_document(candidate)
        return None
