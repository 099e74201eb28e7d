"""
Configuration module for the accounts package.

Values come from the process environment (optionally seeded from a .env
file) and are read once at import.
"""

import os
import logging

from dotenv import load_dotenv

from accounts.exceptions import ConfigurationError

load_dotenv()

# Configure baseline logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# bcrypt accepts log2 rounds in this range
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'")


class Settings:
    # Store
    MONGO_URL: str = os.getenv("ACCOUNTS_MONGO_URL", "mongodb://localhost:27017")
    DATABASE_NAME: str = os.getenv("ACCOUNTS_DATABASE_NAME", "accounts")
    USER_COLLECTION: str = os.getenv("ACCOUNTS_USER_COLLECTION", "users")
    SERVER_SELECTION_TIMEOUT_MS: int = _int_env("ACCOUNTS_SERVER_SELECTION_TIMEOUT_MS", 5000)

    # Password hashing cost factor, fixed for the life of the process
    BCRYPT_ROUNDS: int = _int_env("ACCOUNTS_BCRYPT_ROUNDS", 12)

    def __init__(self) -> None:
        if not MIN_BCRYPT_ROUNDS <= self.BCRYPT_ROUNDS <= MAX_BCRYPT_ROUNDS:
            raise ConfigurationError(
                f"ACCOUNTS_BCRYPT_ROUNDS must be between {MIN_BCRYPT_ROUNDS} and "
                f"{MAX_BCRYPT_ROUNDS}, got {self.BCRYPT_ROUNDS}"
            )


settings = Settings()

__all__ = ["Settings", "settings", "MIN_BCRYPT_ROUNDS", "MAX_BCRYPT_ROUNDS"]
