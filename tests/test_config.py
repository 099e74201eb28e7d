"""
Tests for settings validation.
"""

import pytest

from accounts.config import Settings, _int_env, settings
from accounts.exceptions import ConfigurationError


def test_int_env_default_and_value(monkeypatch):
    monkeypatch.delenv("ACCOUNTS_TEST_INT", raising=False)
    assert _int_env("ACCOUNTS_TEST_INT", 7) == 7

    monkeypatch.setenv("ACCOUNTS_TEST_INT", " ")
    assert _int_env("ACCOUNTS_TEST_INT", 7) == 7

    monkeypatch.setenv("ACCOUNTS_TEST_INT", "12")
    assert _int_env("ACCOUNTS_TEST_INT", 7) == 12


def test_int_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("ACCOUNTS_BCRYPT_ROUNDS", "twelve")

    with pytest.raises(ConfigurationError, match="must be an integer"):
        _int_env("ACCOUNTS_BCRYPT_ROUNDS", 12)


@pytest.mark.parametrize("rounds", [3, 32])
def test_settings_rejects_out_of_range_rounds(rounds):
    class OutOfRange(Settings):
        BCRYPT_ROUNDS = rounds

    with pytest.raises(ConfigurationError, match="between 4 and 31"):
        OutOfRange()


def test_settings_loaded_from_environment():
    assert 4 <= settings.BCRYPT_ROUNDS <= 31
    assert settings.USER_COLLECTION
