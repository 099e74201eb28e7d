"""
Tests for password hashing and strength checks.
"""

import bcrypt
import pytest

from accounts.auth import hash_password, verify_password, is_password_strong


def test_password_hashing():
    """Test password hashing and verification."""
    password = "TestPassword123!"
    hashed = hash_password(password)

    assert hashed != password
    assert hashed.startswith("$2")
    assert verify_password(password, hashed) is True
    assert verify_password("wrong_password", hashed) is False


def test_hash_is_salted():
    """Two hashes of the same password differ but both verify."""
    first = hash_password("TestPassword123!")
    second = hash_password("TestPassword123!")

    assert first != second
    assert verify_password("TestPassword123!", first)
    assert verify_password("TestPassword123!", second)


def test_hash_uses_explicit_rounds():
    hashed = hash_password("TestPassword123!", rounds=5)
    assert hashed.split("$")[2] == "05"


def test_hash_empty_password_rejected():
    with pytest.raises(ValueError):
        hash_password("")


def test_verify_handles_bad_input():
    assert verify_password("", hash_password("TestPassword123!")) is False
    assert verify_password("TestPassword123!", "") is False
    assert verify_password("TestPassword123!", "not-a-bcrypt-hash") is False


def test_verify_accepts_hash_from_bcrypt_directly():
    stored = bcrypt.hashpw(b"TestPassword123!", bcrypt.gensalt(rounds=4)).decode()
    assert verify_password("TestPassword123!", stored) is True


def test_password_strength_validation():
    """Test password strength requirements."""
    # Weak passwords
    assert is_password_strong("short")[0] is False
    assert is_password_strong("nouppercase123!")[0] is False
    assert is_password_strong("NOLOWERCASE123!")[0] is False
    assert is_password_strong("NoDigits!")[0] is False
    assert is_password_strong("NoSpecial123")[0] is False
    assert is_password_strong("Aa1!" + "x" * 80)[0] is False

    # Strong password
    is_strong, reason = is_password_strong("StrongPass123!")
    assert is_strong is True
    assert reason == ""


def test_verify_rejects_overlong_candidate():
    hashed = hash_password("TestPassword123!")

    assert verify_password("TestPassword123!" + "x" * 80, hashed) is False
