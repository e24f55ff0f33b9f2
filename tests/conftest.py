"""Shared fixtures for symcrypto tests."""

import pytest

from symcrypto import Crypter, new


@pytest.fixture
def secret() -> str:
    """A valid 32-character secret."""
    return "secret_key_with_string_length_32"


@pytest.fixture
def crypter(secret: str) -> Crypter:
    return new(secret)


@pytest.fixture
def other_crypter() -> Crypter:
    return new("some_other_different_secret_key_")
