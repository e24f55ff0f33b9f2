"""Tests for key normalization."""

import pytest

from symcrypto.exceptions import InvalidSecretError
from symcrypto.keys import mid_bytes, normalize_key


@pytest.mark.parametrize(
    ("size", "expected_error"),
    [
        (0, "expected size to be at least 1, got 0"),
        (-1, "expected size to be at least 1, got -1"),
        (10, "expected bytes length to be at least 10, got 3"),
    ],
)
def test_mid_bytes_invalid_input(size: int, expected_error: str) -> None:
    with pytest.raises(ValueError) as exc_info:
        mid_bytes(b"abc", size)
    assert str(exc_info.value) == expected_error


@pytest.mark.parametrize(
    ("data", "size", "expected"),
    [
        (b"abcde", 5, b"abcde"),  # len == size
        (b"abcdef", 5, b"bcdef"),  # size + 1: drop one from the start
        (b"abcdef", 4, b"bcde"),  # size + 2
        (b"abcdef", 3, b"cde"),  # size + 3
        (b"abcdefg", 3, b"cde"),  # size + 4
    ],
)
def test_mid_bytes(data: bytes, size: int, expected: bytes) -> None:
    assert mid_bytes(data, size) == expected


def test_normalize_key_exact_length() -> None:
    """A 32-byte secret is used as the key unchanged."""
    secret = b"0123456789abcdef0123456789abcdef"
    assert normalize_key(secret) == secret


def test_normalize_key_takes_middle_bytes() -> None:
    """A 36-byte secret contributes bytes [2:34]."""
    secret = b"ab0123456789abcdef0123456789abcdefyz"
    assert len(secret) == 36
    assert normalize_key(secret) == secret[2:34]


def test_normalize_key_accepts_str() -> None:
    secret = "secret_key_with_string_length_32"
    assert normalize_key(secret) == secret.encode()


def test_normalize_key_counts_utf8_bytes() -> None:
    """Length is measured in encoded bytes, not characters."""
    secret = "é" * 16  # 16 characters, 32 bytes
    assert normalize_key(secret) == secret.encode("utf-8")


def test_normalize_key_is_deterministic() -> None:
    secret = "a-considerably-longer-secret-than-thirty-two-bytes"
    assert normalize_key(secret) == normalize_key(secret)


def test_normalize_key_shared_prefix_differs() -> None:
    """Secrets sharing their first 32 characters still produce different keys."""
    short = normalize_key("secret_key_with_string_length_32")
    longer = normalize_key("secret_key_with_string_length_32_and_then_some")
    assert short != longer


@pytest.mark.parametrize("secret", ["", "short", b"x" * 31])
def test_normalize_key_rejects_short_secret(secret: str | bytes) -> None:
    with pytest.raises(InvalidSecretError) as exc_info:
        normalize_key(secret)
    assert exc_info.value.expected == 32
    assert exc_info.value.got == len(secret)


def test_invalid_secret_message() -> None:
    with pytest.raises(InvalidSecretError, match="expected bytes length to be at least 32, got 0"):
        normalize_key("")
