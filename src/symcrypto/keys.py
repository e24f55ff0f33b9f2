"""Secret key normalization.

Turns a caller-supplied secret of any length (at least ``SECRET_KEY_LEN``
bytes) into the fixed-size key used by the cipher.

The midpoint rule used here is *not* a key-derivation function. It adds no
entropy and does no mixing; it only tolerates secrets longer than the key
size, picking the middle bytes so that two secrets sharing a long common
prefix still tend to yield different keys. Secrets derived from passphrases
should go through a password hashing function (scrypt, bcrypt, argon2) before
they reach this module.
"""

import logging

from symcrypto.constants import SECRET_KEY_LEN
from symcrypto.exceptions import InvalidSecretError

logger = logging.getLogger(__name__)


def mid_bytes(data: bytes, size: int) -> bytes:
    """Return the middle *size* bytes of *data*.

    The slice starts at ``(len(data) - size + 1) // 2``, so when the surplus
    is odd the extra byte is dropped from the start.

    Raises:
        ValueError: If *size* is not positive or *data* is shorter than *size*.
    """
    if size <= 0:
        raise ValueError(f"expected size to be at least 1, got {size}")

    data_len = len(data)
    if data_len < size:
        raise ValueError(f"expected bytes length to be at least {size}, got {data_len}")

    start = (data_len - size + 1) // 2
    return data[start : start + size]


def normalize_key(secret: str | bytes) -> bytes:
    """Derive the ``SECRET_KEY_LEN``-byte cipher key from *secret*.

    ``str`` secrets are UTF-8 encoded first. A secret of exactly
    ``SECRET_KEY_LEN`` bytes is used as-is; a longer one contributes its
    middle bytes (see :func:`mid_bytes`).

    Raises:
        InvalidSecretError: If the secret is shorter than ``SECRET_KEY_LEN`` bytes.
    """
    raw = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)

    if len(raw) < SECRET_KEY_LEN:
        raise InvalidSecretError(expected=SECRET_KEY_LEN, got=len(raw))

    key = mid_bytes(raw, SECRET_KEY_LEN)
    logger.debug(
        "Derived %d-byte key from %d-byte secret (trimmed=%s)",
        len(key),
        len(raw),
        len(raw) > SECRET_KEY_LEN,
    )
    return key
