"""URL-safe authenticated encryption of short strings.

symcrypto encrypts small messages with NaCl secretbox (XSalsa20-Poly1305)
under a single shared secret and encodes the result as unpadded URL-safe
base64, so tokens can be used directly in URL paths and query strings.

Example::

    from symcrypto import new

    crypter = new("6368616e676520746869732070617373")
    token = crypter.encrypt("hello world")
    assert crypter.decrypt(token) == "hello world"
"""

from symcrypto.constants import NONCE_LEN, SECRET_KEY_LEN
from symcrypto.crypter import Crypter, new
from symcrypto.exceptions import (
    AuthenticationFailedError,
    DecodeError,
    InvalidSecretError,
    MalformedTokenError,
    RandomnessUnavailableError,
    SymcryptoError,
)
from symcrypto.keys import mid_bytes, normalize_key

__all__ = [
    "NONCE_LEN",
    "SECRET_KEY_LEN",
    "AuthenticationFailedError",
    "Crypter",
    "DecodeError",
    "InvalidSecretError",
    "MalformedTokenError",
    "RandomnessUnavailableError",
    "SymcryptoError",
    "mid_bytes",
    "new",
    "normalize_key",
]
