"""URL-safe authenticated encryption of short strings under one secret."""

import logging
from collections.abc import Callable

import nacl.utils
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from symcrypto.constants import NONCE_LEN
from symcrypto.encoding import decode_token, encode_token
from symcrypto.exceptions import (
    AuthenticationFailedError,
    DecodeError,
    MalformedTokenError,
    RandomnessUnavailableError,
)
from symcrypto.keys import normalize_key

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


class Crypter:
    """Encrypts and decrypts strings with a key derived from a shared secret.

    Tokens are ``base64url_nopad(nonce || secretbox(message))``: a fresh random
    24-byte nonce followed by the XSalsa20-Poly1305 ciphertext and tag. Every
    call to :meth:`encrypt` draws a new nonce, so the same message never
    produces the same token twice.

    The only way to build an instance is through this constructor (or
    :func:`new`), which always runs the key normalizer. Instances are frozen
    once built and can be shared freely between threads.
    """

    __slots__ = ("_box", "_random_bytes", "_secret_key")

    def __init__(self, secret: str | bytes, *, random_bytes: RandomSource = nacl.utils.random) -> None:
        secret_key = normalize_key(secret)
        object.__setattr__(self, "_secret_key", secret_key)
        object.__setattr__(self, "_box", SecretBox(secret_key))
        object.__setattr__(self, "_random_bytes", random_bytes)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"

    def encrypt(self, message: str) -> str:
        """Encrypt *message* and return a URL-safe token.

        Raises:
            RandomnessUnavailableError: If the random source cannot supply a nonce.
        """
        return self.encrypt_bytes(message.encode("utf-8"))

    def encrypt_bytes(self, data: bytes) -> str:
        """Encrypt a raw byte payload and return a URL-safe token.

        Raises:
            RandomnessUnavailableError: If the random source cannot supply a nonce.
        """
        nonce = self._new_nonce()
        # EncryptedMessage is already nonce || ciphertext || tag
        sealed = self._box.encrypt(data, nonce)
        return encode_token(bytes(sealed))

    def decrypt(self, token: str) -> str:
        """Decrypt a token produced by :meth:`encrypt` and return the message.

        Raises:
            DecodeError: If the token is not valid unpadded URL-safe base64, or
                the authenticated payload is not valid UTF-8.
            MalformedTokenError: If the token is too short to hold a nonce and
                any ciphertext.
            AuthenticationFailedError: If the token was not sealed with this key
                or has been tampered with.
        """
        data = self.decrypt_bytes(token)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(token, exc.reason, encoding="utf-8") from exc

    def decrypt_bytes(self, token: str) -> bytes:
        """Decrypt a token and return the raw payload.

        Raises:
            DecodeError: If the token is not valid unpadded URL-safe base64.
            MalformedTokenError: If the token is too short to hold a nonce and
                any ciphertext.
            AuthenticationFailedError: If the token was not sealed with this key
                or has been tampered with.
        """
        try:
            raw = decode_token(token)
        except DecodeError:
            logger.debug("Rejected token of length %d: not URL-safe base64", len(token))
            raise

        if len(raw) <= NONCE_LEN:
            logger.debug("Rejected token of length %d: too short", len(token))
            raise MalformedTokenError(token)

        nonce, sealed = raw[:NONCE_LEN], raw[NONCE_LEN:]
        try:
            return self._box.decrypt(sealed, nonce)
        except CryptoError as exc:
            logger.debug("Rejected token of length %d: authentication failed", len(token))
            raise AuthenticationFailedError(token) from exc

    def _new_nonce(self) -> bytes:
        """Draw a fresh nonce from the random source."""
        try:
            nonce = self._random_bytes(NONCE_LEN)
        except Exception as exc:
            logger.error("Secure random source failed while generating a nonce")
            raise RandomnessUnavailableError() from exc

        if len(nonce) != NONCE_LEN:
            logger.error("Secure random source returned %d bytes, expected %d", len(nonce), NONCE_LEN)
            raise RandomnessUnavailableError()
        return bytes(nonce)


def new(secret: str | bytes, *, random_bytes: RandomSource = nacl.utils.random) -> Crypter:
    """Create a :class:`Crypter` for *secret*.

    Load the secret from a safe place. It must be at least 32 bytes long; if it
    is longer, the middle 32 bytes are used as the key. To turn a passphrase
    into a secret, hash it with scrypt, bcrypt or argon2 first.

    Raises:
        InvalidSecretError: If the secret is shorter than 32 bytes.
    """
    return Crypter(secret, random_bytes=random_bytes)
