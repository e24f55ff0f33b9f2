"""Unpadded URL-safe base64 for tokens."""

import base64
import binascii

from symcrypto.constants import LINE_BREAKS, TOKEN_ALPHABET
from symcrypto.exceptions import DecodeError


def encode_token(raw: bytes) -> str:
    """Encode *raw* as URL-safe base64 without ``=`` padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_token(token: str) -> bytes:
    """Decode an unpadded URL-safe base64 *token*.

    The standard library decoder silently accepts characters from the regular
    alphabet (``+`` and ``/``) and padding, so the alphabet is checked here
    first. Line breaks (CR and LF) are ignored so wrapped tokens still
    decode.

    Raises:
        DecodeError: If the token contains a character outside the URL-safe
            alphabet or has an impossible length.
    """
    for index, byte in enumerate(token.encode("utf-8", "surrogatepass")):
        if byte not in TOKEN_ALPHABET and byte not in LINE_BREAKS:
            raise DecodeError(token, f"illegal base64 data at input byte {index}")

    stripped = token.replace("\r", "").replace("\n", "")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as exc:
        raise DecodeError(token, str(exc)) from exc
