"""Domain exceptions for symcrypto."""


class SymcryptoError(Exception):
    """Base exception for symcrypto errors."""


class InvalidSecretError(SymcryptoError):
    """The secret is too short to derive a key from."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"invalid secret key: expected bytes length to be at least {expected}, got {got}")


class RandomnessUnavailableError(SymcryptoError):
    """The secure random source failed to produce a nonce."""

    def __init__(self) -> None:
        super().__init__("failed to generate nonce")


class DecodeError(SymcryptoError):
    """A token (or the payload it carries) could not be decoded."""

    def __init__(self, token: str, detail: str, encoding: str = "base64") -> None:
        self.token = token
        self.detail = detail
        self.encoding = encoding
        super().__init__(f"failed to decode {token!r} using {encoding}: {detail}")


class MalformedTokenError(SymcryptoError):
    """The decoded token is too short to contain a nonce and any ciphertext."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid encrypted message, {token!r} is too short")


class AuthenticationFailedError(SymcryptoError):
    """The token failed authentication (wrong key, corrupted or foreign token)."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"failed to decrypt {token!r}")
