"""Centralized constants for symcrypto."""

from nacl.secret import SecretBox

# --- Key material ---

# Minimum secret length accepted by the key normalizer. NaCl secretbox keys are 32 bytes.
SECRET_KEY_LEN = SecretBox.KEY_SIZE

# --- Token layout ---

NONCE_LEN = SecretBox.NONCE_SIZE  # 24 bytes, prefixed to every token

# Unpadded URL-safe base64 alphabet (RFC 4648 §5)
TOKEN_ALPHABET = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")

# Skipped when decoding, matching decoders that accept line-wrapped base64
LINE_BREAKS = frozenset(b"\r\n")
