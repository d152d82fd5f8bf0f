"""
Session Key Encapsulation

Generates the per-connection symmetric key and wraps it for the service:

    encrypted = RSA_encrypt(server_key, plain || nonce)

- plain: 32 random bytes (AES-256 key for all payload traffic)
- nonce: 16-byte challenge sent by the server
- encrypted: 128 bytes (1024-bit server key)

The padding is pinned by config.SESSION_KEY_PADDING and is deliberately
independent from the credential padding.

The library does not zero `plain`; the caller owns its lifetime.
"""

import secrets
from dataclasses import dataclass, field

from cryptography.exceptions import UnsupportedAlgorithm

from .. import config
from ..core_crypto.rsa_keys import load_public_key_pem, rsa_padding
from ..errors import ValidationError, BackendUnavailableError


@dataclass(frozen=True)
class SessionKey:
    """Symmetric session key and its RSA-wrapped form."""
    plain: bytes = field(repr=False)      # 32 bytes
    encrypted: bytes                      # 128 bytes

    def __post_init__(self):
        if len(self.plain) != config.SESSION_KEY_SIZE:
            raise ValidationError(
                f"Session key must be {config.SESSION_KEY_SIZE} bytes, got {len(self.plain)}"
            )
        if len(self.encrypted) != config.ENCRYPTED_SESSION_KEY_SIZE:
            raise ValidationError(
                f"Encrypted session key must be {config.ENCRYPTED_SESSION_KEY_SIZE} bytes, "
                f"got {len(self.encrypted)}"
            )


def server_public_key():
    """Return the parsed fixed server key (cached per PEM value)."""
    return load_public_key_pem(config.SERVER_PUBLIC_KEY_PEM, config.SERVER_KEY_BITS)


def generate_session_key(nonce: bytes) -> SessionKey:
    """
    Generate a session key and encrypt it for the server.

    Args:
        nonce: 16-byte challenge from the server

    Returns:
        SessionKey with the plain key and its encrypted form

    Raises:
        ValidationError: If nonce is not 16 bytes
    """
    if not isinstance(nonce, (bytes, bytearray, memoryview)):
        raise ValidationError("Nonce must be bytes")
    if len(nonce) != config.NONCE_SIZE:
        raise ValidationError(
            f"Nonce must be {config.NONCE_SIZE} bytes, got {len(nonce)}"
        )

    public_key = server_public_key()
    plain = secrets.token_bytes(config.SESSION_KEY_SIZE)

    try:
        encrypted = public_key.encrypt(
            plain + bytes(nonce),
            rsa_padding(config.SESSION_KEY_PADDING)
        )
    except UnsupportedAlgorithm as e:
        raise BackendUnavailableError(f"RSA padding not supported: {e}") from e

    return SessionKey(plain=plain, encrypted=encrypted)
