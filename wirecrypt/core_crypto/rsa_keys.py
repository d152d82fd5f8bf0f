"""
RSA Key Helpers

Loading and construction of RSA public keys plus the padding objects for
each pinned padding scheme. Used by both the session-key path and the
credential path, which pick their scheme independently.
"""

import re
from functools import lru_cache

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.backends import default_backend

from ..config import RSAPadding, PKCS1V15_OVERHEAD, MAX_MODULUS_BITS
from ..errors import ValidationError, ConfigurationError, BackendUnavailableError


_HEX_PATTERN = re.compile(r'[0-9a-fA-F]+')


def rsa_padding(scheme: RSAPadding) -> padding.AsymmetricPadding:
    """
    Build the padding object for a pinned scheme.

    Args:
        scheme: One of the RSAPadding members

    Returns:
        cryptography padding instance
    """
    if scheme is RSAPadding.OAEP_SHA1:
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA1()),
            algorithm=hashes.SHA1(),
            label=None
        )
    if scheme is RSAPadding.PKCS1V15:
        return padding.PKCS1v15()
    raise ConfigurationError(f"Unknown RSA padding scheme: {scheme!r}")


def max_plaintext_size(key_size_bits: int, scheme: RSAPadding) -> int:
    """Largest message that fits in one RSA block under `scheme`."""
    key_bytes = (key_size_bits + 7) // 8
    if scheme is RSAPadding.OAEP_SHA1:
        # 2 * SHA-1 digest + 2
        return key_bytes - 2 * 20 - 2
    if scheme is RSAPadding.PKCS1V15:
        return key_bytes - PKCS1V15_OVERHEAD
    raise ConfigurationError(f"Unknown RSA padding scheme: {scheme!r}")


@lru_cache(maxsize=8)
def load_public_key_pem(pem: bytes, expected_bits: int) -> rsa.RSAPublicKey:
    """
    Parse a PEM public key once and check its size.

    Args:
        pem: SubjectPublicKeyInfo PEM bytes
        expected_bits: Required modulus size

    Returns:
        RSA public key

    Raises:
        ConfigurationError: If the PEM is not an RSA key of the expected size
    """
    try:
        key = serialization.load_pem_public_key(pem, backend=default_backend())
    except ValueError as e:
        raise ConfigurationError(f"Server public key is not valid PEM: {e}") from e
    except UnsupportedAlgorithm as e:
        raise BackendUnavailableError(f"Cannot load server public key: {e}") from e

    if not isinstance(key, rsa.RSAPublicKey):
        raise ConfigurationError("Server public key is not an RSA key")
    if key.key_size != expected_bits:
        raise ConfigurationError(
            f"Server public key must be {expected_bits} bits, got {key.key_size}"
        )
    return key


def parse_hex_integer(text: str, name: str) -> int:
    """
    Decode big-endian hexadecimal text into an unsigned integer.

    Raises:
        ValidationError: If the text is empty, odd length or not hex
    """
    if not isinstance(text, str):
        raise ValidationError(f"{name} must be a hex string")
    if not _HEX_PATTERN.fullmatch(text):
        raise ValidationError(f"{name} contains non-hex characters")
    if len(text) % 2:
        raise ValidationError(f"{name} has odd length")
    return int.from_bytes(bytes.fromhex(text), byteorder='big')


def public_key_from_hex(modulus_hex: str, exponent_hex: str) -> rsa.RSAPublicKey:
    """
    Build an RSA public key from hex modulus and exponent.

    Args:
        modulus_hex: Modulus as big-endian hex
        exponent_hex: Public exponent as big-endian hex

    Returns:
        RSA public key
    """
    modulus = parse_hex_integer(modulus_hex, "modulus")
    exponent = parse_hex_integer(exponent_hex, "exponent")
    if modulus.bit_length() > MAX_MODULUS_BITS:
        raise ValidationError(
            f"Modulus is {modulus.bit_length()} bits, at most {MAX_MODULUS_BITS} supported"
        )

    try:
        return rsa.RSAPublicNumbers(exponent, modulus).public_key(default_backend())
    except ValueError as e:
        raise ValidationError(f"Invalid RSA key components: {e}") from e
    except UnsupportedAlgorithm as e:
        raise BackendUnavailableError(f"Cannot build RSA key: {e}") from e
