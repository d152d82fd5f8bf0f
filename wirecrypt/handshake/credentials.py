"""
Credential Encryption

Encrypts a login secret for the service with the RSA key it hands out
alongside the login challenge (modulus and exponent as hex text).

Padding is PKCS#1 v1.5, selected explicitly. Because that padding is
randomised, two calls with the same input give different ciphertexts.
"""

import base64

from cryptography.exceptions import UnsupportedAlgorithm

from .. import config
from ..core_crypto.rsa_keys import public_key_from_hex, rsa_padding, max_plaintext_size
from ..errors import ValidationError, CredentialTooLargeError, BackendUnavailableError


def encrypt_credential(secret: str, modulus_hex: str, exponent_hex: str) -> str:
    """
    RSA-encrypt a credential string.

    Args:
        secret: Credential text, encoded as UTF-8
        modulus_hex: Server modulus as big-endian hex
        exponent_hex: Server public exponent as big-endian hex

    Returns:
        Base64 text of the ciphertext

    Raises:
        ValidationError: If the key material is malformed
        CredentialTooLargeError: If the encoded secret does not fit the key
    """
    if not isinstance(secret, str):
        raise ValidationError("Credential must be a string")

    public_key = public_key_from_hex(modulus_hex, exponent_hex)
    plaintext = secret.encode('utf-8')

    limit = max_plaintext_size(public_key.key_size, config.CREDENTIAL_PADDING)
    if limit < 0:
        raise ValidationError(
            f"{public_key.key_size}-bit modulus is too small for PKCS#1 v1.5 padding"
        )
    if len(plaintext) > limit:
        raise CredentialTooLargeError(
            f"Credential is {len(plaintext)} bytes, key allows at most {limit}"
        )

    try:
        ciphertext = public_key.encrypt(plaintext, rsa_padding(config.CREDENTIAL_PADDING))
    except UnsupportedAlgorithm as e:
        raise BackendUnavailableError(f"RSA padding not supported: {e}") from e
    except ValueError as e:
        raise ValidationError(f"RSA encryption rejected the key: {e}") from e

    return base64.b64encode(ciphertext).decode('ascii')
