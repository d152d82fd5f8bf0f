"""
Payload Cipher

Symmetric protection of every payload exchanged after the handshake.

Frame Format:
    [encrypted IV (16 bytes) | AES-256-CBC ciphertext (N * 16 bytes, N >= 1)]

IV derivation (HMAC-IV):
    r      = random(3)
    digest = HMAC-SHA1(key[:16], r || plaintext)
    IV     = digest[:13] || r

Encryption:
- IV itself is encrypted with AES-256-ECB (no padding) under the session key
- Plaintext is encrypted with AES-256-CBC under the same key and the plain IV,
  PKCS#7 padded

Limitations:
- This is NOT authenticated encryption. The HMAC only makes the IV depend on
  the plaintext; it is never checked on decrypt. Invalid padding is the only
  tamper signal, so most bit flips in the ciphertext go undetected. Callers
  that need authenticity must add it on top. The scheme is kept as is for
  wire compatibility with the service.
"""

import hmac
import hashlib
import secrets
from typing import Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from .. import config
from ..errors import ValidationError, FrameError, PaddingError, BackendUnavailableError


# Constants
KEY_SIZE = config.SESSION_KEY_SIZE
BLOCK_SIZE = config.BLOCK_SIZE
MIN_FRAME_SIZE = 2 * BLOCK_SIZE     # encrypted IV + one padded block


def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValidationError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")


def _aes(key: bytes, mode: modes.Mode) -> Cipher:
    """Build an AES cipher, mapping backend gaps to BackendUnavailableError."""
    try:
        return Cipher(algorithms.AES(key), mode, backend=default_backend())
    except UnsupportedAlgorithm as e:
        raise BackendUnavailableError(f"AES mode not supported: {e}") from e


def generate_hmac_iv(plaintext: bytes, key: bytes) -> bytes:
    """
    Derive the 16-byte IV for one message.

    Args:
        plaintext: Message about to be encrypted
        key: 32-byte session key (first 16 bytes are the HMAC secret)

    Returns:
        13 bytes of HMAC-SHA1 digest followed by the 3 random bytes
    """
    _check_key(key)
    random_tail = secrets.token_bytes(config.IV_RANDOM_SIZE)

    mac = hmac.new(key[:config.HMAC_SECRET_SIZE], random_tail, hashlib.sha1)
    mac.update(plaintext)

    return mac.digest()[:config.IV_DIGEST_SIZE] + random_tail


def frame_length(plaintext_length: int) -> int:
    """Size of the frame produced for a plaintext of the given length."""
    return BLOCK_SIZE + (plaintext_length // BLOCK_SIZE + 1) * BLOCK_SIZE


def split_frame(frame: bytes) -> Tuple[bytes, bytes]:
    """
    Split a cipher frame into encrypted IV and ciphertext.

    Raises:
        FrameError: If the frame is too short or not block aligned
    """
    if len(frame) < MIN_FRAME_SIZE:
        raise FrameError(
            f"Frame must be at least {MIN_FRAME_SIZE} bytes, got {len(frame)}"
        )
    if len(frame) % BLOCK_SIZE:
        raise FrameError(
            f"Ciphertext length {len(frame) - BLOCK_SIZE} is not a multiple of {BLOCK_SIZE}"
        )
    return bytes(frame[:BLOCK_SIZE]), bytes(frame[BLOCK_SIZE:])


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """
    Encrypt a payload for the wire.

    Args:
        plaintext: Data to encrypt (may be empty)
        key: 32-byte session key

    Returns:
        encrypted IV || ciphertext
    """
    _check_key(key)
    iv = generate_hmac_iv(plaintext, key)

    iv_encryptor = _aes(key, modes.ECB()).encryptor()
    encrypted_iv = iv_encryptor.update(iv) + iv_encryptor.finalize()

    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = _aes(key, modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return encrypted_iv + ciphertext


def decrypt(frame: bytes, key: bytes) -> bytes:
    """
    Decrypt a payload received from the wire.

    Args:
        frame: encrypted IV || ciphertext
        key: 32-byte session key

    Returns:
        Decrypted plaintext

    Raises:
        FrameError: If the frame length is impossible
        PaddingError: If the block padding is invalid (corrupt or wrong key)
    """
    _check_key(key)
    encrypted_iv, ciphertext = split_frame(frame)

    iv_decryptor = _aes(key, modes.ECB()).decryptor()
    iv = iv_decryptor.update(encrypted_iv) + iv_decryptor.finalize()

    decryptor = _aes(key, modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError("Invalid padding - data is corrupt or the key is wrong") from e


# Self-test when run directly
if __name__ == "__main__":
    print("Payload Cipher Test")
    print("=" * 60)

    key = secrets.token_bytes(KEY_SIZE)
    for message in [b"", b"Hello, server!", b"a" * 10000]:
        frame = encrypt(message, key)
        passed = decrypt(frame, key) == message and len(frame) == frame_length(len(message))
        print(f"  {len(message):>5} bytes -> {len(frame):>5} byte frame "
              f"{'✓ PASS' if passed else '✗ FAIL'}")
