# wirecrypt
"""
Client-side cryptography for a legacy binary service:
- Session key generation and RSA encapsulation
- HMAC-IV AES-256 payload encryption (unauthenticated, see payload_cipher)
- CRC32 checksum
- RSA PKCS#1 v1.5 credential encryption
"""

from .core_crypto.crc32 import checksum
from .handshake.session_key import SessionKey, generate_session_key
from .handshake.credentials import encrypt_credential
from .messaging.payload_cipher import encrypt, decrypt

__version__ = "1.0.0"

__all__ = [
    'SessionKey',
    'generate_session_key',
    'encrypt',
    'decrypt',
    'checksum',
    'encrypt_credential',
]
