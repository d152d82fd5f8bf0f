# Handshake Module
"""
Handshake primitives:
- Session key generation wrapped for the fixed server key
- Credential encryption for a server-supplied RSA key
"""

from .session_key import SessionKey, generate_session_key, server_public_key
from .credentials import encrypt_credential

__all__ = [
    'SessionKey',
    'generate_session_key',
    'server_public_key',
    'encrypt_credential',
]
