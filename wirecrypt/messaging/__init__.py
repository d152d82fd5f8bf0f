# Messaging Module
"""
Payload protection after the handshake.

Frame format: [encrypted IV (16) | AES-256-CBC ciphertext]
"""

from .payload_cipher import (
    encrypt,
    decrypt,
    generate_hmac_iv,
    split_frame,
    frame_length,
)

__all__ = [
    'encrypt',
    'decrypt',
    'generate_hmac_iv',
    'split_frame',
    'frame_length',
]
