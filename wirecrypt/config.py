"""
Configuration Constants

Pinned protocol constants for the legacy service this client talks to.

The fixed server public key and both RSA padding schemes are part of the
wire protocol. Changing them here is a reconfiguration of the library;
none of them are accepted as runtime arguments.
"""

from enum import Enum


class RSAPadding(Enum):
    """RSA encryption padding schemes understood by the service."""
    OAEP_SHA1 = "oaep-sha1"
    PKCS1V15 = "pkcs1v15"


# Symmetric sizes
SESSION_KEY_SIZE = 32       # AES-256 key
NONCE_SIZE = 16             # Server challenge appended to the session key
BLOCK_SIZE = 16             # AES block
HMAC_SECRET_SIZE = 16       # Leading bytes of the session key used for HMAC-IV
IV_RANDOM_SIZE = 3          # Random tail of the HMAC-IV
IV_DIGEST_SIZE = BLOCK_SIZE - IV_RANDOM_SIZE

# RSA
SERVER_KEY_BITS = 1024
ENCRYPTED_SESSION_KEY_SIZE = SERVER_KEY_BITS // 8
PKCS1V15_OVERHEAD = 11
MAX_MODULUS_BITS = 16384     # Largest modulus the crypto backend will encrypt with

# Padding used when wrapping the session key. This is the default the
# original client's crypto host applied when no padding was requested.
SESSION_KEY_PADDING = RSAPadding.OAEP_SHA1

# Padding used for credential encryption, always explicit.
CREDENTIAL_PADDING = RSAPadding.PKCS1V15

# Fixed "System" public key of the service (1024-bit, e = 17).
SERVER_PUBLIC_KEY_PEM = b"""-----BEGIN PUBLIC KEY-----
MIGdMA0GCSqGSIb3DQEBAQUAA4GLADCBhwKBgQDf7BrWLBBmLBc1OhSwfFkRf53T
2Ct64+AVzRkeRuh7h3SiGEYxqQMUeYKO6UWiSRKpI2hzic9pobFhRr3Bvr/WARvY
gdTckPv+T1JzZsuVcNfFjrocejN1oWI0Rrtgt4Bo+hOneoo3S57G9F1fOpn5nsQ6
6WOiu4gZKODnFMBCiQIBEQ==
-----END PUBLIC KEY-----
"""
