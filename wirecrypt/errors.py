"""
Exception hierarchy for wirecrypt.

Three kinds of failure are kept apart so callers can tell bad arguments
from corrupt data:

- ValidationError: the caller passed something malformed
- IntegrityError: a received frame could not be decrypted
- ConfigurationError / BackendUnavailableError: fatal, never retried
"""


class WirecryptError(Exception):
    """Base class for all wirecrypt errors."""


class ValidationError(WirecryptError, ValueError):
    """Raised when an argument has the wrong size or format."""


class CredentialTooLargeError(ValidationError):
    """Raised when a credential does not fit in one RSA block."""


class IntegrityError(WirecryptError):
    """Raised when a cipher frame is corrupt or has been tampered with."""


class FrameError(IntegrityError):
    """Raised when a cipher frame has an impossible length."""


class PaddingError(IntegrityError):
    """Raised when decrypted data carries invalid block padding."""


class ConfigurationError(WirecryptError, RuntimeError):
    """Raised when pinned configuration (server key, padding) is unusable."""


class BackendUnavailableError(WirecryptError, RuntimeError):
    """Raised when the crypto backend lacks a required primitive."""
