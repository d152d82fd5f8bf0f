"""
Unit tests for Handshake modules.

Tests:
- Session key generation and encapsulation
- Credential encryption
"""

import base64
import os

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from wirecrypt import config
from wirecrypt.config import RSAPadding
from wirecrypt.handshake.session_key import SessionKey, generate_session_key
from wirecrypt.handshake.credentials import encrypt_credential


OAEP_SHA1 = padding.OAEP(
    mgf=padding.MGF1(algorithm=hashes.SHA1()),
    algorithm=hashes.SHA1(),
    label=None
)


class TestSessionKey:
    """Tests for session key generation against the real server key."""

    def test_sizes(self):
        key = generate_session_key(bytes(16))
        assert len(key.plain) == 32
        assert len(key.encrypted) == 128

    def test_returns_bytes(self):
        key = generate_session_key(bytes(16))
        assert isinstance(key.plain, bytes)
        assert isinstance(key.encrypted, bytes)

    def test_random_per_call(self):
        """Same nonce must still give fresh keys."""
        nonce = bytes(16)
        key1 = generate_session_key(nonce)
        key2 = generate_session_key(nonce)
        assert key1.plain != key2.plain
        assert key1.encrypted != key2.encrypted

    def test_different_nonces(self):
        key1 = generate_session_key(bytes.fromhex("0123456789abcdef0123456789abcdef"))
        key2 = generate_session_key(bytes.fromhex("fedcba9876543210fedcba9876543210"))
        assert len(key1.encrypted) == len(key2.encrypted) == 128

    def test_frozen(self):
        key = generate_session_key(bytes(16))
        with pytest.raises(AttributeError):
            key.plain = bytes(32)

    def test_repr_hides_plain_key(self):
        key = generate_session_key(bytes(16))
        assert key.plain.hex() not in repr(key)
        assert repr(key.plain) not in repr(key)


class TestSessionKeyEncapsulation:
    """Decrypt the wrapped key with a test server key swapped into config."""

    def test_wraps_plain_and_nonce(self, test_server_key):
        nonce = os.urandom(16)
        key = generate_session_key(nonce)
        recovered = test_server_key.decrypt(key.encrypted, OAEP_SHA1)
        assert recovered == key.plain + nonce

    def test_default_padding_is_oaep_sha1(self):
        assert config.SESSION_KEY_PADDING is RSAPadding.OAEP_SHA1

    def test_padding_is_reconfigurable(self, test_server_key, monkeypatch):
        monkeypatch.setattr(config, "SESSION_KEY_PADDING", RSAPadding.PKCS1V15)
        nonce = os.urandom(16)
        key = generate_session_key(nonce)
        recovered = test_server_key.decrypt(key.encrypted, padding.PKCS1v15())
        assert recovered == key.plain + nonce


class TestCredentialEncryption:
    """Tests for RSA PKCS#1 v1.5 credential encryption."""

    def _decrypt(self, private_key, encrypted: str) -> str:
        ciphertext = base64.b64decode(encrypted, validate=True)
        return private_key.decrypt(ciphertext, padding.PKCS1v15()).decode('utf-8')

    def test_returns_base64(self, credential_key_hex):
        encrypted = encrypt_credential("testpassword123", *credential_key_hex)
        assert isinstance(encrypted, str)
        assert len(base64.b64decode(encrypted, validate=True)) == 256

    def test_roundtrip(self, credential_private_key, credential_key_hex):
        encrypted = encrypt_credential("testpassword123", *credential_key_hex)
        assert self._decrypt(credential_private_key, encrypted) == "testpassword123"

    def test_randomised(self, credential_private_key, credential_key_hex):
        """PKCS#1 v1.5 padding is random, so ciphertexts differ."""
        encrypted1 = encrypt_credential("samepassword", *credential_key_hex)
        encrypted2 = encrypt_credential("samepassword", *credential_key_hex)
        assert encrypted1 != encrypted2
        assert self._decrypt(credential_private_key, encrypted1) == "samepassword"
        assert self._decrypt(credential_private_key, encrypted2) == "samepassword"

    def test_empty_secret(self, credential_private_key, credential_key_hex):
        encrypted = encrypt_credential("", *credential_key_hex)
        assert self._decrypt(credential_private_key, encrypted) == ""

    def test_special_characters(self, credential_private_key, credential_key_hex):
        secret = "p@ssw0rd!#$%^&*()"
        encrypted = encrypt_credential(secret, *credential_key_hex)
        assert self._decrypt(credential_private_key, encrypted) == secret

    def test_multibyte_characters(self, credential_private_key, credential_key_hex):
        secret = "密码🔐 ä"
        encrypted = encrypt_credential(secret, *credential_key_hex)
        assert self._decrypt(credential_private_key, encrypted) == secret

    def test_uppercase_hex(self, credential_private_key, credential_key_hex):
        modulus_hex, exponent_hex = credential_key_hex
        encrypted = encrypt_credential("secret", modulus_hex.upper(), exponent_hex.upper())
        assert self._decrypt(credential_private_key, encrypted) == "secret"

    def test_largest_fitting_secret(self, credential_private_key, credential_key_hex):
        secret = "a" * (256 - 11)
        encrypted = encrypt_credential(secret, *credential_key_hex)
        assert self._decrypt(credential_private_key, encrypted) == secret
