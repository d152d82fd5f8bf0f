"""Shared RSA key fixtures. Key generation is slow, so keys are session scoped."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from wirecrypt import config


def _hex(value: int) -> str:
    text = f"{value:x}"
    return text if len(text) % 2 == 0 else "0" + text


@pytest.fixture(scope="session")
def server_private_key():
    """1024-bit key standing in for the service's private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture
def test_server_key(monkeypatch, server_private_key):
    """Swap the pinned server key for one we can decrypt with."""
    pem = server_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )
    monkeypatch.setattr(config, "SERVER_PUBLIC_KEY_PEM", pem)
    return server_private_key


@pytest.fixture(scope="session")
def credential_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def credential_key_hex(credential_private_key):
    """(modulus_hex, exponent_hex) as the server would send them."""
    numbers = credential_private_key.public_key().public_numbers()
    return _hex(numbers.n), _hex(numbers.e)
