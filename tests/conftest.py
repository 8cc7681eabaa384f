"""
Shared fixtures: a fixed key, settings and an out-of-band decryptor.
"""

import pytest
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from oddeye.config import Settings
from oddeye.crypto.sealer import FingerprintSealer, NONCE_SIZE

TEST_KEY = "0123456789abcdef0123456789abcdef"


def _unseal(sealed: bytes, key: bytes) -> bytes:
    """What a downstream consumer does: split the nonce off and decrypt."""
    if len(sealed) < NONCE_SIZE:
        raise ValueError(f"Sealed buffer too short: {len(sealed)} bytes")
    nonce, ciphertext = sealed[:NONCE_SIZE], sealed[NONCE_SIZE:]
    return ChaCha20Poly1305(key).decrypt(nonce, ciphertext, None)


@pytest.fixture
def key() -> bytes:
    return TEST_KEY.encode()


@pytest.fixture
def sealer(key: bytes) -> FingerprintSealer:
    return FingerprintSealer(key)


@pytest.fixture
def unseal(key: bytes):
    return lambda sealed: _unseal(sealed, key)


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from explicit values, ignoring the host env and .env."""
    for var in ("ODD_EYE_PORT", "ODD_EYE_DEBUG_ROUTES", "ODD_EYE_LOG_LEVEL", "ODD_EYE_HOST"):
        monkeypatch.delenv(var, raising=False)

    def _make(**overrides) -> Settings:
        values = {"encryption_key": TEST_KEY}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
