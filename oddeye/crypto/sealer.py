"""
Odd Eye — Fingerprint Sealing Engine.

Seals serialized fingerprints with ChaCha20-Poly1305 under a single
long-lived 256-bit key.

Output layout::

    nonce (12 bytes) || ciphertext || tag (16 bytes)

A fresh random nonce is drawn for every call and no associated data is
bound. Consumers recover the plaintext out of band with the same key,
splitting the first 12 bytes off as the nonce.
"""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from oddeye.errors import SealingError, TimestampError
from oddeye.fingerprint.builder import Fingerprint
from oddeye.fingerprint.serializer import serialize_fingerprint

logger = logging.getLogger("oddeye.crypto.sealer")

KEY_SIZE = 32
NONCE_SIZE = 12  # 96 bits
TAG_SIZE = 16


class FingerprintSealer:
    """Holds the process-wide AEAD instance. Read-only after construction."""

    __slots__ = ("_aead",)

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_SIZE:
            raise ValueError(
                f"Encryption key is not exactly {KEY_SIZE} bytes. Key size = {len(key)}"
            )
        self._aead = ChaCha20Poly1305(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key=<redacted>)"

    def seal(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` and return ``nonce || ciphertext+tag``."""
        nonce = secrets.token_bytes(NONCE_SIZE)
        try:
            ciphertext = self._aead.encrypt(nonce, plaintext, None)
        except (OverflowError, ValueError, TypeError) as exc:
            raise SealingError("Fingerprint encryption failed") from exc
        return nonce + ciphertext


def seal_fingerprint(fp: Fingerprint, sealer: FingerprintSealer) -> bytes:
    """Serialize and seal a fingerprint in one step."""
    try:
        payload = serialize_fingerprint(fp)
    except TimestampError as exc:
        raise SealingError("Fingerprint timestamp cannot be serialized") from exc
    sealed = sealer.seal(payload)
    logger.debug("Sealed %d byte payload into %d bytes", len(payload), len(sealed))
    return sealed
