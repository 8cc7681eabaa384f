"""
Odd Eye — Passive Fingerprint Builder.

Extracts the edge-supplied fingerprint headers, the User-Agent and the
shape of the header set from a single request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Tuple

logger = logging.getLogger("oddeye.fingerprint")

HTTP_FINGERPRINT_HEADER = "x-http-fingerprint"
TLS_FINGERPRINT_HEADER = "x-tls-fingerprint"
TLS_FINGERPRINT_HASH_HEADER = "x-tls-fingerprint-hash"
USER_AGENT_HEADER = "user-agent"

# Populated by the edge proxy and consumed here, never reported as residual
CONSUMED_HEADERS = frozenset({
    HTTP_FINGERPRINT_HEADER,
    TLS_FINGERPRINT_HEADER,
    TLS_FINGERPRINT_HASH_HEADER,
})

RawHeaders = Iterable[Tuple[bytes, bytes]]


@dataclass
class PassiveFingerprint:
    """Identification signals carried by one request."""

    http: Optional[str] = None                  # HTTP stack fingerprint
    tls_fingerprint: Optional[str] = None       # JA3-style client hello
    tls_fingerprint_hash: Optional[str] = None  # digest of the above
    user_agent: Optional[str] = None
    headers: list[str] = field(default_factory=list)


@dataclass
class Fingerprint:
    """One capture event."""

    fingerprint: PassiveFingerprint
    captured_at: datetime


def decode_header_value(raw: bytes) -> Optional[str]:
    """Decode a header value, or None if it is not visible ASCII text."""
    for byte in raw:
        if byte != 0x09 and not 0x20 <= byte <= 0x7E:
            return None
    return raw.decode("ascii")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_fingerprint(
    raw_headers: RawHeaders,
    now: Callable[[], datetime] = _utc_now,
) -> Fingerprint:
    """
    Build a Fingerprint from raw (name, value) header pairs.

    The three fingerprint headers are consumed: their first value is
    kept (``""`` if undecodable) and their names are left out of the
    residual list. ``user-agent`` is only read, so it stays in the
    residual list; an undecodable value is treated as absent. The
    input is never mutated.
    """
    consumed: dict[str, str] = {}
    user_agent: Optional[str] = None
    seen_user_agent = False
    residual: list[str] = []

    for raw_name, raw_value in raw_headers:
        name = raw_name.decode("latin-1").lower()
        if name in CONSUMED_HEADERS:
            if name not in consumed:
                value = decode_header_value(raw_value)
                consumed[name] = value if value is not None else ""
            continue
        if name == USER_AGENT_HEADER and not seen_user_agent:
            seen_user_agent = True
            user_agent = decode_header_value(raw_value)
        residual.append(name)

    passive = PassiveFingerprint(
        http=consumed.get(HTTP_FINGERPRINT_HEADER),
        tls_fingerprint=consumed.get(TLS_FINGERPRINT_HEADER),
        tls_fingerprint_hash=consumed.get(TLS_FINGERPRINT_HASH_HEADER),
        user_agent=user_agent,
        headers=residual,
    )
    logger.debug(
        "Built fingerprint: %d residual header(s), consumed %s",
        len(residual), sorted(consumed),
    )
    return Fingerprint(fingerprint=passive, captured_at=now())
