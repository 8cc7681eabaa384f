"""
Odd Eye — Canonical Fingerprint Serializer.

Renders a Fingerprint as compact UTF-8 JSON in declaration order,
ready to be sealed.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from oddeye.errors import TimestampError
from oddeye.fingerprint.builder import Fingerprint


def format_rfc3339(dt: datetime) -> str:
    """Format an aware datetime as RFC 3339 in UTC, e.g. 2024-01-02T03:04:05.000006Z."""
    offset = dt.utcoffset()
    if offset is None:
        raise TimestampError(f"Timestamp has no UTC offset: {dt!r}")
    try:
        utc = (dt - offset).replace(tzinfo=None)
    except OverflowError as exc:
        raise TimestampError(f"Timestamp out of range: {dt!r}") from exc
    return utc.isoformat(timespec="microseconds") + "Z"


def fingerprint_to_dict(fp: Fingerprint) -> dict[str, Any]:
    """Wire shape of a Fingerprint. Absent optional fields become null."""
    passive = fp.fingerprint
    return {
        "fingerprint": {
            "http": passive.http,
            "ja3": passive.tls_fingerprint,
            "ja3_hash": passive.tls_fingerprint_hash,
            "user_agent": passive.user_agent,
            "headers": list(passive.headers),
        },
        "timestamp": format_rfc3339(fp.captured_at),
    }


def serialize_fingerprint(fp: Fingerprint) -> bytes:
    return json.dumps(
        fingerprint_to_dict(fp),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
