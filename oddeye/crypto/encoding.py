"""
Odd Eye — Transport encoding for sealed fingerprints.
"""

from __future__ import annotations

import base64


def to_base64(sealed: bytes) -> str:
    """Standard padded base64 without line breaks."""
    return base64.b64encode(sealed).decode("ascii")
