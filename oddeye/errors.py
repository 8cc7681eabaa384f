"""
Odd Eye — Exception types.

Raised by the fingerprint pipeline and translated into generic HTTP
failures by the request handlers.
"""

from __future__ import annotations


class OddEyeError(Exception):
    """Base class for all pipeline errors."""


class TimestampError(OddEyeError, ValueError):
    """Capture timestamp cannot be rendered as RFC 3339."""


class SealingError(OddEyeError):
    """Authenticated encryption of a fingerprint failed."""
