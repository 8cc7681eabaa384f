"""
Odd Eye — Diagnostic Routes.

Only mounted when ODD_EYE_DEBUG_ROUTES is enabled. Exposes the
unsealed fingerprint, so never enable it in production.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from oddeye.fingerprint.builder import build_fingerprint
from oddeye.fingerprint.serializer import fingerprint_to_dict

router = APIRouter(tags=["Diagnostics"])


@router.get("/test")
async def unsealed_fingerprint(request: Request) -> dict:
    """Return the fingerprint for this request without sealing it."""
    return fingerprint_to_dict(build_fingerprint(request.headers.raw))
