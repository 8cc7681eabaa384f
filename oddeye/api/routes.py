"""
Odd Eye — Fingerprint Routes.

GET /     → sealed fingerprint as raw bytes
GET /b64  → sealed fingerprint as base64 text
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from oddeye.crypto.encoding import to_base64
from oddeye.crypto.sealer import FingerprintSealer, seal_fingerprint
from oddeye.errors import SealingError
from oddeye.fingerprint.builder import build_fingerprint

logger = logging.getLogger("oddeye.api")

router = APIRouter(tags=["Fingerprint"])

INTERNAL_ERROR_BODY = "Internal Server Error"


def get_sealer(request: Request) -> FingerprintSealer:
    """Shared sealer created once by the application factory."""
    return request.app.state.sealer


def _internal_error() -> Response:
    return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)


def _seal_request(request: Request, sealer: FingerprintSealer) -> bytes:
    fp = build_fingerprint(request.headers.raw)
    return seal_fingerprint(fp, sealer)


@router.get("/", response_class=Response)
async def sealed_fingerprint(
    request: Request,
    sealer: FingerprintSealer = Depends(get_sealer),
) -> Response:
    """Return the sealed fingerprint for this request as binary."""
    try:
        sealed = _seal_request(request, sealer)
    except SealingError as exc:
        logger.error("Failed to seal fingerprint: %s", exc, exc_info=True)
        return _internal_error()
    return Response(content=sealed, media_type="application/octet-stream")


@router.get("/b64", response_class=PlainTextResponse)
async def sealed_fingerprint_b64(
    request: Request,
    sealer: FingerprintSealer = Depends(get_sealer),
) -> Response:
    """Return the sealed fingerprint for this request as base64 text."""
    try:
        sealed = _seal_request(request, sealer)
    except SealingError as exc:
        logger.error("Failed to seal fingerprint: %s", exc, exc_info=True)
        return _internal_error()
    return PlainTextResponse(to_base64(sealed))
