"""
Odd Eye — Application Entry Point.

Builds the FastAPI application that seals passive client fingerprints
for the edge proxy in front of it.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from oddeye.api.debug import router as debug_router
from oddeye.api.routes import router as fingerprint_router
from oddeye.config import Settings, get_settings
from oddeye.crypto.sealer import FingerprintSealer

logger = logging.getLogger("oddeye")

__version__ = "0.1.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory for the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup / shutdown lifecycle."""
        logging.basicConfig(
            level=getattr(logging, settings.log_level.upper()),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            force=True,
        )
        logger.info("Odd Eye v%s starting", __version__)
        if settings.debug_routes:
            logger.warning("Debug routes enabled: GET /test exposes unsealed fingerprints")
        logger.info("Listening on http://%s:%d", settings.host, settings.port)

        yield

        logger.info("Odd Eye stopped.")

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Passive fingerprint sealing service",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # Fails fast on a bad key; shared read-only by every request
    app.state.sealer = FingerprintSealer(settings.key_bytes)

    app.include_router(fingerprint_router)
    if settings.debug_routes:
        app.include_router(debug_router)

    return app


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    uvicorn.run(
        "oddeye.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
