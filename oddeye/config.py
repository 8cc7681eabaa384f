"""
Odd Eye — Configuration via Pydantic Settings.

All settings are loaded from environment variables or .env file.
The encryption key is mandatory: building the settings fails fast
when it is missing or not exactly 32 bytes long.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 4000
KEY_SIZE = 32


class Settings(BaseSettings):
    """Application-wide settings loaded from env / .env."""

    # ── General ──────────────────────────────────────────────
    app_name: str = "Odd Eye"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    log_level: str = "info"

    # ── Encryption ───────────────────────────────────────────
    encryption_key: SecretStr = Field(
        ...,
        description="Raw 32-byte ChaCha20-Poly1305 key (UTF-8 encoded)",
    )

    # ── Diagnostics ──────────────────────────────────────────
    debug_routes: bool = Field(
        default=False,
        description="Expose GET /test with the unsealed fingerprint",
    )

    @field_validator("encryption_key")
    @classmethod
    def validate_encryption_key(cls, v: SecretStr) -> SecretStr:
        size = len(v.get_secret_value().encode("utf-8"))
        if size != KEY_SIZE:
            raise ValueError(
                f"Encryption key is not exactly {KEY_SIZE} bytes. Key size = {size}"
            )
        return v

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v: Any) -> int:
        try:
            port = int(v)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"debug", "info", "warning", "error", "critical"}
        if v.lower() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.lower()

    @property
    def key_bytes(self) -> bytes:
        return self.encryption_key.get_secret_value().encode("utf-8")

    model_config = {
        "env_prefix": "ODD_EYE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings singleton, built on first use."""
    return Settings()
