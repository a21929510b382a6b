"""
app.config
~~~~~~~~~~
Settings for the header_guard demo service.

Header configuration itself is read by
:class:`header_guard.settings.HeaderGuardSettings` (``HEADER_GUARD_*``).
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity
    SERVICE_NAME: str = "header-guard-demo"

    # Observability
    LOG_LEVEL: str = "INFO"
    HEADER_GUARD_LOG_LEVEL: str | None = None  # e.g. DEBUG to trace injections

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8080


settings = Settings()
