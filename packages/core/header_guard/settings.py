"""
header_guard.settings
~~~~~~~~~~~~~~~~~~~~~
Environment-driven configuration for hosts that want to tune the injected
headers without code changes.

The filter itself never reads the environment; a host opts in with::

    from header_guard import HeaderFilter, load_settings

    guard = HeaderFilter(load_settings().to_config())

Recognised variables (``.env`` files are honoured too)::

    HEADER_GUARD_CONTENT_SECURITY_POLICY="default-src 'self'"
    HEADER_GUARD_REPORT_ONLY=true
    HEADER_GUARD_EXTRA_HEADERS='{"X-Frame-Options": "SAMEORIGIN"}'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from header_guard.config import CONTENT_SECURITY_POLICY_KEY, REPORT_ONLY_KEY


class HeaderGuardSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HEADER_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CONTENT_SECURITY_POLICY: str | None = None
    REPORT_ONLY: bool = False

    # Header name -> value overrides, JSON-encoded in the environment
    EXTRA_HEADERS: dict[str, str] = Field(default_factory=dict)

    def to_config(self) -> dict[str, Any]:
        """Return a configuration mapping accepted by ``normalize_config``."""
        config: dict[str, Any] = {
            name: value
            for name, value in self.EXTRA_HEADERS.items()
            if name not in (CONTENT_SECURITY_POLICY_KEY, REPORT_ONLY_KEY)
        }
        if self.CONTENT_SECURITY_POLICY is not None:
            config[CONTENT_SECURITY_POLICY_KEY] = self.CONTENT_SECURITY_POLICY
        config[REPORT_ONLY_KEY] = self.REPORT_ONLY
        return config


def load_settings() -> HeaderGuardSettings:
    """Load settings from the environment (evaluated at call time)."""
    return HeaderGuardSettings()
