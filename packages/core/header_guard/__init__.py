"""
header_guard
~~~~~~~~~~~~
Security header injection for HTTP middleware chains.

Successful (2xx) HTML responses get HSTS, anti-sniffing, anti-framing and
referrer-policy headers plus a Content Security Policy; everything else
passes through untouched.

Public surface
--------------
All public symbols are exported from the top-level namespace::

    from header_guard import HeaderFilter, SecurityHeadersMiddleware

Sub-module summary
------------------
:mod:`header_guard.defaults`
    Default header table and CSP string.

:mod:`header_guard.config`
    :func:`normalize_config` and the frozen :class:`EffectiveConfig`.

:mod:`header_guard.filter`
    The per-response predicate and merge, and :class:`HeaderFilter`.

:mod:`header_guard.security_headers`
    Starlette / FastAPI middleware built on the same filter.

:mod:`header_guard.settings`
    Optional pydantic-settings loader for ``HEADER_GUARD_*`` variables.

:mod:`header_guard.errors`
    Exception hierarchy rooted at :exc:`HeaderGuardError`.

:mod:`header_guard.logging`
    JSON log formatting for host services.
"""

from __future__ import annotations

# --- Configuration ----------------------------------------------------------
from header_guard.config import EffectiveConfig, normalize_config

# --- Defaults ---------------------------------------------------------------
from header_guard.defaults import (
    CSP_HEADER,
    CSP_REPORT_ONLY_HEADER,
    DEFAULT_CSP,
    DEFAULT_HEADERS,
)

# --- Exceptions -------------------------------------------------------------
from header_guard.errors import HeaderGuardError, InvalidHandlerError

# --- Filter -----------------------------------------------------------------
from header_guard.filter import HeaderFilter, apply, inject_headers, is_eligible

# --- Logging ----------------------------------------------------------------
from header_guard.logging import LIBRARY_LOGGER, JsonFormatter, configure_logging

# --- Middleware -------------------------------------------------------------
from header_guard.security_headers import SecurityHeadersMiddleware

# --- Settings ---------------------------------------------------------------
from header_guard.settings import HeaderGuardSettings, load_settings

__all__: list[str] = [
    # Defaults
    "CSP_HEADER",
    "CSP_REPORT_ONLY_HEADER",
    "DEFAULT_CSP",
    "DEFAULT_HEADERS",
    # Configuration
    "EffectiveConfig",
    "normalize_config",
    # Filter
    "HeaderFilter",
    "apply",
    "inject_headers",
    "is_eligible",
    # Errors
    "HeaderGuardError",
    "InvalidHandlerError",
    # Middleware
    "SecurityHeadersMiddleware",
    # Settings
    "HeaderGuardSettings",
    "load_settings",
    # Logging
    "configure_logging",
    "JsonFormatter",
    "LIBRARY_LOGGER",
]

__version__: str = "0.1.0"
