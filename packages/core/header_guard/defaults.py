"""
header_guard.defaults
~~~~~~~~~~~~~~~~~~~~~
Process-wide default tables for injected security headers.

Everything here is built once at import time and is read-only; request
handling only ever reads these values.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

CSP_HEADER: str = "Content-Security-Policy"
CSP_REPORT_ONLY_HEADER: str = "Content-Security-Policy-Report-Only"

CONTENT_TYPE_HEADER: str = "Content-Type"
HTML_CONTENT_TYPE: str = "text/html"

# Inclusive bounds of the statuses eligible for injection.
SUCCESS_STATUS_MIN: int = 200
SUCCESS_STATUS_MAX: int = 299

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        # One year, subdomains included, eligible for browser preload lists.
        "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }
)

# Same-origin baseline; plugins, <base> rewrites and framing are blocked.
DEFAULT_CSP: str = (
    "default-src 'self';"
    "base-uri 'self';"
    "font-src 'self' https: data:;"
    "form-action 'self';"
    "frame-ancestors 'none';"
    "object-src 'none';"
    "script-src 'self';"
    "style-src 'self' 'unsafe-inline' https:;"
    "upgrade-insecure-requests;"
    "block-all-mixed-content"
)
