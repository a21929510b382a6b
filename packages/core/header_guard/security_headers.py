"""
header_guard.security_headers
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Starlette middleware that adds security headers to successful HTML responses.

Usage::

    from header_guard import SecurityHeadersMiddleware

    app.add_middleware(
        SecurityHeadersMiddleware,
        config={"content_security_policy": "default-src 'self'"},
        report_only=True,
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from header_guard.filter import HeaderFilter, inject_headers, is_eligible

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every 2xx ``text/html`` response.

    ``config`` and keyword overrides are merged (keywords win) and
    normalized once, when the middleware stack is built.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(app)
        self.header_filter = HeaderFilter({**(config or {}), **overrides})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if is_eligible(response.status_code, response.headers):
            effective = self.header_filter.effective
            inject_headers(response.headers, effective)  # type: ignore[arg-type]
            logger.debug(
                "Security headers injected",
                extra={
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "headers": [*effective.headers, effective.csp_header_name],
                },
            )
        return response
