"""
app.main
~~~~~~~~
header_guard demo service - FastAPI application entry point.

Serves one route per branch of the header filter so its behaviour can be
observed with any HTTP client:

- ``/``       HTML page, gets every security header and the CSP
- ``/health`` JSON, left untouched
- ``/old``    302 redirect, left untouched
- ``/error``  HTML with status 500, left untouched

Start with::

    uvicorn app.main:app --port 8080 --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from header_guard import SecurityHeadersMiddleware, __version__, load_settings
from header_guard.logging import configure_logging

from app.config import settings

configure_logging(
    level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    library_level=settings.HEADER_GUARD_LOG_LEVEL,
)
logger = logging.getLogger(__name__)

header_settings = load_settings()


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "Demo service starting",
        extra={
            "report_only": header_settings.REPORT_ONLY,
            "custom_csp": header_settings.CONTENT_SECURITY_POLICY is not None,
            "extra_headers": sorted(header_settings.EXTRA_HEADERS),
        },
    )
    yield
    logger.info("Demo service shutting down")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="header_guard demo",
    description="Shows which responses receive security headers.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware, config=header_settings.to_config())


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

_PAGE = """<!doctype html>
<html>
  <head><title>header_guard</title></head>
  <body><h1>Hello!</h1></body>
</html>
"""


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> str:
    return _PAGE


@app.get("/health", tags=["ops"], summary="Health check")
async def health() -> dict[str, str]:
    return {"status": "ok", "service": settings.SERVICE_NAME}


@app.get("/old", include_in_schema=False)
async def old() -> RedirectResponse:
    return RedirectResponse("/", status_code=302)


@app.get("/error", include_in_schema=False)
async def error() -> HTMLResponse:
    return HTMLResponse("<h1>Something went wrong</h1>", status_code=500)
