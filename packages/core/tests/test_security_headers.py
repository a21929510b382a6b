"""
Tests for header_guard.security_headers.

Runs a small Starlette app behind SecurityHeadersMiddleware and checks the
headers seen by an HTTP client.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Route
from starlette.testclient import TestClient

from header_guard import (
    CSP_HEADER,
    CSP_REPORT_ONLY_HEADER,
    DEFAULT_CSP,
    DEFAULT_HEADERS,
    SecurityHeadersMiddleware,
)


async def _html(request: Request) -> Response:
    return HTMLResponse("<h1>Hello!</h1>")


async def _html_with_frame_options(request: Request) -> Response:
    return HTMLResponse("<h1>Embed me</h1>", headers={"X-Frame-Options": "ALLOWALL"})


async def _json(request: Request) -> Response:
    return JSONResponse({"message": "ok"})


async def _redirect(request: Request) -> Response:
    return RedirectResponse("/new", status_code=302)


async def _error(request: Request) -> Response:
    return HTMLResponse("Error", status_code=500)


async def _boom(request: Request) -> Response:
    raise RuntimeError("handler exploded")


def _build_client(**middleware_kwargs: Any) -> TestClient:
    app = Starlette(
        routes=[
            Route("/", _html),
            Route("/framed", _html_with_frame_options),
            Route("/json", _json),
            Route("/redirect", _redirect),
            Route("/error", _error),
            Route("/boom", _boom),
        ]
    )
    app.add_middleware(SecurityHeadersMiddleware, **middleware_kwargs)
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def client() -> TestClient:
    return _build_client()


class TestHtmlResponses:
    def test_injects_default_headers(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        for name, value in DEFAULT_HEADERS.items():
            assert resp.headers[name] == value

    def test_injects_default_csp(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.headers[CSP_HEADER] == DEFAULT_CSP
        assert CSP_REPORT_ONLY_HEADER not in resp.headers

    def test_body_unchanged(self, client: TestClient) -> None:
        assert client.get("/").text == "<h1>Hello!</h1>"

    def test_overwrites_handler_value(self, client: TestClient) -> None:
        resp = client.get("/framed")
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert len(resp.headers.get_list("X-Frame-Options")) == 1


class TestExclusions:
    def test_json_untouched(self, client: TestClient) -> None:
        resp = client.get("/json")
        assert resp.json() == {"message": "ok"}
        assert "Strict-Transport-Security" not in resp.headers
        assert CSP_HEADER not in resp.headers

    def test_redirect_untouched(self, client: TestClient) -> None:
        resp = client.get("/redirect")
        assert resp.status_code == 302
        assert resp.headers["location"] == "/new"
        assert "Strict-Transport-Security" not in resp.headers
        assert CSP_HEADER not in resp.headers

    def test_server_error_untouched(self, client: TestClient) -> None:
        resp = client.get("/error")
        assert resp.status_code == 500
        assert "X-Frame-Options" not in resp.headers
        assert CSP_HEADER not in resp.headers

    def test_handler_exception_propagates(self, client: TestClient) -> None:
        with pytest.raises(RuntimeError, match="handler exploded"):
            client.get("/boom")


class TestConfiguration:
    def test_config_mapping(self) -> None:
        client = _build_client(config={"X-Frame-Options": "SAMEORIGIN"})
        resp = client.get("/")
        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"

    def test_custom_csp_keyword(self) -> None:
        client = _build_client(content_security_policy="default-src 'none'")
        resp = client.get("/")
        assert resp.headers[CSP_HEADER] == "default-src 'none'"
        assert CSP_REPORT_ONLY_HEADER not in resp.headers

    def test_report_only_keyword(self) -> None:
        client = _build_client(report_only=True)
        resp = client.get("/")
        assert resp.headers[CSP_REPORT_ONLY_HEADER] == DEFAULT_CSP
        assert CSP_HEADER not in resp.headers

    def test_keywords_override_config(self) -> None:
        client = _build_client(config={"report_only": True}, report_only=False)
        resp = client.get("/")
        assert resp.headers[CSP_HEADER] == DEFAULT_CSP
        assert CSP_REPORT_ONLY_HEADER not in resp.headers


class TestUnusableConfiguration:
    @pytest.mark.parametrize(
        "config",
        [
            {"X-Num": 5},
            {"X-Uni": "日本"},
            {"content_security_policy": 1},
        ],
    )
    def test_html_still_served_with_defaults(self, config: dict[str, Any]) -> None:
        client = _build_client(config=config)
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers[CSP_HEADER] == DEFAULT_CSP
        for name, value in DEFAULT_HEADERS.items():
            assert resp.headers[name] == value
        assert "X-Num" not in resp.headers
        assert "X-Uni" not in resp.headers


class TestInjectionLogging:
    def test_logs_path_and_header_names(self, caplog: pytest.LogCaptureFixture) -> None:
        client = _build_client()
        with caplog.at_level(logging.DEBUG, logger="header_guard.security_headers"):
            client.get("/")
        record = next(r for r in caplog.records if r.message == "Security headers injected")
        assert record.path == "/"
        assert record.status_code == 200
        assert record.headers == [*DEFAULT_HEADERS, CSP_HEADER]

    def test_no_log_for_skipped_response(self, caplog: pytest.LogCaptureFixture) -> None:
        client = _build_client()
        with caplog.at_level(logging.DEBUG, logger="header_guard.security_headers"):
            client.get("/json")
        assert not [r for r in caplog.records if r.message == "Security headers injected"]
