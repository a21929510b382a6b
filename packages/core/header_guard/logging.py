"""
header_guard.logging
~~~~~~~~~~~~~~~~~~~~
JSON log output for services that host the header filter.

The library itself only calls ``logging.getLogger(__name__)`` and emits:

- ``header_guard.config`` DEBUG "Security headers configured" with the
  resolved ``csp_header`` and header names, once per filter instance
- ``header_guard.config`` WARNING for configuration entries that were
  dropped because they cannot be sent as headers
- ``header_guard.security_headers`` DEBUG "Security headers injected" with
  the request ``path``, ``status_code`` and injected header names

Header values are never logged, only names. A host wires output with::

    from header_guard.logging import configure_logging

    configure_logging(level="INFO", service_name="my-site", library_level="DEBUG")
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

LIBRARY_LOGGER: str = "header_guard"

# Attributes every LogRecord carries; anything else came in through extra={}.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: standard fields plus ``extra={...}`` context."""

    def __init__(self, service_name: str = "header-guard") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "timestamp": self.formatTime(record),
        }
        payload.update(
            (key, val) for key, val in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "INFO",
    service_name: str = "header-guard",
    *,
    library_level: str | None = None,
    stream: TextIO | None = None,
    suppress_uvicorn_access: bool = True,
) -> None:
    """Install a JSON handler on the root logger.

    Call once at service startup, before any other logging occurs.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Service name to include in all log entries.
        library_level: Separate level for the ``header_guard`` loggers, e.g.
            ``"DEBUG"`` to trace injections without a noisy root logger.
        stream: Output stream, stdout by default.
        suppress_uvicorn_access: If True, reduce uvicorn.access to WARNING.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter(service_name=service_name))

    root = logging.getLogger()
    root.setLevel(_level(level))
    root.handlers = [handler]

    library = logging.getLogger(LIBRARY_LOGGER)
    library.setLevel(_level(library_level) if library_level else logging.NOTSET)

    if suppress_uvicorn_access:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
