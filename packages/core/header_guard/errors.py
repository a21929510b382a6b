"""
header_guard.errors
~~~~~~~~~~~~~~~~~~~
Exception hierarchy for header_guard.

Configuration normalization and header injection never raise; the only
failure the library reports is a wiring mistake made while composing a
handler chain.
"""

from __future__ import annotations

from typing import Any


class HeaderGuardError(Exception):
    """Base class for all header_guard exceptions."""


class InvalidHandlerError(HeaderGuardError, TypeError):
    """Raised when something that is not callable is wrapped as a handler.

    Attributes:
        handler: The object that was passed in place of a handler.
    """

    def __init__(self, message: str, *, handler: Any = None) -> None:
        super().__init__(message)
        self.handler = handler
