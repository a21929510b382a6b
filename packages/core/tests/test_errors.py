"""
Tests for header_guard.errors.
"""

from __future__ import annotations

import pytest

from header_guard import HeaderGuardError, InvalidHandlerError


class TestHeaderGuardError:
    def test_is_base_exception(self) -> None:
        assert isinstance(HeaderGuardError("base"), Exception)

    def test_message_preserved(self) -> None:
        assert str(HeaderGuardError("something failed")) == "something failed"


class TestInvalidHandlerError:
    def test_hierarchy(self) -> None:
        e = InvalidHandlerError("bad handler")
        assert isinstance(e, HeaderGuardError)
        assert isinstance(e, TypeError)

    def test_default_attributes(self) -> None:
        assert InvalidHandlerError("bad handler").handler is None

    def test_custom_attributes(self) -> None:
        e = InvalidHandlerError("bad handler", handler=42)
        assert e.handler == 42

    def test_caught_as_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise InvalidHandlerError("bad handler")
