"""
header_guard.filter
~~~~~~~~~~~~~~~~~~~
The per-response decision and header merge, plus :class:`HeaderFilter`,
which wraps any handler of the shape ``request -> (status, headers, body)``.

Only successful (2xx) HTML responses are touched. Redirects, errors and
non-HTML payloads such as JSON or images pass through exactly as the inner
handler produced them.

Usage::

    from header_guard import HeaderFilter

    guard = HeaderFilter({"X-Frame-Options": "SAMEORIGIN", "report_only": True})
    handler = guard.wrap(render_page)

    status, headers, body = handler(request)
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeVar

from header_guard.config import EffectiveConfig, normalize_config
from header_guard.defaults import (
    CONTENT_TYPE_HEADER,
    HTML_CONTENT_TYPE,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
)
from header_guard.errors import InvalidHandlerError

Response = tuple[int, MutableMapping[str, str], Any]
Handler = Callable[[Any], Response]

_R = TypeVar("_R", bound=Response)


def is_eligible(status: int, headers: Mapping[str, str]) -> bool:
    """Return True for a 2xx response whose Content-Type mentions text/html."""
    if not SUCCESS_STATUS_MIN <= status <= SUCCESS_STATUS_MAX:
        return False
    content_type = headers.get(CONTENT_TYPE_HEADER)
    return content_type is not None and HTML_CONTENT_TYPE in content_type


def inject_headers(
    headers: MutableMapping[str, str], effective: EffectiveConfig
) -> None:
    """Write every configured header into *headers*, then the CSP header.

    Existing values are overwritten, so whatever the inner handler set for
    the same name is replaced.
    """
    for name, value in effective.headers.items():
        headers[name] = value
    headers[effective.csp_header_name] = effective.csp_value


def apply(response: _R, effective: EffectiveConfig) -> _R:
    """Inject headers into *response* if it is eligible and return it."""
    status, headers, _body = response
    if is_eligible(status, headers):
        inject_headers(headers, effective)
    return response


class HeaderFilter:
    """Security header filter for ``request -> (status, headers, body)`` chains.

    The configuration is normalized once here; every request afterwards
    only reads :attr:`effective`, so one instance can serve any number of
    concurrent requests.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.effective: EffectiveConfig = normalize_config(config)

    def apply(self, response: _R) -> _R:
        return apply(response, self.effective)

    def wrap(self, inner: Handler) -> Handler:
        """Return a handler that delegates to *inner* and filters its result.

        Exceptions raised by *inner* propagate unchanged.
        """
        if not callable(inner):
            raise InvalidHandlerError(
                f"Cannot wrap non-callable handler of type {type(inner).__name__}",
                handler=inner,
            )

        @functools.wraps(inner)
        def wrapped(request: Any) -> Response:
            return self.apply(inner(request))

        return wrapped

    __call__ = wrap

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(csp_header={self.effective.csp_header_name!r}, "
            f"headers={sorted(self.effective.headers)!r})"
        )
