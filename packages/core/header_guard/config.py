"""
header_guard.config
~~~~~~~~~~~~~~~~~~~
Turns a raw configuration mapping into an immutable :class:`EffectiveConfig`.

Two keys are reserved and pulled out first:

``content_security_policy``
    Replaces :data:`~header_guard.defaults.DEFAULT_CSP` when set.
``report_only``
    When truthy, the policy is sent as
    ``Content-Security-Policy-Report-Only`` instead of
    ``Content-Security-Policy``.

Whatever remains is a header override, merged over
:data:`~header_guard.defaults.DEFAULT_HEADERS` (the override wins). Unknown
names are added verbatim so arbitrary custom headers can be injected;
entries that could never be sent as header text are dropped with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from header_guard.defaults import (
    CSP_HEADER,
    CSP_REPORT_ONLY_HEADER,
    DEFAULT_CSP,
    DEFAULT_HEADERS,
)

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY_KEY: str = "content_security_policy"
REPORT_ONLY_KEY: str = "report_only"


@dataclass(frozen=True)
class EffectiveConfig:
    """Resolved header set, computed once per filter instance.

    Attributes:
        headers: Read-only mapping of header name to value to inject.
        csp_value: The Content Security Policy string.
        csp_header_name: Header that carries ``csp_value``.
    """

    headers: Mapping[str, str]
    csp_value: str
    csp_header_name: str

    @property
    def report_only(self) -> bool:
        return self.csp_header_name == CSP_REPORT_ONLY_HEADER


def _is_header_text(text: Any) -> bool:
    """True if *text* can be sent as a header name or value as-is."""
    if not isinstance(text, str) or any(ch in text for ch in "\r\n\0"):
        return False
    try:
        text.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return True


def normalize_config(config: Mapping[str, Any] | None = None) -> EffectiveConfig:
    """Build an :class:`EffectiveConfig` from *config*.

    The caller's mapping is copied, never mutated. Any mapping is accepted;
    ``None`` is the same as an empty mapping. Entries that cannot be written
    to a response (non-string, non latin-1, or containing line breaks) are
    dropped with a warning, and an unusable CSP falls back to the default,
    so injection never fails per request.
    """
    remaining: dict[Any, Any] = dict(config or {})

    custom_csp = remaining.pop(CONTENT_SECURITY_POLICY_KEY, None)
    report_only = bool(remaining.pop(REPORT_ONLY_KEY, False))

    if custom_csp is not None and not _is_header_text(custom_csp):
        logger.warning(
            "Ignoring unusable content security policy, using default",
            extra={"csp_type": type(custom_csp).__name__},
        )
        custom_csp = None

    headers = dict(DEFAULT_HEADERS)
    rejected: list[str] = []
    for name, value in remaining.items():
        if name and _is_header_text(name) and _is_header_text(value):
            headers[name] = value
        else:
            rejected.append(repr(name))
    if rejected:
        logger.warning(
            "Ignoring unusable header overrides",
            extra={"rejected_headers": rejected},
        )

    effective = EffectiveConfig(
        headers=MappingProxyType(headers),
        csp_value=DEFAULT_CSP if custom_csp is None else custom_csp,
        csp_header_name=CSP_REPORT_ONLY_HEADER if report_only else CSP_HEADER,
    )
    logger.debug(
        "Security headers configured",
        extra={
            "csp_header": effective.csp_header_name,
            "custom_csp": custom_csp is not None,
            "headers": sorted(headers),
        },
    )
    return effective
