"""
Pytest fixtures for demo service tests.

Provides a TestClient over the demo app with a report-only policy and a
custom header configured through the environment.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

# Ensure demo service root is on sys.path so 'from app.xxx' resolves
# to this service's app package.
_service_root = str(Path(__file__).resolve().parent.parent)
if _service_root not in sys.path:
    sys.path.insert(0, _service_root)

# Header configuration must be in place before the app module is imported
os.environ["HEADER_GUARD_REPORT_ONLY"] = "true"
os.environ["HEADER_GUARD_EXTRA_HEADERS"] = '{"Permissions-Policy": "camera=()"}'
os.environ.pop("HEADER_GUARD_CONTENT_SECURITY_POLICY", None)


@pytest.fixture
def test_client() -> Iterator[Any]:
    """Create a TestClient for the demo service."""
    from fastapi.testclient import TestClient

    from app.main import app

    with TestClient(app, follow_redirects=False) as client:
        yield client
