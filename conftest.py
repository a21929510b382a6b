"""
Root-level pytest configuration for the header_guard monorepo.

Keeps the library tests (packages/core/tests/) and the service tests
(services/*/tests/) collectable from the repository root without an
installed package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure packages/core is importable
root = Path(__file__).parent
core_path = root / "packages" / "core"
if str(core_path) not in sys.path:
    sys.path.insert(0, str(core_path))
