"""
app.serve
~~~~~~~~~
Thin uvicorn entry point for the demo service::

    python -m app.serve
"""

from __future__ import annotations

import uvicorn

from app.config import settings


def main() -> None:
    """Start the demo service via uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
