#!/usr/bin/env python3
"""Serve the Circle API with uvicorn.

Usage:
    python scripts/start_app.py [--port 8000] [--reload]

The app is built through the ``create_app`` factory so that settings are read
once, after Logfire is configured. Startup failures are recorded in Logfire
before the process exits.
"""

import argparse
import sys

import logfire
import uvicorn

from circle.config import Settings
from circle.util.logging import setup_logging
from circle.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Circle API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    port = args.port or settings.port
    reload = args.reload and settings.environment == "development"

    try:
        logfire.info(
            "Starting Circle API",
            environment=settings.environment,
            port=port,
            reload=reload,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "circle.interface.api.app:create_app",
            factory=True,
            host=args.host,
            port=port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Circle API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
