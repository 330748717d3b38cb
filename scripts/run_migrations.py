#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

    scripts/run_migrations.py            # upgrade to head
    scripts/run_migrations.py base       # drop the circle schema
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from circle.config import Settings
from circle.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Move the schema to the requested revision and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target):
        try:
            if target == "base":
                command.downgrade(alembic_cfg, "base")
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
