#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from commentkit.config import Settings
from commentkit.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Run migrations up to `revision` and log failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
