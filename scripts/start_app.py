#!/usr/bin/env python3
"""Start the CommentKit API with Logfire capturing start-up errors."""

import sys
import logfire
import uvicorn

from commentkit.config import Settings
from commentkit.util.logging import setup_logging
from commentkit.util.observability import configure_logfire


def main() -> int:
    """Start the API. Errors raised before uvicorn serves are logged to Logfire."""
    settings = Settings()

    # Configure Logfire before the app module is imported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting CommentKit API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "commentkit.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container exits non-zero
        raise


if __name__ == "__main__":
    sys.exit(main())
