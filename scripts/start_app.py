#!/usr/bin/env python3
"""Start the API server with Logfire configured before the app is imported."""

import sys

import logfire
import uvicorn

from liftout.config import Settings
from liftout.util.logging import setup_logging
from liftout.util.observability import configure_logfire


def main() -> int:
    """Run uvicorn, reporting startup failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Liftout API",
            environment=settings.environment,
            data_source=settings.data_source,
        )
        uvicorn.run(
            "liftout.interface.api.app:app",
            host="0.0.0.0",
            port=8000,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
