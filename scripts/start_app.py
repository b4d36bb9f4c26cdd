#!/usr/bin/env python3
"""Start the InviteLink API under uvicorn.

Logfire is configured before the app module is imported so that startup
failures (bad settings, unreachable database on first request) are recorded.
"""

import sys

import logfire
import uvicorn

from invitelink.config import Settings
from invitelink.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    if settings.environment == "production" and (
        settings.qr.signing_secret == "CHANGE_ME_IN_PRODUCTION"
    ):
        logfire.error("Refusing to start: QR__SIGNING_SECRET is not set")
        return 1

    try:
        logfire.info(
            "Starting InviteLink API",
            environment=settings.environment,
            port=settings.port,
            allow_reentry=settings.checkin.allow_reentry,
        )
        uvicorn.run(
            "invitelink.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "InviteLink API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
