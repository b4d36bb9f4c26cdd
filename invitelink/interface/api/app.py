"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invitelink.config import Settings
from invitelink.interface.api.routes import checkin, events, health, invites
from invitelink.interface.error import register_error_handlers
from invitelink.util.di.container import create_container, setup_di
from invitelink.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending data.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="InviteLink API",
        description="Event invitations with RSVP, plus-ones and QR-code check-in",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(checkin.router)
    app_instance.include_router(events.router)

    register_error_handlers(app_instance)

    return app_instance


# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: conftest.py
app = create_app()
