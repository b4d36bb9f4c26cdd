"""Logfire setup for the InviteLink API.

Services log through ``logfire`` directly::

    with logfire.span("checkin_coordinator.admit_principal", invite_id=invite_id):
        ...
    logfire.warn("Check-in rejected", invite_id=invite_id, kind=e.kind.value)

Scanned QR payloads are bearer credentials at the door, so they are kept out
of request telemetry; services only ever log a short prefix.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncEngine

from invitelink.config import ObservabilitySettings, Settings

SERVICE_NAME = "invitelink-backend"
SERVICE_VERSION = "0.1.0"


def _should_send(observability: ObservabilitySettings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` everything stays on the console.
    """
    send_to_logfire = _should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        allow_reentry=settings.checkin.allow_reentry,
    )


def _drop_scanned_codes(
    request: Request, attributes: dict[str, Any]
) -> dict[str, Any]:
    """Record validated request values minus any raw QR ``code`` field."""
    values = {}
    for name, value in (attributes.get("values") or {}).items():
        if isinstance(value, BaseModel) and "code" in type(value).model_fields:
            value = value.model_dump(exclude={"code"})
        values[name] = value
    return {**attributes, "values": values}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request.

    Headers are not captured: scanner devices send nothing the door log needs.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_drop_scanned_codes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace invite queries, including the row locks taken by updates."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
