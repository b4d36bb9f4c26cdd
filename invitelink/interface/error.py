"""Interface layer error mapping.

Domain errors keep their ``kind`` on the wire so door-side clients can tell
"already checked in" apart from "not accepted" without parsing messages.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from invitelink.domain.error import DomainError, ErrorKind

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.MALFORMED_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_SUBMITTED: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_ACCEPTED: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_CHECKED_IN: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_PLUS_ONE_INDEX: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    return ERROR_STATUS.get(error.kind, status.HTTP_400_BAD_REQUEST)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"kind", "message"}``."""
    status_code = status_for(exc)
    logfire.info(
        "Request rejected",
        path=request.url.path,
        kind=exc.kind.value,
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"kind": exc.kind.value, "message": exc.message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures before the server turns them into a 500."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"kind": "internal_error", "message": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error mapping on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
