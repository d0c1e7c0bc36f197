from __future__ import annotations

import logging

from fastapi.responses import JSONResponse

from salon.application.exceptions import (
    BookingError,
    BookingNotFoundError,
    DependencyError,
    NotAuthorizedError,
    SlotConflictError,
    ValidationError,
)


logger = logging.getLogger(__name__)


def error_response(exc: BookingError) -> JSONResponse:
    if isinstance(exc, SlotConflictError):
        return JSONResponse(
            status_code=409,
            content={
                "message": str(exc),
                "conflictingService": exc.conflicting_service,
                "conflictingHour": exc.conflicting_hour,
                "conflictingDate": exc.date,
            },
        )
    if isinstance(exc, ValidationError):
        return JSONResponse(status_code=400, content={"message": str(exc)})
    if isinstance(exc, BookingNotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})
    if isinstance(exc, NotAuthorizedError):
        return JSONResponse(status_code=403, content={"message": str(exc)})
    if isinstance(exc, DependencyError):
        logger.error("Booking store unavailable", extra={"reason": str(exc)})
        return JSONResponse(
            status_code=503,
            content={"message": "Booking service temporarily unavailable, please retry", "details": str(exc)},
            headers={"Retry-After": "5"},
        )
    logger.error("Unhandled booking error", extra={"reason": str(exc)})
    return JSONResponse(status_code=500, content={"message": str(exc)})
