import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from salon.api.admin import router as admin_router
from salon.api.bookings import router as bookings_router
from salon.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "user_id", "date", "hour", "service", "email", "status", "count", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking API", version="1.0.0")

app.include_router(bookings_router, prefix="/api", tags=["bookings"])
app.include_router(admin_router, prefix="/api", tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed request bodies share the 400 used for ValidationError.
    logging.getLogger(__name__).info("Rejected malformed request", extra={"reason": request.url.path})
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )
