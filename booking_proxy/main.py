import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from booking_proxy.api.booking import SERVICE_NAME, SERVICE_VERSION, router as booking_router
from booking_proxy.api.schemas import BookResponseSchema
from booking_proxy.application.exceptions import BookingValidationError
from booking_proxy.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("client_id", "service", "service_id", "appointment_id", "addons", "status", "kind", "error"):
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

logger = logging.getLogger(__name__)

app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)

app.include_router(booking_router, tags=["booking"])


def _describe_body_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "invalid value")
    if field:
        return f"Invalid request body: {field}: {detail}"
    return f"Invalid request body: {detail}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    /book reports every failure in the response envelope with status 200,
    including bodies FastAPI cannot parse. Other routes keep the default 422.
    """
    if request.url.path != "/book":
        return await request_validation_exception_handler(request, exc)

    error = _describe_body_error(exc)
    logger.warning("Rejected booking body", extra={"kind": BookingValidationError.kind, "error": error})
    result = BookResponseSchema(success=False, error=error, kind=BookingValidationError.kind)
    return JSONResponse(status_code=200, content=result.model_dump(exclude_none=True))
