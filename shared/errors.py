"""JSON error envelope used by every service: ``{"error": "..."}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_config import get_logger

logger = get_logger("errors")


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    body = {"error": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for err in exc.errors():
        # drop the "body"/"query"/"path" prefix from the location
        loc = [str(part) for part in err.get("loc", ())[1:]]
        details.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return details


def install_error_handlers(app: FastAPI, validation_message: str = "Invalid request data") -> None:
    """Register the shared exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(400, validation_message, details=_validation_details(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error")
