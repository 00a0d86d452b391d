from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import BaseAppError
from app.core.logging import get_logger
from app.schemas.common import field_errors_from

logger = get_logger(__name__)

# Location prefixes FastAPI puts in front of the offending field name
_LOCATION_PREFIXES = ("body", "query", "path")


def _strip_location(error: dict) -> dict:
    loc = tuple(error.get("loc", ()))
    if loc and loc[0] in _LOCATION_PREFIXES:
        return {**error, "loc": loc[1:]}
    return error


async def handle_app_error(request: Request, exc: BaseAppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(exc.detail, extra={"path": request.url.path, "code": exc.code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=exc.headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = field_errors_from(_strip_location(e) for e in exc.errors())
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "fields": ",".join(sorted(field_errors))},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "code": "VALIDATION_ERROR", "fieldErrors": field_errors},
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    # Constraint violations that slipped past the service-level checks
    logger.warning("Integrity error", extra={"path": request.url.path, "error": str(exc.orig)})
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": "Request conflicts with existing data", "code": "CONFLICT"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "code": "INTERNAL_SERVER_ERROR"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
