"""
JSON error responses

Every error leaves the API as ``{"error", "message", "details"?}``:
catalog exceptions carry their own code and status, malformed requests are
a 400 VALIDATION_ERROR, and anything from the database or unexpected is a
500 whose cause only goes to the log.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from plastics_catalog.exceptions import CatalogException, ValidationError, validation_error_details
from plastics_catalog.logging_config import get_logger

logger = get_logger(__name__)


def _error_response(exc: CatalogException) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def catalog_exception_handler(request: Request, exc: CatalogException):
    logger.warning(
        f"{exc.error_code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.error_code, "details": exc.details, "path": request.url.path},
    )
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, ids and query parameters"""
    error = ValidationError(errors=validation_error_details(exc.errors()))
    logger.warning(f"Validation error on {request.url.path}", extra={"errors": error.details["errors"]})
    return _error_response(error)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "DATABASE_ERROR", "message": "A database error occurred. Please try again."},
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "An unexpected error occurred. Please try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogException, catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
