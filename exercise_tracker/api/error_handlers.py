"""Error Handlers: global exception handlers for the Exercise Tracker API.

Invariants:
    - ExerciseTrackerError -> its http_status with {"error": message}
    - Framework HTTPException (404, 405, malformed form body) -> same status, {"error": detail}
    - RequestValidationError -> 400 with the first field error
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Four handler layers: domain (ExerciseTrackerError), framework HTTPException,
      validation (FastAPI/Pydantic), catch-all (Exception)
    - 4xx logged at WARNING, 5xx at ERROR; store failures already carry a traceback
      from translate_db_errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.core.errors import ExerciseTrackerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all Exercise Tracker domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.code}: {exc}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Reshape framework errors (bad multipart, unknown route, 405) to {"error": ...}."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI parameter validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data"}
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc not in ("body", "query", "path"))
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return {"error": message}
