"""
Domain exceptions and their translation into JSON error responses.

Services raise the exceptions defined here; the handlers registered by
register_exception_handlers() turn every error into a `{"error": "..."}`
body at the routing boundary.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class MenuCatalogError(Exception):
    """Base class for errors that map to an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(MenuCatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Menu item not found"


class ValidationError(MenuCatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class StoreError(MenuCatalogError):
    """The backing menu document could not be read or written."""

    default_message = "Failed to access menu data"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Render pydantic errors as 'field: message' pairs."""
    parts = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to *app*."""

    @app.exception_handler(MenuCatalogError)
    async def handle_domain_error(request: Request, exc: MenuCatalogError) -> JSONResponse:
        if exc.status_code >= 500:
            # Details stay in the log; clients get the generic message
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
            return _error_response(exc.status_code, exc.default_message)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_errors(exc)
        logger.warning("%s %s invalid request: %s", request.method, request.url.path, message)
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.warning("%s %s -> %s", request.method, request.url.path, exc.status_code)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
