"""Error handling for API endpoints."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.literals import ERROR_INTERNAL
from core.constants import ERROR_INVALID_BODY
from core.exceptions import BookshelfError
from core.log import get_logger
from core.models.api.responses import ErrorResponse

logger = get_logger(__name__)


def error_response(status_code: int, code: str, detail: str | None = None) -> JSONResponse:
    """Build a JSON error body with a machine-readable code."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code, detail=detail).model_dump(),
    )


async def bookshelf_error_handler(request: Request, exc: BookshelfError) -> JSONResponse:
    """Map domain exceptions to their status code and error code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return error_response(exc.status_code, exc.code, str(exc))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed bodies with 400 instead of FastAPI's 422."""
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    )
    logger.info(f"{request.method} {request.url.path} rejected: {detail}")
    return error_response(status.HTTP_400_BAD_REQUEST, ERROR_INVALID_BODY, detail)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and answer 500."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_INTERNAL, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an app."""
    app.add_exception_handler(BookshelfError, bookshelf_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, validation_error_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_error_handler)
