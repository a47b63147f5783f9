"""Domain exceptions for the bookshelf system."""

from core.constants import ERROR_NOT_FOUND, ERROR_UNAUTHORIZED


class BookshelfError(Exception):
    """Base exception for bookshelf errors.

    Every error carries a machine-readable ``code`` that the API returns
    in its error body.
    """

    code = "error"
    status_code = 500

    def __init__(self, message: str = "", code: str | None = None) -> None:
        super().__init__(message or self.__class__.__doc__ or "")
        if code is not None:
            self.code = code


class InvalidFieldError(BookshelfError):
    """Raised when a request field fails validation."""

    status_code = 400

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or f"Invalid value ({code})", code=code)


class NotFoundError(BookshelfError):
    """Raised when a record does not exist or is not owned by the caller."""

    code = ERROR_NOT_FOUND
    status_code = 404


class UnauthorizedError(BookshelfError):
    """Raised when a request has no valid session."""

    code = ERROR_UNAUTHORIZED
    status_code = 401
