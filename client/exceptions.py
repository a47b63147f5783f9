"""Custom exceptions for the Bookshelf API client."""


class BookshelfAPIError(Exception):
    """Raised when the Bookshelf API answers with an error or cannot be reached.

    Attributes:
        status: HTTP status code, or 0 when no response was received
        code: Machine-readable error code from the response body
    """

    def __init__(self, status: int, code: str, detail: str | None = None) -> None:
        super().__init__(f"{status} {code}" + (f": {detail}" if detail else ""))
        self.status = status
        self.code = code
        self.detail = detail
