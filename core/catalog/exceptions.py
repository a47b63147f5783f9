"""Custom exceptions for the book catalog client."""


class CatalogError(Exception):
    """Base exception for catalog lookup errors."""

    pass


class CatalogAPIError(CatalogError):
    """Raised when the catalog returns an error or an unreadable response."""

    pass


class CatalogTimeoutError(CatalogError):
    """Raised when a catalog request times out."""

    pass
