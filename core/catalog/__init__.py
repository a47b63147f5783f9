"""External book catalog lookups (Open Library)."""

from .client import CatalogClient
from .exceptions import CatalogAPIError, CatalogError, CatalogTimeoutError

__all__ = [
    "CatalogAPIError",
    "CatalogClient",
    "CatalogError",
    "CatalogTimeoutError",
]
