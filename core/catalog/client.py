"""Open Library search client for title and cover suggestions."""

from typing import Any

import httpx

from core.constants import COVER_LIMIT, SUGGESTION_LIMIT
from core.log import get_logger
from core.models.domain.catalog import CatalogSuggestion

from .constants import (
    CATALOG_API_BASE_URL,
    CATALOG_COVERS_BASE_URL,
    COVER_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from .exceptions import CatalogAPIError, CatalogTimeoutError

logger = get_logger(__name__)


class CatalogClient:
    """Client for the Open Library search API.

    The catalog is an untrusted, best-effort dependency. ``search`` raises
    on failure, while ``suggest_titles`` and ``find_covers`` log the
    failure and return an empty list.
    """

    def __init__(
        self,
        base_url: str = CATALOG_API_BASE_URL,
        covers_base_url: str = CATALOG_COVERS_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize catalog client.

        Args:
            base_url: Open Library search endpoint
            covers_base_url: Base URL of cover images
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.covers_base_url = covers_base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, creating it on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                headers={"User-Agent": DEFAULT_USER_AGENT},
            )
        return self._client

    async def __aenter__(self) -> "CatalogClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_cover_url(self, cover_id: Any) -> str | None:
        """Build a large cover image URL from an Open Library cover ID."""
        if isinstance(cover_id, bool) or not isinstance(cover_id, int):
            return None
        return f"{self.covers_base_url}/{cover_id}-{COVER_SIZE}.jpg"

    async def search(
        self, title: str, author: str | None = None, limit: int = SUGGESTION_LIMIT
    ) -> list[CatalogSuggestion]:
        """Search the catalog by title and optional author.

        Args:
            title: Free-text title query
            author: Optional author to narrow the search
            limit: Maximum number of documents to request

        Returns:
            Suggestions with a non-empty title, in catalog order

        Raises:
            CatalogAPIError: If the request fails or the payload is unreadable
            CatalogTimeoutError: If the request times out
        """
        query = title.strip()
        if not query:
            return []

        params: dict[str, str | int] = {"title": query, "limit": limit}
        if author:
            params["author"] = author

        logger.debug(f"Searching catalog for {query!r}")
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Catalog returned HTTP {e.response.status_code}")
            raise CatalogAPIError(f"HTTP {e.response.status_code}: {e}")
        except httpx.TimeoutException:
            logger.warning(f"Timeout searching catalog for {query!r}")
            raise CatalogTimeoutError(f"Timeout searching for {query!r}")
        except httpx.RequestError as e:
            logger.warning(f"Request error searching catalog: {e}")
            raise CatalogAPIError(f"Request failed: {e}")
        except ValueError as e:
            raise CatalogAPIError(f"Invalid JSON from catalog: {e}")

        return self._parse_docs(payload)

    def _parse_docs(self, payload: Any) -> list[CatalogSuggestion]:
        docs = payload.get("docs") if isinstance(payload, dict) else None
        if not isinstance(docs, list):
            return []

        suggestions = []
        for doc in docs:
            if not isinstance(doc, dict):
                continue
            title = doc.get("title") if isinstance(doc.get("title"), str) else ""
            if not title:
                continue

            authors = doc.get("author_name")
            author = (
                authors[0]
                if isinstance(authors, list) and authors and isinstance(authors[0], str)
                else None
            )
            cover_url = self.build_cover_url(doc.get("cover_i"))
            key = str(doc.get("key") or f"{title}__{author or ''}__{cover_url or ''}")
            suggestions.append(
                CatalogSuggestion(
                    key=key, title=title, author=author, cover_url=cover_url
                )
            )
        return suggestions

    async def suggest_titles(
        self, title: str, author: str | None = None, limit: int = SUGGESTION_LIMIT
    ) -> list[CatalogSuggestion]:
        """Title suggestions; any failure yields an empty list."""
        try:
            return await self.search(title, author, limit)
        except (CatalogAPIError, CatalogTimeoutError) as e:
            logger.warning(f"Title suggestions unavailable: {e}")
            return []

    async def find_covers(
        self, title: str, author: str | None = None, limit: int = COVER_LIMIT
    ) -> list[str]:
        """Cover image URLs for a title; any failure yields an empty list."""
        suggestions = await self.suggest_titles(title, author, limit)
        return [s.cover_url for s in suggestions if s.cover_url]
