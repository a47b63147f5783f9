"""Async HTTP client for the Bookshelf API."""

from typing import Any

import httpx

from core.constants import COVER_LIMIT, SUGGESTION_LIMIT
from core.log import get_logger
from core.types import JSONRecord

from .exceptions import BookshelfAPIError

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_COOKIE_NAME = "bookshelf_session"
NETWORK_ERROR = "network_error"
INVALID_RESPONSE = "invalid_response"


class BookshelfClient:
    """Thin wrapper over the Bookshelf REST API.

    The session cookie identifies the user. Every method returns decoded
    JSON in the API's camelCase wire format, and every failure is raised as
    :class:`BookshelfAPIError`.
    """

    def __init__(
        self,
        base_url: str,
        session_id: str | None = None,
        cookie_name: str = DEFAULT_COOKIE_NAME,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Server URL, e.g. ``http://localhost:5174``
            session_id: Value of the session cookie
            cookie_name: Name of the session cookie
            timeout: Request timeout in seconds
            transport: Optional transport, e.g. ``httpx.ASGITransport(app)``
        """
        self.base_url = base_url.rstrip("/")
        self.session_id = session_id
        self.cookie_name = cookie_name
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BookshelfClient":
        """Async context manager entry."""
        cookies = {self.cookie_name: self.session_id} if self.session_id else None
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            cookies=cookies,
            transport=self.transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise BookshelfAPIError(0, NETWORK_ERROR, str(e))

        if response.is_error:
            code, detail = self._error_body(response)
            logger.debug(f"{method} {path} -> {response.status_code} {code}")
            raise BookshelfAPIError(response.status_code, code, detail)

        try:
            return response.json()
        except ValueError:
            logger.warning(f"{method} {path} returned a body that is not JSON")
            raise BookshelfAPIError(
                response.status_code, INVALID_RESPONSE, response.text or None
            )

    @staticmethod
    def _error_body(response: httpx.Response) -> tuple[str, str | None]:
        try:
            body = response.json()
        except ValueError:
            return f"http_{response.status_code}", response.text or None
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return body["error"], body.get("detail")
        return f"http_{response.status_code}", None

    # Profile
    async def get_me(self) -> JSONRecord:
        return await self._request("GET", "/api/me")

    async def patch_preferences(self, changes: JSONRecord) -> JSONRecord:
        return await self._request("PATCH", "/api/me/preferences", json=changes)

    async def patch_genres(self, genres: list[str]) -> JSONRecord:
        return await self._request("PATCH", "/api/me/genres", json={"genres": genres})

    # Books
    async def list_books(self) -> list[JSONRecord]:
        return await self._request("GET", "/api/books")

    async def create_book(self, data: JSONRecord) -> JSONRecord:
        return await self._request("POST", "/api/books", json=data)

    async def patch_book(self, book_id: int, patch: JSONRecord) -> JSONRecord:
        return await self._request("PATCH", f"/api/books/{book_id}", json=patch)

    async def delete_book(self, book_id: int) -> None:
        await self._request("DELETE", f"/api/books/{book_id}")

    # Catalog
    async def suggest_titles(
        self, title: str, author: str | None = None, limit: int = SUGGESTION_LIMIT
    ) -> list[JSONRecord]:
        params: dict[str, Any] = {"title": title, "limit": limit}
        if author:
            params["author"] = author
        return await self._request("GET", "/api/catalog/suggestions", params=params)

    async def find_covers(
        self, title: str, author: str | None = None, limit: int = COVER_LIMIT
    ) -> list[str]:
        params: dict[str, Any] = {"title": title, "limit": limit}
        if author:
            params["author"] = author
        return await self._request("GET", "/api/catalog/covers", params=params)

    async def logout(self) -> None:
        await self._request("POST", "/auth/logout")
