"""Google OAuth 2.0 authorization code client."""

from typing import Any
from urllib.parse import urlencode

import httpx

from core.log import get_logger
from core.models.domain.user import GoogleProfile

from .exceptions import OAuthError

logger = get_logger(__name__)

SCOPES = ("openid", "email", "profile")


class GoogleOAuthClient:
    """Minimal Google OAuth client for the authorization code flow."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        auth_url: str,
        token_url: str,
        userinfo_url: str,
        timeout: float = 10.0,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.auth_url = auth_url
        self.token_url = token_url
        self.userinfo_url = userinfo_url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def __aenter__(self) -> "GoogleOAuthClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def authorization_url(self, state: str) -> str:
        """Build the Google consent screen URL."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(SCOPES),
            "state": state,
            "prompt": "select_account",
        }
        return f"{self.auth_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Raises:
            OAuthError: If Google rejects the code or cannot be reached
        """
        data = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "grant_type": "authorization_code",
        }
        payload = await self._request("POST", self.token_url, data=data)
        token = payload.get("access_token")
        if not isinstance(token, str) or not token:
            raise OAuthError("Token response has no access_token")
        return token

    async def fetch_profile(self, access_token: str) -> GoogleProfile:
        """Fetch the signed-in user's profile.

        Raises:
            OAuthError: If the userinfo request fails or lacks a subject
        """
        payload = await self._request(
            "GET",
            self.userinfo_url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if not payload.get("sub"):
            raise OAuthError("Userinfo response has no subject")
        return GoogleProfile.from_userinfo(payload)

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self.client.request(method, url, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"OAuth request to {url} failed: HTTP {e.response.status_code}")
            raise OAuthError(f"HTTP {e.response.status_code} from {url}")
        except httpx.RequestError as e:
            logger.warning(f"OAuth request to {url} failed: {e}")
            raise OAuthError(f"Request to {url} failed: {e}")
        except ValueError as e:
            raise OAuthError(f"Invalid JSON from {url}: {e}")

        if not isinstance(payload, dict):
            raise OAuthError(f"Unexpected payload from {url}")
        return payload
