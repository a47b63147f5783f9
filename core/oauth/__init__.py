"""Google OAuth login flow."""

from .client import GoogleOAuthClient
from .exceptions import OAuthError

__all__ = ["GoogleOAuthClient", "OAuthError"]
