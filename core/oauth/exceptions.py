"""Custom exceptions for the Google OAuth client."""


class OAuthError(Exception):
    """Raised when the OAuth code exchange or profile lookup fails."""

    pass
