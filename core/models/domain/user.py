"""User domain models."""

from pydantic import BaseModel, Field


class GoogleProfile(BaseModel):
    """Identity returned by Google after a successful login."""

    google_id: str = Field(..., min_length=1, description="Google subject ID")
    email: str | None = None
    name: str = Field(..., min_length=1)
    picture: str | None = None

    @classmethod
    def from_userinfo(cls, userinfo: dict) -> "GoogleProfile":
        """Build a profile from an OpenID Connect userinfo payload.

        The display name falls back to the email, then to ``"User"``.
        """
        email = userinfo.get("email") or None
        return cls(
            google_id=str(userinfo["sub"]),
            email=email,
            name=userinfo.get("name") or email or "User",
            picture=userinfo.get("picture") or None,
        )
