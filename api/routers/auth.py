"""Google login and logout router."""

import secrets

from fastapi import APIRouter, Request, Response
from fastapi.responses import RedirectResponse

from api.dependencies import AuthServiceDep, DBSession, OAuthDep, SettingsDep
from api.literals import (
    AUTH_BASE_PATH,
    CLIENT_APP_PATH,
    CLIENT_LOGIN_PATH,
    OAUTH_STATE_COOKIE,
    OAUTH_STATE_MAX_AGE,
)
from core.log import get_logger
from core.models.api.responses import OkResponse
from core.oauth import OAuthError

logger = get_logger(__name__)

router = APIRouter(prefix=AUTH_BASE_PATH, tags=["auth"])


@router.get("/google")
async def login_with_google(settings: SettingsDep, oauth: OAuthDep) -> RedirectResponse:
    """Redirect the browser to Google's consent screen."""
    state = secrets.token_urlsafe(16)
    response = RedirectResponse(oauth.authorization_url(state), status_code=302)
    response.set_cookie(
        OAUTH_STATE_COOKIE,
        state,
        max_age=OAUTH_STATE_MAX_AGE,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return response


@router.get("/google/callback")
async def google_callback(
    request: Request,
    settings: SettingsDep,
    oauth: OAuthDep,
    db: DBSession,
    auth_service: AuthServiceDep,
    code: str | None = None,
    state: str | None = None,
) -> RedirectResponse:
    """Finish the Google login, open a session and return to the client."""
    client_url = settings.client_url.rstrip("/")
    failure = RedirectResponse(f"{client_url}{CLIENT_LOGIN_PATH}", status_code=302)
    failure.delete_cookie(OAUTH_STATE_COOKIE)

    expected_state = request.cookies.get(OAUTH_STATE_COOKIE)
    if not code or not state or not expected_state:
        logger.warning("OAuth callback without code or state")
        return failure
    if not secrets.compare_digest(state, expected_state):
        logger.warning("OAuth callback state mismatch")
        return failure

    try:
        token = await oauth.exchange_code(code)
        profile = await oauth.fetch_profile(token)
    except OAuthError as e:
        logger.warning(f"Google login failed: {e}")
        return failure

    auth_session = auth_service.login(db, profile)

    response = RedirectResponse(f"{client_url}{CLIENT_APP_PATH}", status_code=302)
    response.set_cookie(
        settings.session_cookie_name,
        auth_session.session_id,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response


@router.post("/logout", response_model=OkResponse)
async def logout(
    request: Request,
    response: Response,
    settings: SettingsDep,
    db: DBSession,
    auth_service: AuthServiceDep,
) -> OkResponse:
    """Close the current session and clear its cookie."""
    auth_service.logout(db, request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name)
    return OkResponse()
