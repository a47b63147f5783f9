"""Tests for the Google login router."""

from urllib.parse import parse_qs, urlparse

from fastapi.testclient import TestClient
from pytest_httpserver import HTTPServer
from sqlmodel import Session

from api.literals import OAUTH_STATE_COOKIE
from core.database.repository import AuthSessionRepository, UserRepository


def test_login_redirects_to_google(client: TestClient) -> None:
    response = client.get("/auth/google")

    assert response.status_code == 302
    location = urlparse(response.headers["location"])
    assert location.netloc == "accounts.google.test"
    state = parse_qs(location.query)["state"][0]
    assert client.cookies.get(OAUTH_STATE_COOKIE) == state


def test_callback_creates_user_and_session(
    client: TestClient, mock_google_server: HTTPServer, mock_db_session: Session
) -> None:
    client.cookies.set(OAUTH_STATE_COOKIE, "state-abc")

    response = client.get(
        "/auth/google/callback", params={"code": "auth-code", "state": "state-abc"}
    )

    assert response.status_code == 302
    assert response.headers["location"] == "http://client.test/app"
    session_id = client.cookies.get("bookshelf_session")
    assert session_id

    user = UserRepository(mock_db_session).get_by_google_id("google-789")
    assert user is not None
    assert user.name == "New Reader"
    auth_session = AuthSessionRepository(mock_db_session).get_by_id(session_id)
    assert auth_session is not None
    assert auth_session.user_id == user.user_id

    me = client.get("/api/me")
    assert me.status_code == 200
    assert me.json()["email"] == "new.reader@example.com"


def test_callback_with_state_mismatch_redirects_to_login(
    client: TestClient, mock_google_server: HTTPServer
) -> None:
    client.cookies.set(OAUTH_STATE_COOKIE, "expected")

    response = client.get(
        "/auth/google/callback", params={"code": "auth-code", "state": "forged"}
    )

    assert response.status_code == 302
    assert response.headers["location"] == "http://client.test/login"
    assert client.cookies.get("bookshelf_session") is None
    assert len(mock_google_server.log) == 0


def test_callback_without_code_redirects_to_login(client: TestClient) -> None:
    response = client.get("/auth/google/callback", params={"error": "access_denied"})

    assert response.status_code == 302
    assert response.headers["location"] == "http://client.test/login"


def test_callback_with_rejected_code_redirects_to_login(
    client: TestClient, httpserver: HTTPServer
) -> None:
    httpserver.expect_request("/token", method="POST").respond_with_json(
        {"error": "invalid_grant"}, status=400
    )
    client.cookies.set(OAUTH_STATE_COOKIE, "state-abc")

    response = client.get(
        "/auth/google/callback", params={"code": "stale", "state": "state-abc"}
    )

    assert response.headers["location"] == "http://client.test/login"


def test_logout(auth_client: TestClient) -> None:
    assert auth_client.get("/api/me").status_code == 200

    response = auth_client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert auth_client.get("/api/me").status_code == 401


def test_logout_without_session(client: TestClient) -> None:
    response = client.post("/auth/logout")

    assert response.json() == {"ok": True}
