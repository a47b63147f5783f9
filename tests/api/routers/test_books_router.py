"""Tests for the books router."""

from typing import Any

import pytest
from fastapi.testclient import TestClient


def _create(client: TestClient, **body: Any) -> dict[str, Any]:
    body.setdefault("title", "Dune")
    response = client.post("/api/books", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_requires_session(client: TestClient) -> None:
    for method, path in [
        ("GET", "/api/books"),
        ("POST", "/api/books"),
        ("PATCH", "/api/books/1"),
        ("DELETE", "/api/books/1"),
    ]:
        response = client.request(method, path, json={"title": "x"})
        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"


def test_unknown_session_cookie_is_unauthorized(client: TestClient) -> None:
    client.cookies.set("bookshelf_session", "forged")
    response = client.get("/api/books")

    assert response.status_code == 401


def test_create_book_wire_format(auth_client: TestClient) -> None:
    book = _create(
        auth_client,
        author="Frank Herbert",
        coverUrl="https://example.com/dune.jpg",
        genre="Sci-Fi",
    )

    assert set(book) == {
        "id",
        "userId",
        "index",
        "title",
        "author",
        "coverUrl",
        "status",
        "downloaded",
        "rating",
        "date",
        "finishedDate",
        "genre",
        "language",
        "comment",
        "createdAt",
        "updatedAt",
    }
    assert book["coverUrl"] == "https://example.com/dune.jpg"
    assert book["status"] == "to_read"
    assert book["index"] == 1


def test_first_two_creates_get_indices_one_and_two(auth_client: TestClient) -> None:
    assert _create(auth_client, title="One")["index"] == 1
    assert _create(auth_client, title="Two")["index"] == 2


def test_list_books_newest_first(auth_client: TestClient) -> None:
    first = _create(auth_client, title="First")
    second = _create(auth_client, title="Second")

    response = auth_client.get("/api/books")

    assert response.status_code == 200
    assert [book["id"] for book in response.json()] == [second["id"], first["id"]]


def test_list_books_only_shows_own_books(
    auth_client: TestClient, other_client: TestClient
) -> None:
    _create(auth_client, title="Mine")

    assert other_client.get("/api/books").json() == []


@pytest.mark.parametrize(
    "body, error",
    [
        ({"title": ""}, "invalid_title"),
        ({"title": "Dune", "status": "finished"}, "invalid_status"),
        ({"title": "Dune", "finishedDate": "next week"}, "invalid_finishedDate"),
        ({"title": ["Dune"]}, "invalid_body"),
    ],
)
def test_create_book_validation(
    auth_client: TestClient, body: dict[str, Any], error: str
) -> None:
    response = auth_client.post("/api/books", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == error
    assert auth_client.get("/api/books").json() == []


def test_create_rejects_non_object_body(auth_client: TestClient) -> None:
    response = auth_client.post("/api/books", json=["Dune"])

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_body"


def test_patch_rating_non_numeric_is_zero(auth_client: TestClient) -> None:
    book = _create(auth_client, rating=4)

    response = auth_client.patch(f"/api/books/{book['id']}", json={"rating": "abc"})

    assert response.status_code == 200
    assert response.json()["rating"] == 0


@pytest.mark.parametrize(
    "patch, field",
    [
        ({"rating": 10**400}, "rating"),
        ({"rating": "0x" + "f" * 300}, "rating"),
        ({"index": 1e300}, "index"),
        ({"index": 10**30}, "index"),
    ],
)
def test_patch_out_of_range_numbers_are_zero(
    auth_client: TestClient, patch: dict[str, Any], field: str
) -> None:
    book = _create(auth_client, rating=4)

    response = auth_client.patch(f"/api/books/{book['id']}", json=patch)

    assert response.status_code == 200, response.text
    assert response.json()[field] == 0


def test_create_with_huge_rating_is_zero(auth_client: TestClient) -> None:
    assert _create(auth_client, rating=10**400)["rating"] == 0


def test_patch_downloaded_is_coerced(auth_client: TestClient) -> None:
    book = _create(auth_client)

    response = auth_client.patch(f"/api/books/{book['id']}", json={"downloaded": "no"})

    assert response.json()["downloaded"] is True


def test_patch_finished_date(auth_client: TestClient) -> None:
    book = _create(auth_client)

    response = auth_client.patch(
        f"/api/books/{book['id']}", json={"finishedDate": "2024-03-10"}
    )
    assert response.status_code == 200
    assert response.json()["finishedDate"] == "2024-03-10T00:00:00+00:00"

    response = auth_client.patch(f"/api/books/{book['id']}", json={"finishedDate": None})
    assert response.json()["finishedDate"] is None


def test_patch_invalid_finished_date_changes_nothing(auth_client: TestClient) -> None:
    book = _create(auth_client, rating=2)

    response = auth_client.patch(
        f"/api/books/{book['id']}",
        json={"rating": 5, "finishedDate": "not a date"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "invalid_finishedDate",
        "detail": "Could not parse finishedDate: 'not a date'",
    }
    [stored] = auth_client.get("/api/books").json()
    assert stored == book


def test_patch_ignores_unknown_fields(auth_client: TestClient) -> None:
    book = _create(auth_client)

    response = auth_client.patch(
        f"/api/books/{book['id']}", json={"userId": 999, "pages": 300, "index": 4}
    )

    assert response.status_code == 200
    assert response.json()["userId"] == book["userId"]
    assert response.json()["index"] == 4


def test_cross_user_patch_and_delete_are_not_found(
    auth_client: TestClient, other_client: TestClient
) -> None:
    book = _create(auth_client)

    patch = other_client.patch(f"/api/books/{book['id']}", json={"rating": 1})
    delete = other_client.delete(f"/api/books/{book['id']}")

    assert patch.status_code == 404
    assert patch.json()["error"] == "not_found"
    assert delete.status_code == 404
    assert auth_client.get("/api/books").json() == [book]


def test_missing_and_malformed_ids_are_not_found(auth_client: TestClient) -> None:
    assert auth_client.patch("/api/books/12345", json={}).status_code == 404
    assert auth_client.patch("/api/books/abc", json={}).status_code == 404
    assert auth_client.delete("/api/books/abc").status_code == 404


def test_delete_book(auth_client: TestClient) -> None:
    book = _create(auth_client)

    response = auth_client.delete(f"/api/books/{book['id']}")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert auth_client.get("/api/books").json() == []
    assert auth_client.delete(f"/api/books/{book['id']}").status_code == 404
