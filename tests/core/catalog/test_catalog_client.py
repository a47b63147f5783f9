"""Tests for the Open Library catalog client."""

import pytest
from pytest_httpserver import HTTPServer

from core.catalog import CatalogAPIError, CatalogClient


@pytest.fixture
def catalog_client(mock_catalog_server: HTTPServer) -> CatalogClient:
    return CatalogClient(base_url=mock_catalog_server.url_for("/search.json"))


@pytest.mark.asyncio
async def test_search_maps_documents(catalog_client: CatalogClient) -> None:
    async with catalog_client:
        suggestions = await catalog_client.search("Dune")

    assert [s.title for s in suggestions] == ["Dune", "Dune Messiah"]
    dune = suggestions[0]
    assert dune.key == "/works/OL893415W"
    assert dune.author == "Frank Herbert"
    assert dune.cover_url == "https://covers.openlibrary.org/b/id/11481354-L.jpg"
    assert suggestions[1].cover_url is None


@pytest.mark.asyncio
async def test_search_sends_query_parameters(httpserver: HTTPServer) -> None:
    httpserver.expect_request(
        "/search.json",
        query_string={"title": "Dune", "author": "Herbert", "limit": "8"},
    ).respond_with_json({"docs": []})

    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        assert await client.search("  Dune ", author="Herbert", limit=8) == []

    httpserver.check_assertions()


@pytest.mark.asyncio
async def test_search_builds_fallback_key(httpserver: HTTPServer) -> None:
    httpserver.expect_request("/search.json").respond_with_json(
        {"docs": [{"title": "Untitled", "cover_i": 7}, {"title": 12}, "junk"]}
    )

    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        [suggestion] = await client.search("Untitled")

    assert suggestion.key == (
        "Untitled____https://covers.openlibrary.org/b/id/7-L.jpg"
    )


@pytest.mark.asyncio
async def test_blank_title_skips_request(httpserver: HTTPServer) -> None:
    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        assert await client.search("   ") == []

    assert len(httpserver.log) == 0


@pytest.mark.asyncio
async def test_search_raises_on_http_error(httpserver: HTTPServer) -> None:
    httpserver.expect_request("/search.json").respond_with_data("down", status=503)

    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        with pytest.raises(CatalogAPIError):
            await client.search("Dune")


@pytest.mark.asyncio
async def test_search_raises_on_invalid_json(httpserver: HTTPServer) -> None:
    httpserver.expect_request("/search.json").respond_with_data("<html>")

    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        with pytest.raises(CatalogAPIError):
            await client.search("Dune")


@pytest.mark.asyncio
async def test_suggest_titles_degrades_to_empty(httpserver: HTTPServer) -> None:
    httpserver.expect_request("/search.json").respond_with_data("down", status=500)

    async with CatalogClient(base_url=httpserver.url_for("/search.json")) as client:
        assert await client.suggest_titles("Dune") == []
        assert await client.find_covers("Dune") == []


@pytest.mark.asyncio
async def test_unreachable_catalog_degrades_to_empty() -> None:
    client = CatalogClient(base_url="http://127.0.0.1:1/search.json", timeout=1.0)
    async with client:
        assert await client.suggest_titles("Dune") == []


@pytest.mark.asyncio
async def test_find_covers_returns_only_urls(catalog_client: CatalogClient) -> None:
    async with catalog_client:
        covers = await catalog_client.find_covers("Dune")

    assert covers == ["https://covers.openlibrary.org/b/id/11481354-L.jpg"]


def test_build_cover_url_requires_integer_id() -> None:
    client = CatalogClient(covers_base_url="https://covers.example.com/b/id/")

    assert client.build_cover_url(42) == "https://covers.example.com/b/id/42-L.jpg"
    assert client.build_cover_url("42") is None
    assert client.build_cover_url(True) is None
    assert client.build_cover_url(None) is None
