"""Fixtures for client library tests."""

import pytest

from tests.utils.fake_api import FakeBookshelfAPI


@pytest.fixture
def fake_api() -> FakeBookshelfAPI:
    return FakeBookshelfAPI()
