"""Shared fixtures for gallery service tests."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from bs4 import BeautifulSoup

from vidshelf.infrastructure.http_client import HTTPClient
from vidshelf.models.video import Author, VideoEntry

PAGE_HTML = """
<html>
  <body>
    <header class="header__icons"></header>
    <main><div id="videosContainer"></div></main>
  </body>
</html>
"""


@pytest.fixture
def document() -> BeautifulSoup:
    """Host page with the gallery container."""
    return BeautifulSoup(PAGE_HTML, "html.parser")


@pytest.fixture
def mock_http_client() -> HTTPClient:
    """Create a mock HTTP client."""
    client = MagicMock(spec=HTTPClient)
    client.get = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def video() -> VideoEntry:
    """A dynamic YouTube entry."""
    return VideoEntry(
        id="abc12345678",
        title="Cats & Dogs",
        thumbnail="https://img.youtube.com/vi/abc12345678/mqdefault.jpg",
        duration="4:05",
        views=1500,
        upload_date=date(2026, 10, 8),
        author=Author(name="Pet Channel", avatar="pets.jpg"),
    )


@pytest.fixture
def catalog_payload() -> dict:
    """Catalog document mixing YouTube URLs, IDs and local files."""
    return {
        "videos": [
            {
                "id": "https://www.youtube.com/watch?v=abc12345678",
                "title": "First",
                "views": 500,
                "uploadDate": "2026-10-08",
                "author": {"name": "Alice", "avatar": "alice.jpg"},
            },
            {
                "id": "https://youtu.be/xyz98765432",
                "title": "Second",
                "thumbnail": "custom.jpg",
                "duration": "1:00",
                "views": 2_500_000,
                "uploadDate": "2025-09-13",
                "author": {"name": "Bob", "avatar": "bob.jpg"},
            },
            {
                "id": "clip.mp4",
                "title": "Third",
                "thumbnail": "clip.jpg",
                "views": 1500,
                "uploadDate": "2026-08-19",
                "author": {"name": "Carol", "avatar": "carol.jpg"},
            },
        ]
    }


def create_mock_response(json_data=None, status_code=200, json_error=None):
    """Create a mock HTTP response.

    Args:
        json_data: Data to return from json()
        status_code: HTTP status code
        json_error: Exception raised by json() instead

    Returns:
        Mock response object
    """
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory fixture for mock HTTP responses."""
    return create_mock_response
