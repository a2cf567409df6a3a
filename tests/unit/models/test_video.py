"""Unit tests for video catalog models."""

from datetime import date

import pytest
from pydantic import ValidationError

from vidshelf.models.video import Author, CatalogDocument, LoaderState, VideoEntry


@pytest.fixture
def entry_payload() -> dict:
    """Catalog entry as served by the endpoint."""
    return {
        "id": "dQw4w9WgXcQ",
        "title": "Never Gonna Give You Up",
        "duration": "3:32",
        "views": 1500,
        "uploadDate": "2024-10-12",
        "author": {"name": "Rick", "avatar": "rick.jpg"},
    }


class TestVideoEntry:
    """Tests for VideoEntry."""

    def test_parse_catalog_entry(self, entry_payload):
        """Test camelCase uploadDate and nested author are parsed."""
        video = VideoEntry.model_validate(entry_payload)

        assert video.id == "dQw4w9WgXcQ"
        assert video.upload_date == date(2024, 10, 12)
        assert video.author == Author(name="Rick", avatar="rick.jpg")
        assert video.thumbnail is None

    def test_empty_id_rejected(self, entry_payload):
        """Test id must not be empty."""
        entry_payload["id"] = ""
        with pytest.raises(ValidationError):
            VideoEntry.model_validate(entry_payload)

    def test_negative_views_rejected(self, entry_payload):
        """Test views must be non-negative."""
        entry_payload["views"] = -1
        with pytest.raises(ValidationError):
            VideoEntry.model_validate(entry_payload)

    def test_missing_author_rejected(self, entry_payload):
        """Test author is required."""
        del entry_payload["author"]
        with pytest.raises(ValidationError):
            VideoEntry.model_validate(entry_payload)

    def test_invalid_date_rejected(self, entry_payload):
        """Test uploadDate must be a calendar date."""
        entry_payload["uploadDate"] = "yesterday"
        with pytest.raises(ValidationError):
            VideoEntry.model_validate(entry_payload)

    def test_timestamp_rejected_when_malformed(self, entry_payload):
        """Test long strings that are not ISO timestamps still fail."""
        entry_payload["uploadDate"] = "12 October 2024"
        with pytest.raises(ValidationError):
            VideoEntry.model_validate(entry_payload)

    def test_frozen(self, entry_payload):
        """Test entries are immutable."""
        video = VideoEntry.model_validate(entry_payload)
        with pytest.raises(ValidationError):
            video.title = "changed"


class TestCatalogDocument:
    """Tests for CatalogDocument."""

    def test_preserves_order(self, entry_payload):
        """Test videos keep source order."""
        second = {**entry_payload, "id": "local.mp4", "title": "Second"}
        document = CatalogDocument.model_validate({"videos": [entry_payload, second]})

        assert [v.title for v in document.videos] == ["Never Gonna Give You Up", "Second"]

    def test_videos_required(self):
        """Test a document without videos is invalid."""
        with pytest.raises(ValidationError):
            CatalogDocument.model_validate({"items": []})


def test_loader_state_values():
    """Test LoaderState string values."""
    assert LoaderState("rendered") is LoaderState.RENDERED
    assert LoaderState.FAILED == "failed"
