"""Tests for utility functions."""

from pathlib import Path

import pytest

from nanonets.utils import expand_path, form_value, guess_content_type


class TestGuessContentType:
    """Tests for guess_content_type function."""

    def test_known_types(self) -> None:
        """Test that common document types are recognized."""
        assert guess_content_type("invoice.pdf") == "application/pdf"
        assert guess_content_type("scan.png") == "image/png"
        assert guess_content_type(Path("/path/to/photo.jpg")) == "image/jpeg"

    def test_unknown_type_falls_back(self) -> None:
        """Test that unknown extensions fall back to octet-stream."""
        assert guess_content_type("document") == "application/octet-stream"
        assert guess_content_type("archive.unknownext") == "application/octet-stream"


class TestExpandPath:
    """Tests for expand_path function."""

    def test_fills_template(self) -> None:
        """Test that every hole is filled."""
        path = expand_path(
            "/workflows/{workflow_id}/documents/{document_id}",
            {"workflow_id": "wf", "document_id": "doc"},
        )
        assert path == "/workflows/wf/documents/doc"

    def test_escapes_values(self) -> None:
        """Test that values are encoded as a single segment."""
        assert expand_path("/workflows/{workflow_id}", {"workflow_id": "a/b c"}) == "/workflows/a%2Fb%20c"

    def test_non_string_values(self) -> None:
        """Test that numeric IDs are rendered as strings."""
        assert expand_path("/pages/{page_id}", {"page_id": 3}) == "/pages/3"

    def test_missing_param(self) -> None:
        """Test that a missing value names the parameter."""
        with pytest.raises(ValueError) as exc_info:
            expand_path("/workflows/{workflow_id}", {})
        assert "workflow_id" in str(exc_info.value)

    def test_no_params(self) -> None:
        """Test a template without holes."""
        assert expand_path("/workflows/types", {}) == "/workflows/types"


class TestFormValue:
    """Tests for form_value function."""

    def test_booleans(self) -> None:
        """Test that booleans are lowercase."""
        assert form_value(True) == "true"
        assert form_value(False) == "false"

    def test_other_values(self) -> None:
        """Test that other values are stringified."""
        assert form_value("acme") == "acme"
        assert form_value(7) == "7"
