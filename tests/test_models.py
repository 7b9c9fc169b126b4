"""Tests for core data models."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from guidesite.models import Document, DocumentMetadata, DocumentSource, RenderedOutput


def _document() -> Document:
    return Document(
        slug="spring-boot-setup",
        raw_text="# Setup",
        metadata=DocumentMetadata(
            title="Setup", overview="Install things", glyph="🚀", sequence_number=3
        ),
        path=Path("/content/03-spring-boot-setup.md"),
    )


class TestDocument:
    """Test Document dataclass."""

    def test_metadata_properties(self) -> None:
        """Should expose metadata fields directly."""
        document = _document()

        assert document.title == "Setup"
        assert document.overview == "Install things"
        assert document.glyph == "🚀"
        assert document.sequence_number == 3
        assert document.url_path == "/docs/spring-boot-setup"

    def test_document_is_immutable(self) -> None:
        """Should reject attribute assignment."""
        document = _document()

        with pytest.raises(dataclasses.FrozenInstanceError):
            document.slug = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _document() == _document()


class TestOtherModels:
    """Test the remaining records."""

    def test_metadata_sequence_defaults_to_absent(self) -> None:
        metadata = DocumentMetadata(title="T", overview="", glyph="📄")
        assert metadata.sequence_number is None

    def test_source_is_immutable(self) -> None:
        source = DocumentSource(slug="a", raw_text="x", path=Path("a.md"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            source.raw_text = "y"  # type: ignore[misc]

    def test_rendered_output_defaults(self) -> None:
        output = RenderedOutput(html="<p>x</p>")
        assert output.toc_html == ""
        assert output.degraded is False
