"""Core guidesite data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DocumentSource:
    """Raw text of one content file, keyed by its slug."""

    slug: str
    raw_text: str
    path: Path


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Listing metadata derived from a document's text and filename."""

    title: str
    overview: str
    glyph: str
    sequence_number: int | None = None


@dataclass(frozen=True, slots=True)
class Document:
    """A source file paired with its derived metadata."""

    slug: str
    raw_text: str
    metadata: DocumentMetadata
    path: Path | None = None

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def overview(self) -> str:
        return self.metadata.overview

    @property
    def glyph(self) -> str:
        return self.metadata.glyph

    @property
    def sequence_number(self) -> int | None:
        return self.metadata.sequence_number

    @property
    def url_path(self) -> str:
        """Page path relative to the site root; see ``index.paths.doc_url`` for prefixed URLs."""
        return f"/docs/{self.slug}"


@dataclass(frozen=True, slots=True)
class RenderedOutput:
    """HTML fragment produced from a document body."""

    html: str
    toc_html: str = ""
    degraded: bool = False
