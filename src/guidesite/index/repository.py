"""In-memory document repository."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence

from guidesite.config import DEFAULT_EXTENSIONS, DEFAULT_GLYPH, AppConfig
from guidesite.errors import DocumentNotFoundError, SlugCollisionError
from guidesite.ingestion.extractor import extract_metadata
from guidesite.ingestion.scanner import scan_content
from guidesite.models import Document, DocumentSource

LOGGER = logging.getLogger(__name__)


def _listing_key(document: Document) -> tuple:
    number = document.sequence_number
    return (number is None, number if number is not None else 0, document.slug)


class DocumentRepository:
    """Slug-keyed, read-only collection of documents.

    The collection is assembled once at construction; picking up content
    changes means building a new repository.
    """

    def __init__(self, documents: Iterable[Document]) -> None:
        by_slug: Dict[str, Document] = {}
        for document in documents:
            existing = by_slug.get(document.slug)
            if existing is not None:
                raise SlugCollisionError(
                    document.slug,
                    existing.path or Path(existing.slug),
                    document.path or Path(document.slug),
                )
            by_slug[document.slug] = document
        self._by_slug: Mapping[str, Document] = MappingProxyType(by_slug)
        self._ordered = tuple(sorted(by_slug.values(), key=_listing_key))

    @classmethod
    def from_sources(
        cls, sources: Iterable[DocumentSource], *, default_glyph: str = DEFAULT_GLYPH
    ) -> "DocumentRepository":
        documents = (
            Document(
                slug=source.slug,
                raw_text=source.raw_text,
                metadata=extract_metadata(
                    source.raw_text, source.path.name, default_glyph=default_glyph
                ),
                path=source.path,
            )
            for source in sources
        )
        return cls(documents)

    @classmethod
    def from_paths(
        cls,
        roots: Sequence[Path],
        *,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        default_glyph: str = DEFAULT_GLYPH,
    ) -> "DocumentRepository":
        repository = cls.from_sources(
            scan_content(roots, extensions), default_glyph=default_glyph
        )
        LOGGER.info("Loaded %d document(s)", len(repository))
        return repository

    @classmethod
    def from_config(
        cls, config: AppConfig, base_dir: Path | None = None
    ) -> "DocumentRepository":
        return cls.from_paths(
            config.resolve_content_dirs(base_dir),
            extensions=config.extensions,
            default_glyph=config.default_glyph,
        )

    def get_all(self) -> List[Document]:
        """All documents, numbered ones first in sequence order, then by slug."""
        return list(self._ordered)

    def get_by_slug(self, slug: str) -> Document | None:
        """The document for ``slug``, or ``None`` when there is none."""
        return self._by_slug.get(slug)

    def require(self, slug: str) -> Document:
        document = self.get_by_slug(slug)
        if document is None:
            raise DocumentNotFoundError(slug)
        return document

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self) -> Iterator[Document]:
        return iter(self._ordered)
