"""Static path enumeration for pre-rendering one page per document."""

from __future__ import annotations

from pathlib import Path
from typing import List

from guidesite.index.repository import DocumentRepository


def enumerate_static_paths(repository: DocumentRepository) -> List[str]:
    """Every slug the host must pre-render, eagerly and unfiltered."""
    return [document.slug for document in repository.get_all()]


def doc_url(slug: str, base_url: str = "/") -> str:
    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}docs/{slug}"


def output_path_for(slug: str, out_dir: Path) -> Path:
    """File a static build writes the page for ``slug`` to."""
    return out_dir / "docs" / slug / "index.html"
