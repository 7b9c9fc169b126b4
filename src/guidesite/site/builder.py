"""Static site build: one listing page plus one page per document."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from guidesite.config import AppConfig
from guidesite.index.paths import enumerate_static_paths, output_path_for
from guidesite.index.repository import DocumentRepository
from guidesite.rendering.render import highlight_css, render_markdown
from guidesite.web.pages import (
    neighbours,
    render_document_page,
    render_listing_page,
    render_not_found_page,
)

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    pages: int = 0
    degraded: int = 0
    written_files: List[Path] = field(default_factory=list)

    def record(self, path: Path, *, degraded: bool = False) -> None:
        self.written_files.append(path)
        if degraded:
            self.degraded += 1


class SiteBuilder:
    """Writes the rendered site for a repository into an output directory."""

    def __init__(self, repository: DocumentRepository, config: AppConfig) -> None:
        self.repository = repository
        self.config = config

    def build(self, out_dir: Path, *, clean: bool = False) -> BuildStats:
        if clean and out_dir.is_dir():
            LOGGER.info("Removing previous build in %s", out_dir)
            shutil.rmtree(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        stats = BuildStats()
        documents = self.repository.get_all()

        self._write(out_dir / "index.html", render_listing_page(documents, self.config), stats)
        self._write(out_dir / "404.html", render_not_found_page(self.config), stats)
        self._write(
            out_dir / "assets" / "highlight.css",
            highlight_css(self.config.highlight_style),
            stats,
        )

        for slug in enumerate_static_paths(self.repository):
            document = self.repository.require(slug)
            rendered = render_markdown(document.raw_text)
            if rendered.degraded:
                LOGGER.warning("Rendered %s in degraded mode", document.path or slug)
            previous, following = neighbours(documents, slug)
            page = render_document_page(
                document, rendered, self.config, previous=previous, following=following
            )
            self._write(output_path_for(slug, out_dir), page, stats, degraded=rendered.degraded)
            stats.pages += 1

        LOGGER.info("Wrote %d document page(s) to %s", stats.pages, out_dir)
        return stats

    @staticmethod
    def _write(path: Path, content: str, stats: BuildStats, *, degraded: bool = False) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        LOGGER.debug("Wrote %s", path)
        stats.record(path, degraded=degraded)
