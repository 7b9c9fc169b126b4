"""HTML page assembly for the listing, document and not-found pages."""

from __future__ import annotations

from functools import lru_cache
from html import escape
from importlib.resources import files
from string import Template
from typing import Sequence

from guidesite.config import AppConfig
from guidesite.index.paths import doc_url
from guidesite.models import Document, RenderedOutput


@lru_cache(maxsize=None)
def _load_template(name: str) -> Template:
    template = files("guidesite.web").joinpath("templates", f"{name}.html")
    return Template(template.read_text(encoding="utf-8"))


def _page(config: AppConfig, *, page_title: str, body_class: str, content: str) -> str:
    return _load_template("page").substitute(
        page_title=escape(page_title),
        site_title=escape(config.site_title),
        base_url=escape(config.base_url),
        body_class=body_class,
        content=content,
    )


def _card(document: Document, config: AppConfig) -> str:
    badge = ""
    if document.sequence_number is not None:
        badge = f'<span class="doc-badge">#{document.sequence_number}</span>'
    overview = ""
    if document.overview:
        overview = f'<p class="doc-overview">{escape(document.overview)}</p>'
    return _load_template("card").substitute(
        url=escape(doc_url(document.slug, config.base_url)),
        badge=badge,
        glyph=escape(document.glyph),
        title=escape(document.title),
        overview=overview,
    )


def render_listing_page(documents: Sequence[Document], config: AppConfig) -> str:
    content = _load_template("listing").substitute(
        site_title=escape(config.site_title),
        doc_count=len(documents),
        cards="\n".join(_card(document, config) for document in documents),
    )
    return _page(config, page_title=config.site_title, body_class="listing", content=content)


def _neighbour_link(document: Document | None, config: AppConfig, rel: str) -> str:
    if document is None:
        return ""
    label = "&larr; " + escape(document.title) if rel == "prev" else escape(document.title) + " &rarr;"
    return f'<a rel="{rel}" href="{escape(doc_url(document.slug, config.base_url))}">{label}</a>'


def render_document_page(
    document: Document,
    rendered: RenderedOutput,
    config: AppConfig,
    *,
    previous: Document | None = None,
    following: Document | None = None,
) -> str:
    content = _load_template("document").substitute(
        base_url=escape(config.base_url),
        site_title=escape(config.site_title),
        glyph=escape(document.glyph),
        title=escape(document.title),
        body=rendered.html,
        previous_link=_neighbour_link(previous, config, "prev"),
        next_link=_neighbour_link(following, config, "next"),
    )
    return _page(
        config,
        page_title=f"{document.title} | {config.site_title}",
        body_class="document",
        content=content,
    )


def render_not_found_page(config: AppConfig, path: str = "") -> str:
    content = _load_template("not_found").substitute(
        path=escape(path),
        base_url=escape(config.base_url),
        site_title=escape(config.site_title),
    )
    return _page(config, page_title=f"Not found | {config.site_title}", body_class="not-found", content=content)


def neighbours(
    documents: Sequence[Document], slug: str
) -> tuple[Document | None, Document | None]:
    """Documents immediately before and after ``slug`` in listing order."""
    for index, document in enumerate(documents):
        if document.slug == slug:
            previous = documents[index - 1] if index > 0 else None
            following = documents[index + 1] if index + 1 < len(documents) else None
            return previous, following
    return None, None
