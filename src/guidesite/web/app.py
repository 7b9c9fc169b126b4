"""FastAPI application serving the study-guide site."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from guidesite import __version__
from guidesite.config import AppConfig
from guidesite.index.paths import doc_url
from guidesite.index.repository import DocumentRepository
from guidesite.models import Document
from guidesite.rendering.render import highlight_css, render_markdown
from guidesite.web.pages import (
    neighbours,
    render_document_page,
    render_listing_page,
    render_not_found_page,
)

LOGGER = logging.getLogger(__name__)


class DocumentSummary(BaseModel):
    slug: str
    title: str
    overview: str
    glyph: str
    sequence_number: int | None = None
    url: str

    @classmethod
    def from_document(cls, document: Document, base_url: str = "/") -> "DocumentSummary":
        return cls(
            slug=document.slug,
            title=document.title,
            overview=document.overview,
            glyph=document.glyph,
            sequence_number=document.sequence_number,
            url=doc_url(document.slug, base_url),
        )


class DocumentDetail(DocumentSummary):
    html: str
    toc_html: str = ""


def create_app(
    config: AppConfig | None = None,
    base_dir: Path | None = None,
    repository: DocumentRepository | None = None,
) -> FastAPI:
    """Build the web app; the repository is scanned on the first request."""
    config = config or AppConfig()
    app = FastAPI(title="guidesite", version=__version__)
    app.state.config = config
    app.state.base_dir = base_dir
    app.state.repository = repository
    app.state.repository_lock = threading.Lock()

    @app.on_event("startup")
    async def startup_event() -> None:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404 and not request.url.path.startswith("/api/"):
            return HTMLResponse(
                render_not_found_page(request.app.state.config, request.url.path),
                status_code=404,
            )
        return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)

    @app.get("/", response_class=HTMLResponse)
    async def listing(repository: DocumentRepository = Depends(get_repository)) -> HTMLResponse:
        return HTMLResponse(render_listing_page(repository.get_all(), config))

    @app.get("/docs/{slug}", response_class=HTMLResponse)
    async def document_page(
        slug: str, repository: DocumentRepository = Depends(get_repository)
    ) -> HTMLResponse:
        document = _lookup(repository, slug)
        previous, following = neighbours(repository.get_all(), slug)
        page = render_document_page(
            document,
            render_markdown(document.raw_text),
            config,
            previous=previous,
            following=following,
        )
        return HTMLResponse(page)

    @app.get("/assets/highlight.css", response_class=PlainTextResponse)
    async def stylesheet() -> PlainTextResponse:
        return PlainTextResponse(highlight_css(config.highlight_style), media_type="text/css")

    @app.get("/api/docs")
    async def list_documents(
        repository: DocumentRepository = Depends(get_repository),
    ) -> dict[str, List[DocumentSummary]]:
        documents = repository.get_all()
        return {"documents": [DocumentSummary.from_document(doc, config.base_url) for doc in documents]}

    @app.get("/api/docs/{slug}")
    async def get_document(
        slug: str, repository: DocumentRepository = Depends(get_repository)
    ) -> DocumentDetail:
        document = _lookup(repository, slug)
        rendered = render_markdown(document.raw_text)
        summary = DocumentSummary.from_document(document, config.base_url)
        return DocumentDetail(**summary.model_dump(), html=rendered.html, toc_html=rendered.toc_html)

    return app


def get_repository(request: Request) -> DocumentRepository:
    """Build the repository once per app and reuse it for every request."""
    state: Any = request.app.state
    if state.repository is None:
        with state.repository_lock:
            if state.repository is None:
                LOGGER.info("Building document repository")
                state.repository = DocumentRepository.from_config(state.config, state.base_dir)
    return state.repository


def _lookup(repository: DocumentRepository, slug: str) -> Document:
    document = repository.get_by_slug(slug)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {slug}")
    return document
