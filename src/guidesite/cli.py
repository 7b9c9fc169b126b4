"""Command line interface for guidesite."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from guidesite.config import AppConfig
from guidesite.errors import GuideSiteError
from guidesite.index.repository import DocumentRepository
from guidesite.rendering.render import render_markdown
from guidesite.site.builder import SiteBuilder
from guidesite.web.app import create_app

console = Console()
app = typer.Typer(help="guidesite - static site for a folder of markdown study guides")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _make_config(inputs: Optional[List[Path]], **overrides: object) -> AppConfig:
    config = AppConfig(**{key: value for key, value in overrides.items() if value is not None})
    if inputs:
        config.content_dirs = tuple(inputs)
    return config


def _load_repository(config: AppConfig) -> DocumentRepository:
    try:
        return DocumentRepository.from_config(config, Path.cwd())
    except GuideSiteError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


INPUTS_ARGUMENT = typer.Argument(
    None, help="Content directories (defaults to $GUIDESITE_CONTENT_DIR or ./content)."
)


@app.command()
def build(
    inputs: Optional[List[Path]] = INPUTS_ARGUMENT,
    out: Path = typer.Option(AppConfig().output_dir, "--out", "-o", help="Output directory"),
    base_url: str = typer.Option(AppConfig().base_url, help="URL prefix the site is served under"),
    title: Optional[str] = typer.Option(None, "--title", help="Site title"),
    style: Optional[str] = typer.Option(None, "--style", help="Pygments highlight style"),
    clean: bool = typer.Option(False, "--clean", help="Delete the output directory first"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Render the listing page and every document page to static HTML."""
    _setup_logging(verbose)
    config = _make_config(
        inputs, output_dir=out, base_url=base_url, site_title=title, highlight_style=style
    )
    repository = _load_repository(config)
    if not len(repository):
        console.print("[yellow]No documents found.[/yellow]")

    out_dir = config.resolve_output_dir(Path.cwd())
    console.print(f"Building into [bold]{out_dir}[/bold]...")
    stats = SiteBuilder(repository, config).build(out_dir, clean=clean)
    console.print(
        f"Pages: {stats.pages}, files written: {len(stats.written_files)}, "
        f"degraded: {stats.degraded}"
    )


@app.command("list")
def list_documents(
    inputs: Optional[List[Path]] = INPUTS_ARGUMENT,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the documents in listing order."""
    _setup_logging(verbose)
    repository = _load_repository(_make_config(inputs))
    documents = repository.get_all()
    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Overview")

    for document in documents:
        number = "" if document.sequence_number is None else str(document.sequence_number)
        table.add_row(
            number,
            document.slug,
            f"{document.glyph} {document.title}",
            document.overview[:80],
        )

    console.print(table)


@app.command()
def render(
    slug: str = typer.Argument(..., help="Slug of the document to render"),
    inputs: Optional[List[Path]] = INPUTS_ARGUMENT,
) -> None:
    """Print the rendered HTML body of one document."""
    repository = _load_repository(_make_config(inputs))
    document = repository.get_by_slug(slug)
    if document is None:
        console.print(f"[red]No document with slug {slug!r}.[/red]")
        raise typer.Exit(code=1)
    typer.echo(render_markdown(document.raw_text).html)


@app.command()
def serve(
    inputs: Optional[List[Path]] = INPUTS_ARGUMENT,
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Serve the site from memory with live rendering."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - depends on installed extras
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    _setup_logging(verbose)
    config = _make_config(inputs)
    repository = _load_repository(config)

    console.print(
        f"Serving {len(repository)} document(s) on http://{host}:{port}"
    )
    uvicorn.run(
        create_app(config, Path.cwd(), repository=repository),
        host=host,
        port=port,
        reload=False,
        log_level="debug" if verbose else "info",
    )
