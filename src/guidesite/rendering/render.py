"""Markdown to HTML rendering.

Uses Python-Markdown with the table, fenced-code and Pygments highlighting
extensions. Fences with an unknown or missing language fall back to Pygments'
plain ``text`` lexer, so they still render as ordinary code blocks.
"""

from __future__ import annotations

import html
import logging

import markdown
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from guidesite.ingestion.frontmatter import strip_front_matter
from guidesite.models import RenderedOutput

LOGGER = logging.getLogger(__name__)

CODE_CSS_CLASS = "codehilite"

MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "codehilite",
    "sane_lists",
    "toc",
    "attr_list",
]

EXTENSION_CONFIGS = {
    "codehilite": {
        "css_class": CODE_CSS_CLASS,
        "guess_lang": False,
        "use_pygments": True,
    },
}


def _new_converter() -> markdown.Markdown:
    # Markdown instances carry per-document state, so each call gets its own.
    return markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=EXTENSION_CONFIGS,
        output_format="html",
    )


def render_markdown(raw_text: str) -> RenderedOutput:
    """Render a document's text (front matter excluded) to an HTML fragment."""
    body = strip_front_matter(raw_text)
    converter = _new_converter()
    try:
        body_html = converter.convert(body)
    except Exception as exc:
        LOGGER.warning("Markdown rendering failed, falling back to plain text: %s", exc)
        return RenderedOutput(
            html=f"<pre>{html.escape(body)}</pre>",
            degraded=True,
        )
    return RenderedOutput(html=body_html, toc_html=getattr(converter, "toc", ""))


def highlight_css(style: str = "default") -> str:
    """Pygments stylesheet for rendered code blocks."""
    try:
        formatter = HtmlFormatter(style=style)
    except ClassNotFound:
        LOGGER.warning("Unknown highlight style %r, using the default", style)
        formatter = HtmlFormatter()
    return formatter.get_style_defs(f".{CODE_CSS_CLASS}")
