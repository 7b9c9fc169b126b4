"""Listing metadata extraction.

:func:`extract_metadata` is the single entry point. Explicit front matter wins
when present; otherwise title, overview and glyph are scraped from the body with
the heuristics below, and the sequence number comes from the filename.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Any, Iterator, Mapping, Tuple

from guidesite.config import DEFAULT_GLYPH
from guidesite.ingestion.frontmatter import split_front_matter
from guidesite.models import DocumentMetadata
from guidesite.utils.text import (
    collapse_whitespace,
    leading_glyph,
    sequence_from_filename,
    slug_from_filename,
    strip_heading_noise,
    title_from_slug,
)

OVERVIEW_HEADING = "Overview"

_ATX_HEADING = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_DIGITS = re.compile(r"\d+", re.ASCII)


def _closes(line: str, fence: str) -> bool:
    match = _FENCE.match(line)
    return bool(match) and match.group(1)[0] == fence[0] and len(match.group(1)) >= len(fence)


def _iter_lines(body: str) -> Iterator[Tuple[str, bool]]:
    """Yield ``(line, is_code)`` pairs, flagging fence lines and their contents.

    A fence that is never closed is not a code block; its opening line and
    everything after it are ordinary text, as the renderer treats them.
    """
    lines = body.splitlines()
    fence: str | None = None
    for index, line in enumerate(lines):
        if fence is None:
            match = _FENCE.match(line)
            if match and any(_closes(rest, match.group(1)) for rest in lines[index + 1:]):
                fence = match.group(1)
                yield line, True
            else:
                yield line, False
        else:
            if _closes(line, fence):
                fence = None
            yield line, True


def _heading_text(line: str) -> str | None:
    match = _ATX_HEADING.match(line)
    if match is None:
        return None
    return _CLOSING_HASHES.sub("", match.group(2) or "").strip()


def find_title(body: str) -> str:
    """Noise-stripped text of the first heading outside code, or ``""``."""
    for line, is_code in _iter_lines(body):
        if is_code:
            continue
        text = _heading_text(line)
        if text is not None:
            return strip_heading_noise(text)
    return ""


def find_overview(body: str) -> str:
    """First non-empty line of the section headed exactly ``Overview``."""
    in_section = False
    for line, is_code in _iter_lines(body):
        if in_section:
            if not line.strip():
                continue
            if is_code or _FENCE.match(line) or _heading_text(line) is not None:
                return ""
            return collapse_whitespace(line)
        if not is_code and _heading_text(line) == OVERVIEW_HEADING:
            in_section = True
    return ""


def _string_value(data: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = data.get(key)
        if value is not None and not isinstance(value, (dict, list)):
            text = str(value).strip()
            if text:
                return text
    return ""


def _order_value(data: Mapping[str, Any]) -> int | None:
    value = data.get("order")
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value.strip()):
        return int(value.strip())
    return None


def extract_metadata(
    raw_text: str,
    filename: str | PurePath,
    *,
    default_glyph: str = DEFAULT_GLYPH,
) -> DocumentMetadata:
    """Derive listing metadata from a document's text and filename.

    The result depends only on the arguments, so repeated calls on the same
    input are identical.
    """
    data, body = split_front_matter(raw_text)

    title = strip_heading_noise(_string_value(data, "title")) or find_title(body)
    if not title:
        title = title_from_slug(slug_from_filename(filename))

    overview = _string_value(data, "overview", "summary", "description")
    if not overview:
        overview = find_overview(body)

    glyph = _string_value(data, "glyph", "emoji") or leading_glyph(body) or default_glyph

    sequence_number = _order_value(data)
    if sequence_number is None:
        sequence_number = sequence_from_filename(filename)

    return DocumentMetadata(
        title=title,
        overview=collapse_whitespace(overview),
        glyph=glyph,
        sequence_number=sequence_number,
    )
