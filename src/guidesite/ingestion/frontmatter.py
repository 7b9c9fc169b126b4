"""YAML front-matter splitting.

A document may open with a key/value preamble delimited by ``---`` lines::

    ---
    title: Spring Boot Setup
    glyph: 🚀
    ---
    # 03 - Spring Boot Setup

The preamble is optional; documents without one are handled entirely by the
heuristics in :mod:`guidesite.ingestion.extractor`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Tuple

import yaml

LOGGER = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\n(?:(.*?)\n)?(?:---|\.\.\.)[ \t]*(?:\n|\Z)", re.DOTALL
)


def split_front_matter(raw_text: str) -> Tuple[Dict[str, Any], str]:
    """Return ``(data, body)`` for ``raw_text``.

    Invalid YAML or a preamble that is not a mapping is logged and the text is
    treated as having no front matter at all.
    """
    text = raw_text.lstrip("\ufeff")
    match = _FRONT_MATTER.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1) or "")
    except yaml.YAMLError as exc:
        LOGGER.warning("Ignoring malformed front matter: %s", exc)
        return {}, text

    if data is None:
        data = {}
    if not isinstance(data, dict):
        LOGGER.warning("Ignoring front matter of type %s", type(data).__name__)
        return {}, text
    return data, text[match.end():]


def strip_front_matter(raw_text: str) -> str:
    return split_front_matter(raw_text)[1]
