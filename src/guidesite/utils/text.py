"""Text helpers for slugs, titles and leading glyphs."""

from __future__ import annotations

import re
import unicodedata
from pathlib import PurePath

_SEQUENCE_PREFIX = re.compile(r"^(\d+)(?:[-_. ]+|$)")
_NON_WORD = re.compile(r"[\W_]+")
_CLOSING_HASHES = re.compile(r"\s+#+\s*$")
_WHITESPACE = re.compile(r"\s+")

_NOISE_CHARS = frozenset("#-\u2013\u2014.):;*_|>~=+\u2022\u00b7\ufe0f\u200d")
# Opening delimiters of inline code, quotes and brackets belong to the title.
_KEPT_CHARS = frozenset("`$<[({\"'\u201c\u2018")

_PICTOGRAPHIC_RANGES = (
    (0x231A, 0x23FF),
    (0x24C2, 0x24C2),
    (0x25A0, 0x25FF),
    (0x2600, 0x27BF),
    (0x2934, 0x2935),
    (0x2B00, 0x2BFF),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3299),
    (0x1F000, 0x1FAFF),
)
_REGIONAL_INDICATORS = (0x1F1E6, 0x1F1FF)
_SKIN_TONES = (0x1F3FB, 0x1F3FF)
_ZWJ = "\u200d"
_GLYPH_MODIFIERS = frozenset("\ufe0e\ufe0f\u20e3")


def sequence_prefix(stem: str) -> re.Match[str] | None:
    """Match a leading ``<digits><separator>`` run in a filename stem."""
    return _SEQUENCE_PREFIX.match(stem)


def slugify(text: str) -> str:
    """Lower-case ``text`` and fold every run of non-word characters into ``-``."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_WORD.sub("-", stripped.lower()).strip("-")


def slug_from_filename(filename: str | PurePath) -> str:
    """Derive a document slug from a file name.

    The directory, the extension and a leading sequence prefix are dropped:
    ``guides/03-spring-boot-setup.md`` becomes ``spring-boot-setup``. When the
    prefix is all there is (``2024.md``) the whole stem is used instead.
    """
    stem = PurePath(filename).stem
    match = sequence_prefix(stem)
    rest = stem[match.end():] if match else stem
    return slugify(rest) or slugify(stem)


def sequence_from_filename(filename: str | PurePath) -> int | None:
    match = sequence_prefix(PurePath(filename).stem)
    if match is None:
        return None
    return int(match.group(1))


def title_from_slug(slug: str) -> str:
    return " ".join(word.capitalize() for word in slug.split("-") if word)


def _is_noise(ch: str) -> bool:
    if ch in _KEPT_CHARS:
        return False
    if ch.isspace() or ch.isdigit() or ch in _NOISE_CHARS:
        return True
    return unicodedata.category(ch).startswith("S") or is_pictographic(ch)


def strip_heading_noise(text: str) -> str:
    """Drop ordinal, marker and symbol noise around a heading's words.

    ``"# 01-introduction to spring"`` becomes ``"introduction to spring"``.
    """
    text = _CLOSING_HASHES.sub("", text.strip())
    index = 0
    while index < len(text) and _is_noise(text[index]):
        index += 1
    return text[index:].strip()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def is_pictographic(ch: str) -> bool:
    code = ord(ch)
    return any(low <= code <= high for low, high in _PICTOGRAPHIC_RANGES)


def _in_range(ch: str, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= ord(ch) <= bounds[1]


def leading_glyph(text: str) -> str | None:
    """Return the pictographic grapheme that opens ``text``, if any.

    One leading ATX heading marker is skipped, so both ``"🚀 Intro"`` and
    ``"# 🚀 Intro"`` yield ``"🚀"``.
    """
    text = text.lstrip()
    if text.startswith("#"):
        text = text.lstrip("#").lstrip()
    if not text or not is_pictographic(text[0]):
        return None

    end = 1
    if _in_range(text[0], _REGIONAL_INDICATORS):
        if end < len(text) and _in_range(text[end], _REGIONAL_INDICATORS):
            end += 1
        return text[:end]

    while end < len(text):
        ch = text[end]
        if ch in _GLYPH_MODIFIERS or _in_range(ch, _SKIN_TONES):
            end += 1
        elif ch == _ZWJ and end + 1 < len(text) and is_pictographic(text[end + 1]):
            end += 2
        else:
            break
    return text[:end]
