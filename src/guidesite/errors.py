"""Exception types raised by guidesite."""

from __future__ import annotations

from pathlib import Path


class GuideSiteError(Exception):
    """Base class for guidesite errors."""


class ScanIOError(GuideSiteError):
    """A content root is missing or cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Cannot scan content directory {root}: {reason}")
        self.root = root
        self.reason = reason


class SlugCollisionError(GuideSiteError):
    """Two source files map to the same slug."""

    def __init__(self, slug: str, first: Path, second: Path) -> None:
        super().__init__(f"Slug {slug!r} is produced by both {first} and {second}")
        self.slug = slug
        self.paths = (first, second)


class DocumentNotFoundError(GuideSiteError, KeyError):
    """No document is registered under the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"No document with slug {self.slug!r}"
