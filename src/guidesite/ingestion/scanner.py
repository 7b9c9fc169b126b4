"""Content store scanning.

Walks one or more content roots and reads every document file beneath them.
A root that cannot be listed aborts the scan; a single unreadable file is
logged and left out.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Sequence

from guidesite.config import DEFAULT_EXTENSIONS
from guidesite.errors import ScanIOError
from guidesite.models import DocumentSource
from guidesite.utils.files import iter_document_paths
from guidesite.utils.text import slug_from_filename

LOGGER = logging.getLogger(__name__)


def check_root(root: Path) -> None:
    """Raise :class:`ScanIOError` unless ``root`` is a listable directory."""
    if not root.exists():
        raise ScanIOError(root, "directory does not exist")
    if not root.is_dir():
        raise ScanIOError(root, "not a directory")
    try:
        with os.scandir(root) as entries:
            next(entries, None)
    except OSError as exc:
        raise ScanIOError(root, exc.strerror or str(exc)) from exc


def read_source(path: Path) -> DocumentSource | None:
    """Read one document, or return ``None`` if it cannot be decoded."""
    try:
        raw_text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Skipping unreadable file %s: %s", path, exc)
        return None
    return DocumentSource(slug=slug_from_filename(path.name), raw_text=raw_text, path=path)


def scan_content(
    roots: Iterable[Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> List[DocumentSource]:
    """Read every document below ``roots``.

    The order of the result is not meaningful.
    """
    roots = [Path(root) for root in roots]
    for root in roots:
        check_root(root)

    sources: List[DocumentSource] = []
    for path in iter_document_paths(roots, extensions):
        LOGGER.debug("Reading %s", path)
        source = read_source(path)
        if source is not None:
            sources.append(source)

    LOGGER.info("Scanned %d document(s) from %d root(s)", len(sources), len(roots))
    return sources
