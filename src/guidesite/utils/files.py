"""Utility helpers for working with content files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Sequence


def is_hidden(path: Path, root: Path) -> bool:
    """True if any part of ``path`` below ``root`` starts with a dot."""
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = (path.name,)
    return any(part.startswith(".") for part in parts)


def iter_document_paths(
    inputs: Iterable[Path], extensions: Sequence[str]
) -> Iterator[Path]:
    """Yield document paths from input paths, descending into directories.

    Extensions are matched case-insensitively, hidden entries are skipped and
    a file reachable through several inputs is yielded once.
    """
    wanted = {ext.lower() for ext in extensions}
    seen: set[Path] = set()
    for item in inputs:
        if item.is_dir():
            candidates = sorted(
                child
                for child in item.rglob("*")
                if child.is_file() and not is_hidden(child, item)
            )
        elif item.is_file():
            candidates = [item]
        else:
            continue
        for candidate in candidates:
            if candidate.suffix.lower() not in wanted:
                continue
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            yield candidate
