"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown", ".mdx")
DEFAULT_GLYPH = "\U0001F4C4"
CONTENT_DIR_ENV = "GUIDESITE_CONTENT_DIR"


def _get_default_content_dirs() -> tuple[Path, ...]:
    """Content roots from the environment, else ./content."""
    env_value = os.environ.get(CONTENT_DIR_ENV, "").strip()
    if env_value:
        return tuple(Path(part) for part in env_value.split(os.pathsep) if part)
    return (Path("content"),)


@dataclass(slots=True)
class AppConfig:
    content_dirs: tuple[Path, ...] = field(default_factory=_get_default_content_dirs)
    output_dir: Path = Path("site")
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    default_glyph: str = DEFAULT_GLYPH
    base_url: str = "/"
    site_title: str = "Study Guide"
    highlight_style: str = "default"

    def __post_init__(self) -> None:
        if not self.content_dirs:
            self.content_dirs = _get_default_content_dirs()
        self.content_dirs = tuple(Path(p) for p in self.content_dirs)
        self.output_dir = Path(self.output_dir)
        if not self.base_url.endswith("/"):
            self.base_url += "/"

    def resolve_content_dirs(self, base_dir: Path | None = None) -> list[Path]:
        return [_resolve(path, base_dir) for path in self.content_dirs]

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_dir, base_dir)


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path
