"""Typed dataclasses describing docsite build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docsite._constants import LANDING_NAME, MARKDOWN_SUFFIXES

DEFAULT_SOURCE_DIR = Path("../materials/new_backend_dev")
DEFAULT_OUTPUT_DIR = Path("public")
DEFAULT_TEMPLATE_PATH = Path("layout.html")


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """A fully resolved build definition.

    Attributes
    ----------
    source_dir : Path
        Directory scanned for markdown documents.
    output_dir : Path
        Directory receiving one HTML file per document.
    template_path : Path
        Layout template containing the four placeholder markers.
    landing_name : str
        Source filename that maps to the site's landing page.
    suffixes : tuple[str, ...]
        Filename suffixes recognised as markdown.
    pygments_style : str
        Pygments style name used by the code highlighter.
    """

    source_dir: Path = DEFAULT_SOURCE_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    template_path: Path = DEFAULT_TEMPLATE_PATH
    landing_name: str = LANDING_NAME
    suffixes: tuple[str, ...] = MARKDOWN_SUFFIXES
    pygments_style: str = "default"


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SOURCE_DIR",
    "DEFAULT_TEMPLATE_PATH",
    "SiteConfig",
    "SiteConfigError",
]
