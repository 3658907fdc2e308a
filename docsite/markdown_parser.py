r"""Derive page metadata from Markdown sources.

This module extracts the page title from the first top-level heading and maps
source filenames to the HTML filenames the builder writes. Both helpers are
pure so discovery, navigation, and tests can call them freely.

Example
-------
>>> from docsite.markdown_parser import derive_slug, parse_title
>>> parse_title("Preamble\n# Getting Started\n# Later")
'Getting Started'
>>> derive_slug("02-setup.md")
'02-setup.html'
>>> derive_slug("index.md")
'index.html'
"""

from __future__ import annotations

import collections.abc as cabc
import re

from ._constants import (
    FALLBACK_TITLE,
    HTML_SUFFIX,
    LANDING_NAME,
    LANDING_SLUG,
    MARKDOWN_SUFFIXES,
)

TITLE_PATTERN = re.compile(r"^# (.*)", re.MULTILINE)


def parse_title(markdown_text: str) -> str:
    """Return the first top-level heading in ``markdown_text``.

    Parameters
    ----------
    markdown_text : str
        Raw markdown for a single document.

    Returns
    -------
    str
        Heading text with the ``#`` marker removed, or ``FALLBACK_TITLE`` when
        no line starts with ``"# "``. Later headings are ignored.
    """
    match = TITLE_PATTERN.search(markdown_text)
    if match is None:
        return FALLBACK_TITLE
    return match.group(1).rstrip()


def has_markdown_suffix(
    filename: str, suffixes: cabc.Sequence[str] = MARKDOWN_SUFFIXES
) -> bool:
    """Return ``True`` when ``filename`` ends with a recognised markdown suffix."""
    return filename.endswith(tuple(suffixes))


def derive_slug(
    filename: str,
    *,
    landing_name: str = LANDING_NAME,
    suffixes: cabc.Sequence[str] = MARKDOWN_SUFFIXES,
) -> str:
    """Map a source filename to the output HTML filename.

    The landing document always maps to ``LANDING_SLUG``. Other names keep
    their stem verbatim, internal dots included, and swap the trailing markdown
    suffix for ``.html``. Distinct names may map to the same slug; callers do
    not guard against that.
    """
    if filename == landing_name:
        return LANDING_SLUG
    for suffix in sorted(suffixes, key=len, reverse=True):
        if filename.endswith(suffix):
            return f"{filename[: -len(suffix)]}{HTML_SUFFIX}"
    return f"{filename}{HTML_SUFFIX}"


__all__ = ["TITLE_PATTERN", "derive_slug", "has_markdown_suffix", "parse_title"]
