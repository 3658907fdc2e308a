"""Locate markdown sources and put them in presentation order."""

from __future__ import annotations

import typing as typ

from docsite._constants import LANDING_NAME, MARKDOWN_SUFFIXES
from docsite.generator.models import SourceDocument
from docsite.markdown_parser import derive_slug, has_markdown_suffix, parse_title

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def discover_documents(
    source_dir: Path,
    *,
    suffixes: cabc.Sequence[str] = MARKDOWN_SUFFIXES,
    landing_name: str = LANDING_NAME,
) -> tuple[SourceDocument, ...]:
    """Return every markdown document in ``source_dir`` sorted by filename.

    Parameters
    ----------
    source_dir : Path
        Directory holding the markdown sources. Subdirectories are ignored.
    suffixes : Sequence[str], optional
        Filename suffixes treated as markdown.
    landing_name : str, optional
        Filename of the document published as the landing page.

    Returns
    -------
    tuple[SourceDocument, ...]
        Documents in plain lexicographic filename order; empty when nothing
        matches.

    Raises
    ------
    OSError
        If the directory is missing or unreadable, or a document cannot be
        read. Nothing is caught here.
    """
    filenames = sorted(
        entry.name
        for entry in source_dir.iterdir()
        if entry.is_file() and has_markdown_suffix(entry.name, suffixes)
    )
    documents: list[SourceDocument] = []
    for filename in filenames:
        text = (source_dir / filename).read_text(encoding="utf-8")
        documents.append(
            SourceDocument(
                filename=filename,
                text=text,
                title=parse_title(text),
                slug=derive_slug(
                    filename, landing_name=landing_name, suffixes=suffixes
                ),
            )
        )
    return tuple(documents)


__all__ = ["discover_documents"]
