"""High-level orchestration for building the documentation site.

This module wires the build pipeline together: it discovers markdown sources,
renders each body with :class:`HtmlContentRenderer`, builds the shared sidebar
and previous/next footer, fills the layout's placeholder markers, and writes
one HTML page per source into the output directory.

Example
-------
>>> from docsite.config import SiteConfig
>>> from docsite.generator import SiteBuilder
>>> builder = SiteBuilder(SiteConfig())  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/01-intro.html'), PosixPath('public/index.html')]
"""

from __future__ import annotations

import typing as typ
from html import escape

from docsite.generator.discovery import discover_documents
from docsite.generator.navigation import (
    NavigationRenderer,
    activate,
    build_nav_entries,
    footer_links,
)
from docsite.generator.renderer import HtmlContentRenderer
from docsite.generator.template import PageTemplate

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docsite.config import SiteConfig
    from docsite.generator.models import NavEntry, SourceDocument


class SiteBuilder:
    """Turn a directory of markdown files into linked HTML pages."""

    def __init__(self, config: SiteConfig) -> None:
        """Initialize the builder with configuration and fragment templates.

        Parameters
        ----------
        config : SiteConfig
            Source, template, and output locations plus markdown options.
        """
        self.config = config
        self.renderer = HtmlContentRenderer(config.pygments_style)
        self.navigation = NavigationRenderer()

    def run(self) -> list[Path]:
        """Build every page and return the written paths in navigation order.

        Returns
        -------
        list[Path]
            One path per source document. Two sources that share a slug yield
            the same path twice; the later write wins.

        Raises
        ------
        OSError
            Raised for a missing source directory or layout, or a failed write.
            The build stops at the first failure; pages already written remain.

        Notes
        -----
        Documents and the layout are read before the output directory is
        created, so a missing input leaves the output untouched.
        """
        documents = discover_documents(
            self.config.source_dir,
            suffixes=self.config.suffixes,
            landing_name=self.config.landing_name,
        )
        layout = PageTemplate.from_path(self.config.template_path)
        nav_entries = build_nav_entries(documents)

        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for index, document in enumerate(documents):
            html = self.render_page(document, index, nav_entries, layout)
            output_path = out_dir / document.slug
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def render_page(
        self,
        document: SourceDocument,
        index: int,
        nav_entries: cabc.Sequence[NavEntry],
        layout: PageTemplate,
    ) -> str:
        """Compose the full HTML page for ``document`` at position ``index``."""
        return layout.render(
            title=escape(document.title, quote=False),
            content=self.renderer.markdown(document.text),
            navigation=self.navigation.render_nav(
                activate(nav_entries, document.slug)
            ),
            footer=self.navigation.render_footer(footer_links(nav_entries, index)),
        )


__all__ = ["SiteBuilder"]
