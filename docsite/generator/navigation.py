"""Sidebar and previous/next navigation for generated pages.

Navigation is kept as structured :class:`NavEntry` records. The entry list is
built once per build; each page renders it with only its own entry flagged
active, so every page shares the same sidebar apart from that one link.

Example
-------
>>> from docsite.generator.models import NavEntry
>>> entries = (NavEntry("a.html", "A"), NavEntry("b.html", "B"))
>>> [entry.is_active for entry in activate(entries, "b.html")]
[False, True]
>>> footer_links(entries, 0).next.title
'B'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docsite._constants import (
    FOOTER_LINK_CLASS,
    NAV_LINK_ACTIVE_CLASS,
    NAV_LINK_BASE_CLASS,
    NAV_LINK_DEFAULT_CLASS,
    NAV_LINK_TRAILING_CLASS,
)
from docsite.generator.models import FooterLinks, NavEntry, SourceDocument

if typ.TYPE_CHECKING:
    import collections.abc as cabc

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_nav_entries(documents: cabc.Sequence[SourceDocument]) -> tuple[NavEntry, ...]:
    """Return one inactive entry per document, preserving document order."""
    return tuple(NavEntry(slug=doc.slug, title=doc.title) for doc in documents)


def activate(entries: cabc.Sequence[NavEntry], slug: str) -> tuple[NavEntry, ...]:
    """Return ``entries`` with the entry linking to ``slug`` marked active.

    Entries whose slug differs are returned unchanged; when no slug matches,
    no entry is active.
    """
    return tuple(
        NavEntry(slug=entry.slug, title=entry.title, is_active=entry.slug == slug)
        for entry in entries
    )


def footer_links(entries: cabc.Sequence[NavEntry], index: int) -> FooterLinks:
    """Return the neighbours of ``entries[index]`` for the previous/next footer."""
    previous = entries[index - 1] if index > 0 else None
    following = entries[index + 1] if index < len(entries) - 1 else None
    return FooterLinks(previous=previous, next=following)


class NavigationRenderer:
    """Render navigation records into HTML fragments via Jinja templates."""

    def __init__(self) -> None:
        """Configure the Jinja environment and load the packaged fragment templates."""
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.nav_template = self.env.get_template("nav_links.jinja")
        self.footer_template = self.env.get_template("footer_nav.jinja")

    def render_nav(self, entries: cabc.Sequence[NavEntry]) -> str:
        """Render the vertical sidebar link list."""
        return self.nav_template.render(
            entries=entries,
            base_class=NAV_LINK_BASE_CLASS,
            default_class=NAV_LINK_DEFAULT_CLASS,
            active_class=NAV_LINK_ACTIVE_CLASS,
            trailing_class=NAV_LINK_TRAILING_CLASS,
        )

    def render_footer(self, links: FooterLinks) -> str:
        """Render the previous/next footer.

        The first page gets an empty ``<span></span>`` where the previous link
        would sit so the next link stays right-aligned; the last page simply
        has no next link.
        """
        return self.footer_template.render(links=links, link_class=FOOTER_LINK_CLASS)


__all__ = [
    "NavigationRenderer",
    "activate",
    "build_nav_entries",
    "footer_links",
]
