"""Immutable records passed through the site build pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class SourceDocument:
    """One markdown file discovered in the source directory.

    Attributes
    ----------
    filename : str
        Bare filename, used for ordering.
    text : str
        Raw markdown read during this build.
    title : str
        First top-level heading, or the fallback title.
    slug : str
        Output filename written under the publish directory.
    """

    filename: str
    text: str
    title: str
    slug: str


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """A sidebar link; ``is_active`` marks the page currently rendered."""

    slug: str
    title: str
    is_active: bool = False


@dc.dataclass(frozen=True, slots=True)
class FooterLinks:
    """Neighbouring pages shown in the previous/next footer."""

    previous: NavEntry | None
    next: NavEntry | None


__all__ = ["FooterLinks", "NavEntry", "SourceDocument"]
