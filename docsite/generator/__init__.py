"""Discovery, rendering, navigation, and layout filling for docsite pages."""

from .discovery import discover_documents
from .models import FooterLinks, NavEntry, SourceDocument
from .navigation import NavigationRenderer
from .renderer import HtmlContentRenderer
from .site_builder import SiteBuilder
from .template import PageTemplate

__all__ = [
    "FooterLinks",
    "HtmlContentRenderer",
    "NavEntry",
    "NavigationRenderer",
    "PageTemplate",
    "SiteBuilder",
    "SourceDocument",
    "discover_documents",
]
