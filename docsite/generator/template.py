"""Fill the page layout's placeholder markers.

The layout is split once into literal text and placeholder tokens at the first
occurrence of each marker. Rendering joins the tokens, so substituted values
are never scanned for markers and repeated markers stay as literal text.

Example
-------
>>> layout = PageTemplate.parse("<h1><!-- TITLE --></h1><!-- TITLE -->")
>>> layout.render(title="Intro", content="", navigation="", footer="")
'<h1>Intro</h1><!-- TITLE -->'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docsite._constants import (
    CONTENT_MARKER,
    FOOTER_MARKER,
    NAVIGATION_MARKER,
    TITLE_MARKER,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

PLACEHOLDERS: dict[str, str] = {
    "title": TITLE_MARKER,
    "content": CONTENT_MARKER,
    "navigation": NAVIGATION_MARKER,
    "footer": FOOTER_MARKER,
}


@dc.dataclass(frozen=True, slots=True)
class Placeholder:
    """A slot in the layout filled with the named page value."""

    name: str


Token = str | Placeholder


@dc.dataclass(frozen=True, slots=True)
class PageTemplate:
    """Parsed layout template made of literal strings and placeholders."""

    tokens: tuple[Token, ...]

    @classmethod
    def parse(cls, text: str) -> PageTemplate:
        """Tokenize ``text`` around the first occurrence of each marker.

        Markers missing from ``text`` produce no token, so the matching value
        is silently dropped at render time.
        """
        found: list[tuple[int, str, str]] = []
        for name, marker in PLACEHOLDERS.items():
            position = text.find(marker)
            if position != -1:
                found.append((position, name, marker))
        found.sort()

        tokens: list[Token] = []
        cursor = 0
        for position, name, marker in found:
            if position < cursor:
                continue
            if position > cursor:
                tokens.append(text[cursor:position])
            tokens.append(Placeholder(name))
            cursor = position + len(marker)
        if cursor < len(text):
            tokens.append(text[cursor:])
        return cls(tokens=tuple(tokens))

    @classmethod
    def from_path(cls, path: Path) -> PageTemplate:
        """Read and parse the layout at ``path``; I/O errors propagate."""
        return cls.parse(path.read_text(encoding="utf-8"))

    def render(self, *, title: str, content: str, navigation: str, footer: str) -> str:
        """Return the layout with each placeholder replaced by its value."""
        values = {
            "title": title,
            "content": content,
            "navigation": navigation,
            "footer": footer,
        }
        return "".join(
            values[token.name] if isinstance(token, Placeholder) else token
            for token in self.tokens
        )


__all__ = ["PLACEHOLDERS", "PageTemplate", "Placeholder"]
