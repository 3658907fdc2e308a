"""Utilities for rendering markdown with syntax-highlighted code blocks."""

from __future__ import annotations

import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

LANG_PREFIX = "language-"
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
FENCE_LINE_PATTERN = re.compile(r"^[ ]{0,3}(`{3,}|~{3,})")
LIST_ITEM_PATTERN = re.compile(r"^[ ]{0,3}(?:[-*+]|1[.)])[ \t]+\S")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite"')


class LanguageTaggedFormatter(HtmlFormatter):
    """Pygments HTML formatter that records the lexer on the wrapping div.

    Codehilite hands class-based formatters ``lang_str``, built from the lexer
    it actually used, so fenced and indented blocks are labelled alike.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANG_PREFIX) or "text"

    def format_unencoded(self, tokensource: typ.Any, outfile: typ.Any) -> None:
        """Format as usual, then add ``data-language`` to the outer div."""
        buffer = io.StringIO()
        super().format_unencoded(tokensource, buffer)
        safe_lang = escape(self.language, quote=True)
        outfile.write(
            CODEHILITE_OPEN_TAG.sub(
                f'<div class="codehilite" data-language="{safe_lang}"',
                buffer.getvalue(),
                1,
            )
        )


class HtmlContentRenderer:
    """Render markdown bodies with GitHub-style extensions and Pygments."""

    def __init__(self, pygments_style: str = "default") -> None:
        """Initialize a renderer for the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"default"``.
        """
        self.pygments_style = pygments_style

    def markdown(self, text: str) -> str:
        """Render markdown into an HTML fragment.

        GitHub conventions apply: ``~~strikethrough~~``, bare URLs become
        links, ``- [ ]`` task lists, and a list may follow a paragraph line
        directly. Single newlines inside a paragraph become ``<br />``. Fenced
        code is highlighted by the declared language, or by a guessed lexer
        when none is declared; an unknown language renders as escaped plain
        text rather than failing.
        """
        normalized = self._separate_lists(self._normalize_fenced_blocks(text))
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "extra",
            "codehilite",
            "sane_lists",
            "nl2br",
            "pymdownx.tilde",
            "pymdownx.magiclink",
            "pymdownx.tasklist",
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": True,
                    "css_class": "codehilite",
                    "lang_prefix": LANG_PREFIX,
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedFormatter,
                },
                "pymdownx.tilde": {"subscript": False},
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)

    @staticmethod
    def _separate_lists(text: str) -> str:
        """Insert a blank line where a list starts right under a paragraph line.

        Lines inside fenced code are left alone, as are list items that follow
        other items of the same block.
        """
        lines: list[str] = []
        fence: str | None = None
        block_has_list = False
        for line in text.split("\n"):
            fence_match = FENCE_LINE_PATTERN.match(line)
            if fence is not None:
                if fence_match and fence_match.group(1).startswith(fence):
                    fence = None
                lines.append(line)
                continue
            if fence_match:
                fence = fence_match.group(1)
                block_has_list = False
                lines.append(line)
                continue
            if not line.strip():
                block_has_list = False
            elif LIST_ITEM_PATTERN.match(line):
                if not block_has_list and lines and lines[-1].strip():
                    lines.append("")
                block_has_list = True
            lines.append(line)
        return "\n".join(lines)


__all__ = ["HtmlContentRenderer", "LanguageTaggedFormatter"]
