"""Unit tests for markdown body rendering."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from docsite.generator.renderer import HtmlContentRenderer


@pytest.fixture(scope="module")
def renderer() -> HtmlContentRenderer:
    """Return a renderer with the default Pygments style."""
    return HtmlContentRenderer()


def test_paragraph_rendered(renderer: HtmlContentRenderer) -> None:
    """Headings and paragraphs render to their HTML elements."""
    html = renderer.markdown("# Intro\nHello")
    assert "<h1>Intro</h1>" in html
    assert "<p>Hello</p>" in html


def test_single_newline_becomes_line_break(renderer: HtmlContentRenderer) -> None:
    """Line breaks inside a paragraph are preserved."""
    soup = BeautifulSoup(renderer.markdown("Line one\nLine two"), "html.parser")
    paragraph = soup.find("p")
    assert paragraph is not None
    assert paragraph.find("br") is not None


def test_tables_are_supported(renderer: HtmlContentRenderer) -> None:
    """Pipe tables render as HTML tables."""
    html = renderer.markdown("| a | b |\n| --- | --- |\n| 1 | 2 |\n")
    soup = BeautifulSoup(html, "html.parser")
    assert [td.get_text() for td in soup.select("td")] == ["1", "2"]


def test_fenced_block_highlighted_with_language(renderer: HtmlContentRenderer) -> None:
    """Declared languages drive highlighting and the data-language tag."""
    html = renderer.markdown("```python\nprint('hi')\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert block.get("data-language") == "python"
    assert block.find("span") is not None
    assert "print('hi')" in block.get_text()


def test_unknown_language_falls_back(renderer: HtmlContentRenderer) -> None:
    """An unrecognised language renders escaped text instead of failing."""
    html = renderer.markdown("```no-such-language\nsome code <b>\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert "some code <b>" in block.get_text()
    assert block.find("b") is None


def test_unlabelled_block_auto_detected(renderer: HtmlContentRenderer) -> None:
    """Blocks without a language are still wrapped for highlighting."""
    html = renderer.markdown("Intro\n\n```\nx = 1\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert block.get("data-language")
    assert "x = 1" in block.get_text()


def test_indented_fence_with_label_extras(renderer: HtmlContentRenderer) -> None:
    """Indented fences with ``lang,extras`` labels keep their language."""
    text = (
        "- **Example** inside a list\n\n"
        "  ```rust,no_run\n"
        '  fn main() { println!("hi"); }\n'
        "  ```\n"
    )
    soup = BeautifulSoup(renderer.markdown(text), "html.parser")
    blocks = soup.select("div.codehilite")
    assert any(block.get("data-language") == "rust" for block in blocks)
    assert any("fn main" in block.get_text() for block in blocks)


def test_blank_input_renders_empty(renderer: HtmlContentRenderer) -> None:
    """Whitespace-only documents produce an empty fragment."""
    assert renderer.markdown("  \n\n") == ""


def test_strikethrough_rendered(renderer: HtmlContentRenderer) -> None:
    """Double tildes render as deleted text."""
    soup = BeautifulSoup(renderer.markdown("~~gone~~ stays"), "html.parser")
    deleted = soup.find("del")
    assert deleted is not None
    assert deleted.get_text() == "gone"


def test_single_tilde_left_alone(renderer: HtmlContentRenderer) -> None:
    """Single tildes are not treated as subscript markers."""
    soup = BeautifulSoup(renderer.markdown("approx ~5~ items"), "html.parser")
    assert soup.find("sub") is None
    assert "~5~" in soup.get_text()


def test_bare_url_autolinked(renderer: HtmlContentRenderer) -> None:
    """Bare URLs become links."""
    soup = BeautifulSoup(renderer.markdown("See https://example.com now"), "html.parser")
    link = soup.find("a")
    assert link is not None
    assert link["href"] == "https://example.com"


def test_task_list_checkboxes(renderer: HtmlContentRenderer) -> None:
    """``[ ]`` and ``[x]`` list markers render as disabled checkboxes."""
    soup = BeautifulSoup(
        renderer.markdown("- [x] done\n- [ ] todo\n"), "html.parser"
    )
    boxes = soup.select("li input[type=checkbox]")
    assert len(boxes) == 2
    assert boxes[0].has_attr("checked")
    assert not boxes[1].has_attr("checked")


def test_list_directly_after_paragraph(renderer: HtmlContentRenderer) -> None:
    """A list may start on the line after a paragraph without a blank line."""
    soup = BeautifulSoup(renderer.markdown("Steps:\n- one\n- two"), "html.parser")
    paragraph = soup.find("p")
    assert paragraph is not None
    assert paragraph.get_text(strip=True) == "Steps:"
    assert [li.get_text(strip=True) for li in soup.select("ul > li")] == ["one", "two"]


def test_ordered_list_after_paragraph(renderer: HtmlContentRenderer) -> None:
    """Ordered lists starting at one may also follow a paragraph line."""
    soup = BeautifulSoup(renderer.markdown("Do this:\n1. first\n2. second"), "html.parser")
    assert [li.get_text(strip=True) for li in soup.select("ol > li")] == [
        "first",
        "second",
    ]


def test_list_markers_inside_fence_untouched(renderer: HtmlContentRenderer) -> None:
    """Dash lines inside fenced code stay verbatim code."""
    html = renderer.markdown("```text\nheader\n- not a list\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("ul") is None
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert "header\n- not a list" in block.get_text()


def test_indented_block_does_not_shift_fence_language(
    renderer: HtmlContentRenderer,
) -> None:
    """Indented code blocks and fences are labelled independently."""
    text = "Para\n\n    plain indented\n\nMore\n\n```python\nx = 1\n```\n"
    soup = BeautifulSoup(renderer.markdown(text), "html.parser")
    blocks = soup.select("div.codehilite")
    assert len(blocks) == 2
    assert all(block.get("data-language") for block in blocks)
    assert blocks[-1].get("data-language") == "python"


def test_nested_fence_types_keep_language(renderer: HtmlContentRenderer) -> None:
    """A backtick fence inside a tilde fence does not confuse labelling."""
    text = "~~~markdown\n```bash\necho hi\n```\n~~~\n\n```python\nx = 1\n```\n"
    soup = BeautifulSoup(renderer.markdown(text), "html.parser")
    blocks = soup.select("div.codehilite")
    assert [block.get("data-language") for block in blocks] == ["markdown", "python"]
