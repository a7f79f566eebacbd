from __future__ import annotations

from typing import Any

from markdown_it import MarkdownIt

from .html_parser import parse_html


def markdown_to_html(text: str) -> str:
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    return md.render(text)


def parse_markdown(text: str) -> list[dict[str, Any]]:
    """Render Markdown to HTML and convert it like any other HTML input."""
    return parse_html(markdown_to_html(text))
