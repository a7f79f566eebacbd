from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Any, List

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .block_builder import build_blocks
from .lists import linearize_lists
from .model import (
    Block,
    ContainerBlock,
    HeaderBlock,
    ImageBlock,
    InlineElement,
    Link,
    ParsedNode,
    PlainText,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    Style,
    Text,
)
from .normalizer import compress_html

logger = logging.getLogger(__name__)

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
STYLE_FLAGS = {
    "b": "bold",
    "strong": "bold",
    "i": "italic",
    "em": "italic",
    "s": "strike",
    "del": "strike",
    "code": "code",
}
INLINE_TAGS = set(STYLE_FLAGS) | {"a"}

_BR_RE = re.compile(r"<br ?/?>")
_BLANK_RE = re.compile(r"\s*")
_INDENT_RE = re.compile(r"\s*([+-]?\d+)")
# Rejects runs that are a newline followed only by whitespace.
_TOP_LEVEL_TEXT_RE = re.compile(r"(?!\n\s*\Z)")


def parse_html(html: str) -> list[dict[str, Any]]:
    """Convert an HTML fragment into a JSON-ready list of message blocks."""
    return [block.to_dict() for block in parse_html_blocks(html)]


def parse_html_blocks(html: str) -> List[Block]:
    html = compress_html(html)
    html = linearize_lists(html)
    soup = BeautifulSoup(html, "html.parser")
    body = soup.find("body") or soup

    raw: list[Any] = []
    for node in body.children:
        parsed = parse_node(node)
        if isinstance(parsed, list):
            # Only loose inline runs are checked for blank text; single blocks pass as-is.
            kept = [element for element in parsed if _keep_top_level_run(element)]
            logger.debug("Dropped %d blank top-level run(s)", len(parsed) - len(kept))
            raw.extend(kept)
        else:
            raw.append(parsed)
    return build_blocks(raw)


def parse_node(node: PageElement) -> ParsedNode:
    if _is_text(node):
        return parse_text(node)
    if not isinstance(node, Tag):
        return None

    name = node.name
    if name in INLINE_TAGS:
        return parse_text(node)
    if name in HEADING_TAGS:
        return parse_header(node)
    if name == "img":
        return parse_image(node)

    block = _open_block(node)
    if block is None:
        logger.debug("Skipping empty <%s>", name)
        return None
    for child in node.children:
        _append_child(block, parse_node(child))
    return block


def _open_block(node: Tag) -> ContainerBlock | None:
    name = node.name
    if name in ("ul", "ol"):
        return RichTextList(
            style="bullet" if name == "ul" else "ordered",
            indent=_parse_indent(node.get("indent")),
        )
    if name in ("p", "li"):
        return RichTextSection()
    if name == "pre":
        return RichTextPreformatted()
    if name == "blockquote":
        return RichTextQuote()
    if node.contents:
        return RichTextSection()
    return None


def _append_child(block: ContainerBlock, child: ParsedNode) -> None:
    if child is None:
        return
    if isinstance(child, list):
        block.elements.extend(child)
    else:
        block.elements.append(child)


def parse_header(node: Tag) -> HeaderBlock | None:
    """Build a header from the first child text only; nested markup is ignored."""
    first = node.contents[0] if node.contents else None
    if _is_text(first) and str(first):
        return HeaderBlock(text=PlainText(str(first)))
    return None


def parse_image(node: Tag) -> ImageBlock:
    title = node.get("title")
    return ImageBlock(
        image_url=node.get("src"),
        alt_text=node.get("alt") or "",
        title=PlainText(title) if title else None,
    )


def parse_text(node: PageElement, style: Style = Style()) -> List[InlineElement]:
    """Collect text and link runs below ``node``, inheriting ``style`` from the ancestors.

    Each tag narrows a copy of the style, so siblings never see each other's flags.
    Anchors stop the descent and take their text from a leading text child.
    """
    if _is_text(node):
        return [Text(text=_clean_text(str(node)), style=style)]
    if not isinstance(node, Tag):
        return []

    flag = STYLE_FLAGS.get(node.name)
    if flag:
        style = replace(style, **{flag: True})

    if node.name == "a":
        first = node.contents[0] if node.contents else None
        return [
            Link(
                url=node.get("href"),
                text=str(first) if _is_text(first) else None,
                style=style,
            )
        ]

    texts: List[InlineElement] = []
    for child in node.children:
        texts.extend(parse_text(child, style))
    return texts


def _clean_text(data: str) -> str:
    data = _BR_RE.sub("\n", data)
    if _BLANK_RE.fullmatch(data):
        return ""
    return data


def _keep_top_level_run(element: InlineElement) -> bool:
    return bool(element.text) and _TOP_LEVEL_TEXT_RE.match(element.text) is not None


def _parse_indent(value: str | None) -> int | float:
    if value is None:
        return math.nan
    match = _INDENT_RE.match(value)
    if not match:
        return math.nan
    return int(match.group(1))


def _is_text(node: PageElement | None) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)

