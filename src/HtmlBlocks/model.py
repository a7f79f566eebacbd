from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Style:
    """Active inline styles inherited while walking down an inline branch."""

    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False

    def __bool__(self) -> bool:
        return self.bold or self.italic or self.strike or self.code

    def to_dict(self) -> dict[str, bool]:
        flags = {
            "bold": self.bold,
            "italic": self.italic,
            "strike": self.strike,
            "code": self.code,
        }
        return {name: True for name, value in flags.items() if value}


@dataclass
class PlainText:
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "plain_text", "text": self.text}


@dataclass
class InlineElement:
    """Base class for inline nodes."""


@dataclass
class Text(InlineElement):
    text: str
    style: Style = field(default_factory=Style)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "text", "text": self.text}
        if self.style:
            data["style"] = self.style.to_dict()
        return data


@dataclass
class Link(InlineElement):
    url: str | None
    text: str | None = None
    style: Style = field(default_factory=Style)

    def to_dict(self) -> dict[str, Any]:
        data = _compact({"type": "link", "url": self.url, "text": self.text})
        if self.style:
            data["style"] = self.style.to_dict()
        return data


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class RichTextSection(Block):
    elements: List[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "rich_text_section",
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass
class RichTextList(Block):
    style: str
    indent: Union[int, float]
    elements: List[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "rich_text_list",
            "style": self.style,
            "elements": [element.to_dict() for element in self.elements],
            "indent": self.indent,
        }


@dataclass
class RichTextPreformatted(Block):
    elements: List[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "rich_text_preformatted",
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass
class RichTextQuote(Block):
    elements: List[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "rich_text_quote",
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass
class RichTextBlock(Block):
    """Top-level ``rich_text`` block wrapping one or more rich text elements."""

    elements: List[Block] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "rich_text",
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass
class HeaderBlock(Block):
    text: PlainText

    def to_dict(self) -> dict[str, Any]:
        return {"type": "header", "text": self.text.to_dict()}


@dataclass
class ImageBlock(Block):
    image_url: str | None
    alt_text: str = ""
    title: Optional[PlainText] = None

    def to_dict(self) -> dict[str, Any]:
        data = _compact({"type": "image", "image_url": self.image_url, "alt_text": self.alt_text})
        if self.title is not None:
            data["title"] = self.title.to_dict()
        return data


ContainerBlock = Union[RichTextSection, RichTextList, RichTextPreformatted, RichTextQuote]
ParsedNode = Union[Block, List[InlineElement], None]
