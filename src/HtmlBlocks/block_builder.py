from __future__ import annotations

import logging
from typing import Iterable, List

from .model import (
    Block,
    HeaderBlock,
    ImageBlock,
    InlineElement,
    RichTextBlock,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
)

logger = logging.getLogger(__name__)


def build_blocks(raw: Iterable) -> List[Block]:
    """Wrap raw walker output into top-level message blocks.

    Headers and images stand alone. Every other rich text element gets its own
    ``rich_text`` block, except that consecutive lists share one (so their
    indent levels nest) and loose inline runs are gathered into one section.
    """
    blocks: List[Block] = []
    loose: RichTextSection | None = None
    lists: RichTextBlock | None = None
    for item in raw:
        if item is None:
            continue
        if isinstance(item, InlineElement):
            if loose is None:
                loose = RichTextSection()
                blocks.append(RichTextBlock(elements=[loose]))
            loose.elements.append(item)
            lists = None
            continue
        loose = None
        if isinstance(item, RichTextList):
            if lists is None:
                lists = RichTextBlock()
                blocks.append(lists)
            lists.elements.append(item)
            continue
        lists = None
        if isinstance(item, (HeaderBlock, ImageBlock, RichTextBlock)):
            blocks.append(item)
        elif isinstance(item, (RichTextSection, RichTextPreformatted, RichTextQuote)):
            blocks.append(RichTextBlock(elements=[item]))
        else:
            logger.debug("Ignoring unsupported block %r", item)
    return blocks
