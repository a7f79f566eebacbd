from HtmlBlocks.block_builder import build_blocks
from HtmlBlocks.model import (
    HeaderBlock,
    ImageBlock,
    Link,
    PlainText,
    RichTextBlock,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    Text,
)


def test_blocks_are_wrapped_in_order():
    header = HeaderBlock(text=PlainText("Title"))
    section = RichTextSection(elements=[Text("a")])
    pre = RichTextPreformatted(elements=[Text("code")])
    image = ImageBlock(image_url="u.png")
    quote = RichTextQuote(elements=[Text("q")])

    blocks = build_blocks([header, None, section, pre, image, quote, None])
    assert blocks == [
        header,
        RichTextBlock(elements=[section]),
        RichTextBlock(elements=[pre]),
        image,
        RichTextBlock(elements=[quote]),
    ]


def test_consecutive_lists_share_a_block():
    first = RichTextList(style="bullet", indent=0, elements=[RichTextSection(elements=[Text("a")])])
    nested = RichTextList(style="bullet", indent=1, elements=[RichTextSection(elements=[Text("b")])])
    other = RichTextList(style="ordered", indent=0)
    section = RichTextSection(elements=[Text("x")])

    blocks = build_blocks([first, nested, section, other])
    assert blocks == [
        RichTextBlock(elements=[first, nested]),
        RichTextBlock(elements=[section]),
        RichTextBlock(elements=[other]),
    ]


def test_loose_inline_runs_are_merged_until_a_block_interrupts():
    header = HeaderBlock(text=PlainText("H"))
    blocks = build_blocks([Text("a"), Link(url="u", text="l"), header, Text("b")])
    assert blocks == [
        RichTextBlock(elements=[RichTextSection(elements=[Text("a"), Link(url="u", text="l")])]),
        header,
        RichTextBlock(elements=[RichTextSection(elements=[Text("b")])]),
    ]


def test_build_is_idempotent():
    raw = [
        Text("a"),
        RichTextList(style="bullet", indent=0),
        RichTextList(style="bullet", indent=1),
        HeaderBlock(text=PlainText("H")),
        RichTextSection(elements=[Text("x")]),
    ]
    once = build_blocks(raw)
    assert build_blocks(once) == once
    assert [block.to_dict() for block in build_blocks(once)] == [block.to_dict() for block in once]
