from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_PRE_RE = re.compile(r"([ \t]*)<pre>([\s\S]*?)</pre>")
_PRE_PLACEHOLDER_RE = re.compile(r"<pre>(\d+)</pre>")
_OPEN_TAG_RE = re.compile(r"<(\w+)([^>]*)>")
_ATTR_PLACEHOLDER_RE = re.compile(r'<(\w+) data-tag-attr="(\d+)">')
_NEWLINE_RUN_RE = re.compile(r"\n[\n ]*")
_BR_RE = re.compile(r"<br ?/?>")
_SPAN_RE = re.compile(r"</?span[^>]*>")
_DIV_RE = re.compile(r"</?div[^>]*>")
_PARAGRAPH_RE = re.compile(r"<p>([\s\S]*?)</p>")
_GLUED_INLINE_RE = re.compile(r"(\S)(<b>|<i>|<code>)")


def compress_html(html: str) -> str:
    """Collapse source formatting whitespace while keeping ``<pre>`` content intact.

    ``<pre>`` bodies and tag attributes are swapped for numbered placeholders
    before newlines are removed, then restored. The indentation in front of
    each ``<pre>`` tag is stripped from every line of that block.
    """
    pre_contents: list[str] = []
    pre_indents: list[str] = []

    def _stash_pre(match: re.Match) -> str:
        pre_indents.append(match.group(1))
        pre_contents.append(re.sub(r"^\n", "", match.group(2), count=1))
        return f"<pre>{len(pre_contents) - 1}</pre>"

    html = _PRE_RE.sub(_stash_pre, html)

    attributes: list[str] = []

    def _stash_attributes(match: re.Match) -> str:
        attributes.append(match.group(2))
        return f'<{match.group(1)} data-tag-attr="{len(attributes) - 1}">'

    html = _OPEN_TAG_RE.sub(_stash_attributes, html)

    html = _NEWLINE_RUN_RE.sub("", html)

    html = _ATTR_PLACEHOLDER_RE.sub(
        lambda match: f"<{match.group(1)}{attributes[int(match.group(2))]}>",
        html,
    )

    def _restore_pre(match: re.Match) -> str:
        index = int(match.group(1))
        content = pre_contents[index]
        indent = pre_indents[index]
        if indent:
            content = re.sub("^" + re.escape(indent), "", content, flags=re.MULTILINE)
        return f"<pre>{content}</pre>"

    html = _PRE_PLACEHOLDER_RE.sub(_restore_pre, html)

    html = _BR_RE.sub("\n", html)
    html = _SPAN_RE.sub("", html)
    html = _DIV_RE.sub("", html)

    def _space_inline_tags(match: re.Match) -> str:
        content = _GLUED_INLINE_RE.sub(r"\1 \2", match.group(1))
        return f"<p>{content}</p>"

    html = _PARAGRAPH_RE.sub(_space_inline_tags, html)
    logger.debug("Compressed HTML to %d chars (%d pre blocks)", len(html), len(pre_contents))
    return html
