from __future__ import annotations

import logging
import re
from typing import List

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

LIST_TAGS = ["ul", "ol"]
_HAS_LIST_RE = re.compile(r"<(ul|ol)\b", re.IGNORECASE)


def linearize_lists(html: str) -> str:
    """Flatten nested ``<ul>``/``<ol>`` markup into sibling lists tagged with ``indent``.

    ``<ul><li>A<ul><li>B</li></ul></li><li>C</li></ul>`` becomes
    ``<ul indent="0"><li>A</li></ul><ul indent="1"><li>B</li></ul><ul indent="0"><li>C</li></ul>``.
    """
    if not _HAS_LIST_RE.search(html):
        return html
    soup = BeautifulSoup(html, "html.parser")
    outermost = [tag for tag in soup.find_all(LIST_TAGS) if tag.find_parent(LIST_TAGS) is None]
    for list_tag in outermost:
        runs = _flatten(soup, list_tag, depth=0)
        logger.debug("Linearized <%s> into %d list(s)", list_tag.name, len(runs))
        for run in runs:
            list_tag.insert_before(run)
        list_tag.decompose()
    return str(soup)


def _flatten(soup: BeautifulSoup, list_tag: Tag, depth: int) -> List[Tag]:
    runs: List[Tag] = []
    current = _new_list(soup, list_tag, depth)
    for child in list(list_tag.children):
        if isinstance(child, Tag) and child.name in LIST_TAGS:
            nested = [child.extract()]
        elif isinstance(child, Tag) and child.name == "li":
            nested = [
                inner.extract()
                for inner in child.find_all(LIST_TAGS)
                if inner.find_parent(LIST_TAGS) is list_tag
            ]
            current.append(child.extract())
        else:
            current.append(child.extract())
            continue
        if not nested:
            continue
        if current.contents:
            runs.append(current)
        for inner in nested:
            runs.extend(_flatten(soup, inner, depth + 1))
        current = _new_list(soup, list_tag, depth)
    if current.contents or not runs:
        runs.append(current)
    return runs


def _new_list(soup: BeautifulSoup, source: Tag, depth: int) -> Tag:
    attrs = dict(source.attrs)
    attrs["indent"] = str(depth)
    return soup.new_tag(source.name, attrs=attrs)
