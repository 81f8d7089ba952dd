"""Parsing, selection and mutation helpers over BeautifulSoup documents."""

from __future__ import annotations

from typing import Iterable, List, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

DEFAULT_PARSER = "html5lib"


def parse_document(markup: Union[bytes, str], parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse *markup* keeping every attribute value as a single string."""
    if isinstance(markup, bytes):
        return BeautifulSoup(
            markup, parser, from_encoding="utf-8", multi_valued_attributes=None
        )
    return BeautifulSoup(markup, parser, multi_valued_attributes=None)


def select(document: Tag, selector: str) -> List[Tag]:
    return list(document.select(selector))


def remove_nodes(document: Tag, selectors: Iterable[str]) -> int:
    """Detach every match of each selector from the tree.

    Returns the number of detachments; matches inside an already detached
    subtree are not counted.
    """
    removed = 0
    for selector in selectors:
        for node in select(document, selector):
            if not any(parent is document for parent in node.parents):
                continue
            node.extract()
            removed += 1
    return removed


def _text_nodes(node: PageElement) -> Iterable[NavigableString]:
    if isinstance(node, Tag):
        candidates: Iterable[PageElement] = node.descendants
    else:
        candidates = [node]
    for candidate in candidates:
        if isinstance(candidate, NavigableString) and not isinstance(
            candidate, PreformattedString
        ):
            yield candidate


def text_contents(node: PageElement, ignore_whitespace: bool = False) -> str:
    """Concatenate the text of *node* and its descendants.

    With *ignore_whitespace*, whitespace-only text nodes are skipped and every
    kept node is followed by a newline.
    """
    parts: List[str] = []
    for text in _text_nodes(node):
        if ignore_whitespace:
            if not text.strip():
                continue
            parts.append(f"{text}\n")
        else:
            parts.append(str(text))
    return "".join(parts)


__all__ = ["DEFAULT_PARSER", "parse_document", "remove_nodes", "select", "text_contents"]
