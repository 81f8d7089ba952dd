"""Run a query against a document and render each match."""

from __future__ import annotations

from typing import List, TextIO

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from .config import QueryConfig
from .document import remove_nodes, select, text_contents
from .links import resolve_base, rewrite_links
from .pretty_print import pretty_print
from .serialize import to_html


def _render_attributes(node: PageElement, attributes: List[str]) -> str:
    if not isinstance(node, Tag):
        return ""
    lines: List[str] = []
    for name in attributes:
        value = node.get(name)
        if value is None:
            continue
        lines.append(f"{value}\n")
    return "".join(lines)


def render_node(node: PageElement, config: QueryConfig) -> str:
    """Render one matched node in the first applicable output mode.

    Attribute values come first, then text content, then pretty-printed
    markup, then raw markup.
    """
    if config.attributes:
        return _render_attributes(node, config.attributes)
    if config.text_only:
        return text_contents(node, ignore_whitespace=config.ignore_whitespace) + "\n"
    if config.pretty_print:
        return pretty_print(node)
    return to_html(node) + "\n"


def run_query(document: BeautifulSoup, config: QueryConfig, out: TextIO) -> int:
    """Apply removals and link rewriting, then write every match to *out*.

    Returns the number of matched nodes.
    """
    remove_nodes(document, config.remove_nodes)

    if config.link_rewriting:
        base = resolve_base(document, config.base, detect=config.detect_base)
        if base is not None:
            rewrite_links(document, base)

    matches = select(document, config.selector)
    for node in matches:
        out.write(render_node(node, config))
    return len(matches)


__all__ = ["render_node", "run_query"]
