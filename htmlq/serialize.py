"""Streaming HTML serialization of BeautifulSoup nodes.

``HtmlSerializer`` receives one event per construct (element start and end,
text, comment, doctype, processing instruction) and writes markup to a text
stream. ``serialize`` walks a bs4 tree depth-first and drives any object that
implements the same event methods, which lets other writers wrap the
baseline one.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable, List, Protocol, TextIO, Tuple

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Doctype,
    NavigableString,
    PageElement,
    PreformattedString,
    ProcessingInstruction,
    Tag,
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

RAW_TEXT_ELEMENTS = frozenset(
    {"style", "script", "xmp", "iframe", "noembed", "noframes", "plaintext", "noscript"}
)

Attrs = Iterable[Tuple[str, str]]


def escape_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("\u00a0", "&nbsp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def escape_attr_value(value: str) -> str:
    return value.replace("&", "&amp;").replace("\u00a0", "&nbsp;").replace('"', "&quot;")


class Serializer(Protocol):
    def start_elem(self, name: str, attrs: Attrs) -> None: ...

    def end_elem(self, name: str) -> None: ...

    def write_text(self, text: str) -> None: ...

    def write_comment(self, text: str) -> None: ...

    def write_doctype(self, name: str) -> None: ...

    def write_processing_instruction(self, data: str) -> None: ...

    def write_raw(self, markup: str) -> None: ...


@dataclass
class _ElemInfo:
    name: str
    ignore_children: bool


class HtmlSerializer:
    """Baseline emitter producing plain HTML markup."""

    def __init__(self, writer: TextIO) -> None:
        self.writer = writer
        self._stack: List[_ElemInfo] = []

    def _parent(self) -> _ElemInfo | None:
        return self._stack[-1] if self._stack else None

    def _suppressed(self) -> bool:
        parent = self._parent()
        return parent is not None and parent.ignore_children

    def start_elem(self, name: str, attrs: Attrs) -> None:
        if self._suppressed():
            self._stack.append(_ElemInfo(name, ignore_children=True))
            return

        parts = ["<", name]
        for key, value in attrs:
            parts.extend([" ", key, '="', escape_attr_value(value), '"'])
        parts.append(">")
        self.writer.write("".join(parts))
        self._stack.append(_ElemInfo(name, ignore_children=name in VOID_ELEMENTS))

    def end_elem(self, name: str) -> None:
        info = self._stack.pop()
        if info.ignore_children:
            return
        self.writer.write(f"</{name}>")

    def write_text(self, text: str) -> None:
        if self._suppressed():
            return
        parent = self._parent()
        if parent is not None and parent.name in RAW_TEXT_ELEMENTS:
            self.writer.write(text)
        else:
            self.writer.write(escape_text(text))

    def write_comment(self, text: str) -> None:
        self.writer.write(f"<!--{text}-->")

    def write_doctype(self, name: str) -> None:
        self.writer.write(f"<!DOCTYPE {name}>")

    def write_processing_instruction(self, data: str) -> None:
        self.writer.write(f"<?{data}>")

    def write_raw(self, markup: str) -> None:
        self.writer.write(markup)


def _attrs(tag: Tag) -> List[Tuple[str, str]]:
    items: List[Tuple[str, str]] = []
    for key, value in tag.attrs.items():
        items.append((key, "" if value is None else str(value)))
    return items


def serialize(node: PageElement, serializer: Serializer) -> None:
    """Emit serialization events for *node* and its descendants in document order."""
    if isinstance(node, BeautifulSoup):
        for child in node.contents:
            serialize(child, serializer)
        return

    if isinstance(node, Tag):
        serializer.start_elem(node.name, _attrs(node))
        for child in node.contents:
            serialize(child, serializer)
        serializer.end_elem(node.name)
        return

    if isinstance(node, Comment):
        serializer.write_comment(str(node))
    elif isinstance(node, Doctype):
        serializer.write_doctype(str(node))
    elif isinstance(node, ProcessingInstruction):
        serializer.write_processing_instruction(str(node))
    elif isinstance(node, PreformattedString):
        # CDATA sections and other declarations.
        serializer.write_raw(node.output_ready())
    elif isinstance(node, NavigableString):
        serializer.write_text(str(node))


def to_html(node: PageElement) -> str:
    """Serialize *node*, itself included, to a markup string."""
    buffer = io.StringIO()
    serialize(node, HtmlSerializer(buffer))
    return buffer.getvalue()


__all__ = [
    "HtmlSerializer",
    "RAW_TEXT_ELEMENTS",
    "Serializer",
    "VOID_ELEMENTS",
    "escape_attr_value",
    "escape_text",
    "serialize",
    "to_html",
]
