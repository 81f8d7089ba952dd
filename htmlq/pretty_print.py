"""Indentation-aware HTML writer layered over the baseline serializer."""

from __future__ import annotations

import io

from bs4.element import PageElement

from .inline import is_inline
from .serialize import Attrs, HtmlSerializer, serialize

INDENT_STEP = 2


class PrettyPrint:
    """Inserts newlines and indentation around block-level markup.

    Block elements start on a fresh indented line and close on one; inline
    elements stay on the current line unless they follow a closed block.
    Whitespace-only text is dropped. All other events go to ``inner``
    untouched.
    """

    def __init__(self, inner: HtmlSerializer) -> None:
        self.inner = inner
        self.indent = 0
        self.previous_was_block = False

    def _newline(self) -> None:
        self.inner.writer.write("\n" + " " * self.indent)

    def start_elem(self, name: str, attrs: Attrs) -> None:
        if not is_inline(name) or self.previous_was_block:
            self._newline()

        self.indent += INDENT_STEP
        self.inner.start_elem(name, attrs)

    def end_elem(self, name: str) -> None:
        self.indent -= INDENT_STEP

        if is_inline(name):
            self.previous_was_block = False
        else:
            self._newline()
            self.previous_was_block = True

        self.inner.end_elem(name)

    def write_text(self, text: str) -> None:
        if not text.strip():
            return

        if self.previous_was_block:
            self._newline()

        self.previous_was_block = False
        self.inner.write_text(text)

    def write_comment(self, text: str) -> None:
        self.inner.write_comment(text)

    def write_doctype(self, name: str) -> None:
        self.inner.write_doctype(name)

    def write_processing_instruction(self, data: str) -> None:
        self.inner.write_processing_instruction(data)

    def write_raw(self, markup: str) -> None:
        self.inner.write_raw(markup)


def pretty_print(node: PageElement) -> str:
    buffer = io.StringIO()
    serialize(node, PrettyPrint(HtmlSerializer(buffer)))
    return buffer.getvalue()


__all__ = ["INDENT_STEP", "PrettyPrint", "pretty_print"]
