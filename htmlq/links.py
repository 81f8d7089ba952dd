"""Base URL detection and rewriting of relative link targets."""

from __future__ import annotations

from typing import Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag
from pydantic import AnyUrl, TypeAdapter, ValidationError

from .io_utils import warn

LINK_ELEMENTS = frozenset({"a", "link", "area"})
LINK_SELECTOR = "a, area, link"
ASCII_WHITESPACE = "\t\n\f\r "

_URL_ADAPTER = TypeAdapter(AnyUrl)

BaseUrl = Union[AnyUrl, str]


def parse_absolute_url(value: str) -> AnyUrl:
    """Parse *value* as an absolute URL, raising ``ValidationError`` otherwise."""
    return _URL_ADAPTER.validate_python(value)


def detect_base(document: BeautifulSoup) -> Optional[AnyUrl]:
    """Return the URL of the first ``<base href>`` in *document*, if usable.

    Only the first ``base`` element is considered: when it lacks ``href`` or
    the value is not an absolute URL the result is ``None``.
    """
    node = document.find("base")
    if not isinstance(node, Tag):
        return None

    href = node.get("href")
    if href is None:
        return None

    try:
        return parse_absolute_url(href)
    except ValidationError:
        warn(f"Ignoring unparsable <base href={href!r}>")
        return None


def resolve_base(
    document: BeautifulSoup, base: Optional[BaseUrl] = None, *, detect: bool = False
) -> Optional[BaseUrl]:
    if detect:
        detected = detect_base(document)
        if detected is not None:
            return detected
    return base


def rewrite_relative_url(node: PageElement, base: BaseUrl) -> None:
    """Rewrite the ``href`` of an ``a``/``link``/``area`` element against *base*."""
    if not isinstance(node, Tag) or node.name not in LINK_ELEMENTS:
        return

    href = node.get("href")
    if href is None:
        return

    if href.startswith("////"):
        node["href"] = href.lstrip("/")
        return

    base_str = str(base)
    try:
        joined = urljoin(base_str, href.strip(ASCII_WHITESPACE))
        node["href"] = str(parse_absolute_url(joined))
    except (ValueError, ValidationError):
        warn(f"Could not resolve href {href!r} against {base_str}; using the base URL")
        node["href"] = base_str


def rewrite_links(document: BeautifulSoup, base: BaseUrl) -> None:
    for node in document.select(LINK_SELECTOR):
        rewrite_relative_url(node, base)


__all__ = [
    "LINK_ELEMENTS",
    "detect_base",
    "parse_absolute_url",
    "resolve_base",
    "rewrite_links",
    "rewrite_relative_url",
]
