import pytest
from soupsieve import SelectorSyntaxError

from htmlq.document import parse_document, remove_nodes, select, text_contents
from htmlq.serialize import to_html


def test_parse_bytes_as_utf8() -> None:
    doc = parse_document("<p>café ✓</p>".encode("utf-8"))
    assert doc.p.get_text() == "café ✓"


def test_class_attribute_stays_a_string() -> None:
    doc = parse_document('<p class="a  b">x</p>')
    assert doc.p["class"] == "a  b"


def test_select_returns_document_order() -> None:
    doc = parse_document('<p id="1"><span id="2"></span></p><p id="3"></p>')
    assert [node["id"] for node in select(doc, "p, span")] == ["1", "2", "3"]


def test_malformed_selector_raises() -> None:
    doc = parse_document("<p></p>")
    with pytest.raises(SelectorSyntaxError):
        select(doc, "p[")


def test_remove_nodes_detaches_matches() -> None:
    doc = parse_document('<div id="x"><a href="l.html">L</a><em>keep</em><a>M</a></div>')
    assert remove_nodes(doc, ["a"]) == 2
    assert to_html(doc.div) == '<div id="x"><em>keep</em></div>'


def test_remove_nodes_counts_nested_matches_once() -> None:
    doc = parse_document('<div id="outer"><div id="inner">x</div></div><p>keep</p>')
    assert remove_nodes(doc, ["div"]) == 1
    assert to_html(doc.body) == "<body><p>keep</p></body>"


def test_implied_end_tags_follow_html5() -> None:
    doc = parse_document(b"<p>a<p>b")
    assert [to_html(node) for node in select(doc, "p")] == ["<p>a</p>", "<p>b</p>"]
    assert to_html(doc) == "<html><head></head><body><p>a</p><p>b</p></body></html>"


def test_text_contents_skips_comments() -> None:
    doc = parse_document("<div><p>Hello</p>\n<p>World</p><!--c--></div>")
    assert text_contents(doc.div) == "Hello\nWorld"


def test_text_contents_ignoring_whitespace() -> None:
    doc = parse_document("<div>\n  <p>Hello</p>\n  <p>World</p>\n</div>")
    assert text_contents(doc.div, ignore_whitespace=True) == "Hello\nWorld\n"


def test_html_parser_remains_available() -> None:
    doc = parse_document("<p>a<p>b", "html.parser")
    assert to_html(doc) == "<p>a<p>b</p></p>"
