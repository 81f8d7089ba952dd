import io

from htmlq.document import parse_document
from htmlq.serialize import HtmlSerializer, serialize, to_html


def test_element_with_attributes_in_document_order() -> None:
    doc = parse_document('<p class="a b" id="x" data-n="1">x &amp; y</p>')
    assert to_html(doc.p) == '<p class="a b" id="x" data-n="1">x &amp; y</p>'


def test_void_elements_have_no_end_tag() -> None:
    doc = parse_document('<div><br><img src="a.png" alt=""><hr/></div>')
    assert to_html(doc.div) == '<div><br><img src="a.png" alt=""><hr></div>'


def test_attribute_values_are_double_quoted_and_escaped() -> None:
    doc = parse_document("<a title='say \"hi\" &amp; go'>x</a>")
    assert to_html(doc.a) == '<a title="say &quot;hi&quot; &amp; go">x</a>'


def test_text_escaping() -> None:
    doc = parse_document("<p>1 &lt; 2 &gt; 0&nbsp;ok</p>")
    assert to_html(doc.p) == "<p>1 &lt; 2 &gt; 0&nbsp;ok</p>"


def test_script_content_is_not_escaped() -> None:
    doc = parse_document("<script>if (a < b && c) {}</script>")
    assert to_html(doc.script) == "<script>if (a < b && c) {}</script>"


def test_comments_and_doctype() -> None:
    doc = parse_document("<!DOCTYPE html><div><!-- note --></div>")
    assert to_html(doc) == (
        "<!DOCTYPE html><html><head></head><body><div><!-- note --></div></body></html>"
    )


def test_children_of_void_elements_are_suppressed() -> None:
    buffer = io.StringIO()
    writer = HtmlSerializer(buffer)
    writer.start_elem("br", [])
    writer.write_text("ignored")
    writer.start_elem("span", [])
    writer.end_elem("span")
    writer.end_elem("br")
    assert buffer.getvalue() == "<br>"


def test_serialize_drives_any_event_writer() -> None:
    events = []

    class Recorder:
        def start_elem(self, name, attrs):
            events.append(("start", name, list(attrs)))

        def end_elem(self, name):
            events.append(("end", name))

        def write_text(self, text):
            events.append(("text", text))

        def write_comment(self, text):
            events.append(("comment", text))

        def write_doctype(self, name):
            events.append(("doctype", name))

        def write_processing_instruction(self, data):
            events.append(("pi", data))

        def write_raw(self, markup):
            events.append(("raw", markup))

    doc = parse_document('<ul><li id="a">one</li><!--c--></ul>')
    serialize(doc.ul, Recorder())
    assert events == [
        ("start", "ul", []),
        ("start", "li", [("id", "a")]),
        ("text", "one"),
        ("end", "li"),
        ("comment", "c"),
        ("end", "ul"),
    ]
