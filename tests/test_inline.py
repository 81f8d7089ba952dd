import pytest

from htmlq.inline import INLINE_ELEMENTS, is_inline


@pytest.mark.parametrize("name", ["a", "span", "em", "img", "input", "svg", "wbr", "tt"])
def test_inline_elements(name: str) -> None:
    assert is_inline(name)


@pytest.mark.parametrize("name", ["div", "p", "body", "html", "table", "li", "br", "my-widget"])
def test_everything_else_is_block(name: str) -> None:
    assert not is_inline(name)


def test_inline_set_is_immutable() -> None:
    assert isinstance(INLINE_ELEMENTS, frozenset)
    assert len(INLINE_ELEMENTS) == 54
