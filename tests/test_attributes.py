import pytest

from pyslip import RenderError
from pyslip.runtime.attributes import Attr, Flag, emit_attributes
from pyslip.runtime.markup import append_element, new_document, serialize


@pytest.fixture
def element():
    document = new_document()
    return append_element(document, "input")


def test_emits_in_declared_order(element):
    emit_attributes(
        element,
        [Flag("required", True), Attr("name", "q"), Attr("id", "search")],
    )
    assert list(element.attrs) == ["required", "name", "id"]
    assert serialize(element) == '<input required name="q" id="search" />'


def test_skips_absent_values_and_false_flags(element):
    emit_attributes(
        element,
        [Attr("name", None), Flag("checked", False), Attr("value", "v"), Flag("hidden", False)],
    )
    assert element.attrs == {"value": "v"}


def test_empty_string_value_keeps_its_value(element):
    # An explicitly empty string is present, not absent, and not a flag
    emit_attributes(element, [Attr("value", ""), Flag("checked", True)])
    assert serialize(element) == '<input value="" checked />'


def test_attribute_values_are_escaped(element):
    emit_attributes(element, [Attr("value", "a<b&c")])
    assert serialize(element) == '<input value="a&lt;b&amp;c" />'


def test_no_attribute_is_emitted_twice(element):
    emit_attributes(element, [Attr("name", "a")])
    with pytest.raises(RenderError, match="already set"):
        emit_attributes(element, [Attr("name", "b")])
    assert element["name"] == "a"


def test_non_string_value_is_a_render_error(element):
    with pytest.raises(RenderError):
        emit_attributes(element, [Attr("value", 3)])


def test_unknown_rule_is_rejected(element):
    with pytest.raises(RenderError, match="Unknown attribute rule"):
        emit_attributes(element, [("name", "x")])
