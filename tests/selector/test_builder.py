"""Tests for the builder facade."""

import pytest

from selectorkit import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorCombination,
    SelectorNode,
    css_selector_builder,
)


def test_id_with_classes(builder):
    assert builder.id("main").class_("container").class_("editable").stringify() == (
        "#main.container.editable"
    )


def test_element_attr_pseudo_class(builder):
    result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    assert result == 'a[href$=".png"]:focus'


def test_element_after_id_raises(builder):
    with pytest.raises(OrderViolationError):
        builder.id("x").element("a")


def test_id_twice_raises(builder):
    with pytest.raises(DuplicateFragmentError):
        builder.id("a").id("b")


def test_combine_two_nodes(builder):
    combo = builder.combine(builder.element("div").id("main"), "+", builder.element("span"))
    assert isinstance(combo, SelectorCombination)
    assert combo.stringify() == "div#main + span"


def test_nested_combine(builder):
    result = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    ).stringify()
    assert result == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_left_nested_combine_renders_left_to_right(builder):
    a, b, c = builder.element("a"), builder.element("b"), builder.element("c")
    combo = builder.combine(builder.combine(a, "+", b), "~", c)
    assert combo.stringify() == "a + b ~ c"


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("element", "x"),
        ("id", "#x"),
        ("class_", ".x"),
        ("attr", "[x]"),
        ("pseudo_class", ":x"),
        ("pseudo_element", "::x"),
    ],
)
def test_each_fragment_method_seeds_a_node(builder, method, expected):
    node = getattr(builder, method)("x")
    assert isinstance(node, SelectorNode)
    assert node.stringify() == expected


def test_each_call_starts_independent_node(builder):
    """Facade is stateless: nodes never share bookkeeping."""
    first = builder.element("a")
    second = builder.element("b")
    first.class_("x")
    assert second.stringify() == "b"
    assert second.seen_kinds is not first.seen_kinds


def test_module_instance_is_a_builder():
    assert css_selector_builder.pseudo_element("before").stringify() == "::before"
