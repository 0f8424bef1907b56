import pytest
import tinycss2

from css_selector_builder import (
    SelectorBuilder,
    CombinedSelector,
    Combinator,
    combine,
    resolve_combinator,
    InvalidCombinatorError,
    SelectorValueError
)

def is_equivalent_css_selector(actual: str, expected: str) -> bool:
    """Compare two selector strings token by token, ignoring whitespace."""
    actual_tokens = [t.serialize() for t in tinycss2.parse_component_value_list(actual) if t.type != 'whitespace']
    expected_tokens = [t.serialize() for t in tinycss2.parse_component_value_list(expected) if t.type != 'whitespace']
    return actual_tokens == expected_tokens

def test_combine_two_builders():
    result = combine(
        SelectorBuilder().element("div").id("main"),
        "+",
        SelectorBuilder().element("table").id("data")
    )
    assert isinstance(result, CombinedSelector)
    assert result.serialize() == "div#main + table#data"
    assert is_equivalent_css_selector(result.stringify(), "div#main+table#data")

@pytest.mark.parametrize("token,expected", [
    ("+", "a + b"),
    ("~", "a ~ b"),
    (">", "a > b"),
    (" ", "a   b"),
    (" > ", "a > b"),
    ("\t", "a   b"),
    (Combinator.CHILD, "a > b"),
    (Combinator.DESCENDANT, "a   b"),
])
def test_combinator_tokens(token, expected):
    result = combine(SelectorBuilder().element("a"), token, SelectorBuilder().element("b"))
    assert result.serialize() == expected

def test_nested_combine():
    result = combine(
        SelectorBuilder().element("div").id("main").class_("container").class_("draggable"),
        "+",
        combine(
            SelectorBuilder().element("table").id("data"),
            "~",
            combine(
                SelectorBuilder().element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                SelectorBuilder().element("td").pseudo_class("nth-of-type(even)")
            )
        )
    )
    assert result.serialize() == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )

def test_combined_fragments_as_both_operands():
    left = combine(SelectorBuilder().element("a"), "+", SelectorBuilder().element("b"))
    right = combine(SelectorBuilder().element("c"), " ", SelectorBuilder().element("d"))
    assert combine(left, "~", right).serialize() == "a + b ~ c   d"

def test_plain_string_operands():
    assert combine("ul", ">", SelectorBuilder().element("li")).serialize() == "ul > li"

def test_combine_does_not_mutate_operands():
    left = SelectorBuilder().element("a")
    first = combine(left, ">", "b")
    second = combine(left, "+", "c")
    assert first.serialize() == "a > b"
    assert second.serialize() == "a + c"
    assert left.serialize() == "a"

def test_combined_selector_is_frozen():
    result = combine("a", ">", "b")
    with pytest.raises(Exception):
        result.text = "changed"
    assert str(result) == "a > b"

@pytest.mark.parametrize("token", ["", "|", ">>", ",", None])
def test_invalid_combinator_strict(token):
    with pytest.raises(InvalidCombinatorError):
        combine("a", token, "b")

def test_permissive_combinator_is_verbatim():
    assert combine("a", "||", "b", strict=False).serialize() == "a || b"
    assert resolve_combinator(",", strict=False) == ","

def test_invalid_operand():
    with pytest.raises(SelectorValueError):
        combine(42, ">", "b")
