"""Tests for Combinator rendering and strict construction."""

import dataclasses
import logging

import pytest

from objectkit.selector import (
    Combinator,
    InvalidCombinator,
    SelectorBuilder,
    SelectorFragment,
)


def _sel(tag: str) -> SelectorBuilder:
    return SelectorBuilder().element(tag)


class TestRender:
    @pytest.mark.parametrize(
        "operator, expected",
        [
            ("+", "a + b"),
            ("~", "a ~ b"),
            (">", "a > b"),
            (" ", "a   b"),
        ],
    )
    def test_standard_tokens(self, operator, expected):
        assert Combinator(_sel("a"), operator, _sel("b")).render() == expected

    def test_nested_left(self):
        inner = Combinator(_sel("ul"), ">", _sel("li"))
        assert Combinator(inner, "+", _sel("p")).render() == "ul > li + p"

    def test_nested_descendant_keeps_triple_space(self):
        inner = Combinator(_sel("a"), " ", _sel("b"))
        assert Combinator(_sel("x"), "~", inner).render() == "x ~ a   b"

    def test_unknown_token_printed_verbatim(self):
        assert Combinator(_sel("a"), "||", _sel("b")).render() == "a || b"

    def test_str_matches_render(self):
        c = Combinator(_sel("a"), ">", _sel("b"))
        assert str(c) == c.render()

    def test_frozen(self):
        c = Combinator(_sel("a"), ">", _sel("b"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.operator = "+"


class TestChecked:
    def test_accepts_standard_token(self):
        c = Combinator.checked(_sel("a"), "~", _sel("b"))
        assert c.render() == "a ~ b"

    def test_rejects_unknown_token(self):
        with pytest.raises(InvalidCombinator) as exc_info:
            Combinator.checked(_sel("a"), "||", _sel("b"))
        assert exc_info.value.operator == "||"

    def test_rejects_padded_token(self):
        with pytest.raises(InvalidCombinator):
            Combinator.checked(_sel("a"), " > ", _sel("b"))

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="objectkit.selector.combinator"):
            with pytest.raises(InvalidCombinator):
                Combinator.checked(_sel("a"), "||", _sel("b"))
        assert "Rejected combinator token" in caplog.text


class TestFragmentOperands:
    def test_render_with_fragments(self):
        c = Combinator(SelectorFragment(type_name="ul"), ">", SelectorFragment(type_name="li"))
        assert c.render() == "ul > li"

    def test_hashable_with_fragment_operands(self):
        c = Combinator(SelectorFragment(type_name="ul"), ">", SelectorFragment(type_name="li"))
        assert hash(c) == hash(c)
        assert c in {c}
