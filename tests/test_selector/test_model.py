"""Tests for selector part kinds."""

import pytest

from objtasks.selector import Combinator, PartKind


class TestPartKind:
    def test_rank_order(self):
        ordered = sorted(PartKind, key=lambda k: k.rank)
        assert ordered == [
            PartKind.ELEMENT,
            PartKind.ID,
            PartKind.CLASS,
            PartKind.ATTRIBUTE,
            PartKind.PSEUDO_CLASS,
            PartKind.PSEUDO_ELEMENT,
        ]

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PartKind.ELEMENT, "x"),
            (PartKind.ID, "#x"),
            (PartKind.CLASS, ".x"),
            (PartKind.ATTRIBUTE, "[x]"),
            (PartKind.PSEUDO_CLASS, ":x"),
            (PartKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_render(self, kind, expected):
        assert kind.render("x") == expected

    def test_singletons(self):
        singles = {k for k in PartKind if k.is_singleton}
        assert singles == {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}

    def test_labels(self):
        assert PartKind.PSEUDO_CLASS.label == "pseudo-class"
        assert PartKind.ATTRIBUTE.label == "attribute"


class TestCombinator:
    def test_values(self):
        assert [c.value for c in Combinator] == [" ", ">", "+", "~"]

    def test_formats_as_token(self):
        assert f"a {Combinator.GENERAL_SIBLING} b" == "a ~ b"
