"""Tests for eqsat_pattern.ground."""

import pytest

from eqsat_pattern.errors import WildcardInGroundTermError
from eqsat_pattern.ground import is_ground, iter_wildcards, to_ground, wildcard_names
from eqsat_pattern.parser import parse_pattern
from eqsat_pattern.pattern_nodes import ConcreteExpr, ENode, Wildcard

from conftest import GROUND_SOURCES, PATTERN_SOURCES


class TestToGround:

    def test_leaf(self):
        assert to_ground(ENode.leaf("x")) == ConcreteExpr.leaf("x")

    def test_shape_preserved(self):
        pattern = parse_pattern("(f (g x) y)")
        assert to_ground(pattern) == ConcreteExpr("f", (
            ConcreteExpr("g", (ConcreteExpr.leaf("x"),)),
            ConcreteExpr.leaf("y"),
        ))

    def test_bare_wildcard(self):
        with pytest.raises(WildcardInGroundTermError):
            to_ground(Wildcard("?x"))

    def test_deep_wildcard(self):
        pattern = parse_pattern("(f x (g y (h ?deep)))")
        with pytest.raises(WildcardInGroundTermError) as exc_info:
            to_ground(pattern)
        assert exc_info.value.wildcard.name.name == "?deep"
        assert "?deep" in str(exc_info.value)

    def test_first_wildcard_reported(self):
        pattern = parse_pattern("(f (g ?first) ?second)")
        with pytest.raises(WildcardInGroundTermError) as exc_info:
            to_ground(pattern)
        assert exc_info.value.wildcard == Wildcard("?first")

    def test_original_untouched(self):
        pattern = parse_pattern("(f x)")
        to_ground(pattern)
        assert pattern == ENode("f", (ENode.leaf("x"),))

    def test_method_form(self):
        assert ENode.leaf("x").to_ground() == ConcreteExpr.leaf("x")
        with pytest.raises(WildcardInGroundTermError):
            Wildcard("?x").to_ground()

    @pytest.mark.parametrize("source", GROUND_SOURCES)
    def test_ground_sources_convert(self, source):
        pattern = parse_pattern(source)
        assert to_ground(pattern).to_pattern() == pattern

    @pytest.mark.parametrize("source", PATTERN_SOURCES)
    def test_pattern_sources_fail(self, source):
        with pytest.raises(WildcardInGroundTermError):
            to_ground(parse_pattern(source))


class TestWildcardQueries:

    def test_iter_wildcards_order(self):
        pattern = parse_pattern("(f ?a (g ?b ?a) ?rest...)")
        assert [str(w) for w in iter_wildcards(pattern)] == ["?a", "?b", "?a", "?rest..."]

    def test_wildcard_names_unique(self):
        pattern = parse_pattern("(f ?a (g ?b ?a) ?rest...)")
        assert wildcard_names(pattern) == ["?a", "?b", "?rest..."]

    def test_is_ground(self):
        assert is_ground(parse_pattern("(f x y)"))
        assert not is_ground(parse_pattern("(f x ?y)"))
        assert not is_ground(Wildcard("?y"))
