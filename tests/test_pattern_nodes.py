"""Tests for eqsat_pattern.pattern_nodes."""

import dataclasses

import pytest

from eqsat_pattern.pattern_nodes import ConcreteExpr, ENode, Wildcard, WildcardKind, WildcardName


class TestWildcardName:

    @pytest.mark.parametrize("name", ["?x", "?xs...", "?", "?long_name"])
    def test_valid(self, name):
        assert WildcardName.parse(name).name == name

    @pytest.mark.parametrize("name", ["", "x", "x?", "...?"])
    def test_invalid(self, name):
        with pytest.raises(ValueError):
            WildcardName.parse(name)

    def test_equality_and_hash_by_string(self):
        assert WildcardName("?a") == WildcardName("?a")
        assert len({WildcardName("?a"), WildcardName("?a"), WildcardName("?b")}) == 2

    def test_str(self):
        assert str(WildcardName("?xs...")) == "?xs..."


class TestWildcardKind:

    @pytest.mark.parametrize("name, kind", [
        ("?x", WildcardKind.SINGLE),
        ("?xs...", WildcardKind.ZERO_OR_MORE),
        ("?...", WildcardKind.ZERO_OR_MORE),
        ("?x..", WildcardKind.SINGLE),
        ("?x...y", WildcardKind.SINGLE),
    ])
    def test_for_name(self, name, kind):
        assert WildcardKind.for_name(name) is kind


class TestWildcard:

    def test_kind_derived_from_name(self):
        assert Wildcard("?xs...").kind is WildcardKind.ZERO_OR_MORE
        assert Wildcard("?x").kind is WildcardKind.SINGLE

    def test_suffix_kept_in_name(self):
        assert Wildcard("?xs...").name == WildcardName("?xs...")

    def test_mismatched_kind(self):
        with pytest.raises(ValueError):
            Wildcard(WildcardName("?x"), WildcardKind.ZERO_OR_MORE)

    def test_to_dict(self):
        assert Wildcard("?xs...").to_dict() == {"wildcard": "?xs...", "kind": "zero_or_more"}


class TestENode:

    def test_leaf(self):
        node = ENode.leaf("x")
        assert node.is_leaf
        assert node.children == ()

    def test_children_become_tuple(self):
        node = ENode("f", [ENode.leaf("x")])
        assert node.children == (ENode.leaf("x"),)

    def test_immutable(self):
        node = ENode.leaf("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.op = "y"

    def test_size_and_depth(self):
        node = ENode("f", (ENode("g", (Wildcard("?a"),)), ENode.leaf("x")))
        assert node.size() == 4
        assert node.depth() == 3

    def test_to_dict(self):
        node = ENode("f", (Wildcard("?a"), ENode.leaf(1)))
        assert node.to_dict() == {
            "op": "f",
            "children": [
                {"wildcard": "?a", "kind": "single"},
                {"op": 1, "children": []},
            ],
        }

    def test_str(self):
        assert str(ENode("+", (Wildcard("?a"), ENode.leaf("x")))) == "(+ ?a x)"


class TestConcreteExpr:

    def test_rejects_pattern_children(self):
        with pytest.raises(TypeError):
            ConcreteExpr("f", (Wildcard("?a"),))
        with pytest.raises(TypeError):
            ConcreteExpr("f", (ENode.leaf("x"),))

    def test_to_pattern(self):
        expr = ConcreteExpr("f", (ConcreteExpr.leaf("x"),))
        assert expr.to_pattern() == ENode("f", (ENode.leaf("x"),))

    def test_not_equal_to_enode(self):
        assert ConcreteExpr.leaf("x") != ENode.leaf("x")

    def test_str(self):
        assert str(ConcreteExpr("f", (ConcreteExpr.leaf("x"),))) == "(f x)"
