"""Tests for node kinds and rendering lookup tables."""

import pytest

from pinpoint.kinds import (
    IMAGE_TERMINALS,
    INFIX_OPERATORS,
    KEYWORDS,
    PARENTHESIZE_UNDER,
    PREFIX_OPERATORS,
    SELF_TERMINATED,
    NodeKind,
    is_self_terminated,
    needs_parentheses,
)


class TestNeedsParentheses:
    """Parenthesization is a pure function of (kind, parent kind)."""

    @pytest.mark.parametrize("parent", [NodeKind.MUL, NodeKind.DIV, NodeKind.MOD])
    def test_additive_under_multiplicative(self, parent: NodeKind) -> None:
        assert needs_parentheses(NodeKind.ADDITIVE, parent) is True

    @pytest.mark.parametrize("kind", [NodeKind.BITWISE_OR, NodeKind.BITWISE_XOR])
    def test_bitwise_under_bitwise_and(self, kind: NodeKind) -> None:
        assert needs_parentheses(kind, NodeKind.BITWISE_AND) is True

    def test_or_under_and(self) -> None:
        assert needs_parentheses(NodeKind.OR, NodeKind.AND) is True

    @pytest.mark.parametrize(
        "kind",
        [
            NodeKind.EQ,
            NodeKind.NE,
            NodeKind.LT,
            NodeKind.GT,
            NodeKind.LE,
            NodeKind.GE,
            NodeKind.MUL,
            NodeKind.DIV,
            NodeKind.MOD,
        ],
    )
    def test_tight_kinds_never_wrap(self, kind: NodeKind) -> None:
        for parent in NodeKind:
            assert needs_parentheses(kind, parent) is False

    def test_root_never_wraps(self) -> None:
        for kind in NodeKind:
            assert needs_parentheses(kind, None) is False

    def test_same_level_does_not_wrap(self) -> None:
        assert needs_parentheses(NodeKind.ADDITIVE, NodeKind.ADDITIVE) is False
        assert needs_parentheses(NodeKind.OR, NodeKind.OR) is False
        assert needs_parentheses(NodeKind.AND, NodeKind.OR) is False


class TestTables:
    def test_statement_terminators(self) -> None:
        assert SELF_TERMINATED == {
            NodeKind.BLOCK,
            NodeKind.IF,
            NodeKind.FOREACH,
            NodeKind.WHILE,
        }
        assert is_self_terminated(NodeKind.BLOCK) is True
        assert is_self_terminated(NodeKind.ASSIGNMENT) is False
        assert is_self_terminated(NodeKind.SCRIPT) is False

    def test_tables_are_disjoint(self) -> None:
        infix, prefix, keywords = set(INFIX_OPERATORS), set(PREFIX_OPERATORS), set(KEYWORDS)
        assert not infix & prefix
        assert not infix & keywords
        assert not prefix & keywords
        assert not IMAGE_TERMINALS & keywords

    def test_parenthesize_table_only_has_operators(self) -> None:
        for kind in PARENTHESIZE_UNDER:
            assert kind in INFIX_OPERATORS or kind is NodeKind.ADDITIVE

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            INFIX_OPERATORS[NodeKind.ADDITIVE] = "+"  # type: ignore[index]

    def test_kind_values_are_unique(self) -> None:
        values = [kind.value for kind in NodeKind]
        assert len(values) == len(set(values))
        assert NodeKind("ternary") is NodeKind.TERNARY
