"""Property-based tests for the Debugger using Hypothesis.

These tests verify invariants that hold for any expression tree:
1. Every node of a tree is found, with a non-empty span inside the text
2. The rebuilt text does not depend on which node is debugged
3. Ancestor spans nest around descendant spans
4. Identifier spans cover exactly the identifier's image
"""

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from pinpoint import NodeKind
from pinpoint.debugger import Debugger
from pinpoint.nodes import Node, identifier, node

_BINARY = [
    NodeKind.ADDITIVE,
    NodeKind.MUL,
    NodeKind.DIV,
    NodeKind.MOD,
    NodeKind.OR,
    NodeKind.AND,
    NodeKind.BITWISE_OR,
    NodeKind.BITWISE_XOR,
    NodeKind.BITWISE_AND,
    NodeKind.EQ,
    NodeKind.NE,
    NodeKind.LT,
    NodeKind.GE,
]
_PREFIX = [NodeKind.NOT, NodeKind.UNARY_MINUS, NodeKind.BITWISE_COMPLEMENT]

# Trees are generated as plain descriptions and built per example, since a
# node can only ever belong to one tree.
_leaves = st.sampled_from(["a", "b", "c", "total", "x1"]).map(lambda name: ("id", name))
trees = st.recursive(
    _leaves,
    lambda sub: st.one_of(
        st.tuples(st.sampled_from(_BINARY), st.lists(sub, min_size=2, max_size=3)),
        st.tuples(st.sampled_from(_PREFIX), st.lists(sub, min_size=1, max_size=1)),
        st.tuples(st.just(NodeKind.TERNARY), st.lists(sub, min_size=2, max_size=3)),
    ),
    max_leaves=12,
)


def _build(desc: Any) -> Node:
    head, rest = desc
    if head == "id":
        return identifier(rest)
    return node(head, *(_build(child) for child in rest))


def _spans(root: Node) -> tuple[str, dict[int, tuple[int, int]]]:
    spans: dict[int, tuple[int, int]] = {}
    texts: set[str] = set()
    for current in root.walk():
        dbg = Debugger()
        assert dbg.debug(current) is True
        texts.add(dbg.data())
        spans[id(current)] = dbg.span()
    assert len(texts) == 1
    return texts.pop(), spans


class TestDebuggerProperties:
    @given(desc=trees)
    @settings(max_examples=75)
    def test_every_node_found_with_nonempty_span(self, desc: Any) -> None:
        root = _build(desc)
        text, spans = _spans(root)
        for start, end in spans.values():
            assert 0 <= start < end <= len(text)

    @given(desc=trees)
    @settings(max_examples=75)
    def test_ancestor_spans_contain_descendants(self, desc: Any) -> None:
        root = _build(desc)
        _, spans = _spans(root)
        for current in root.walk():
            start, end = spans[id(current)]
            for ancestor in current.ancestors():
                outer_start, outer_end = spans[id(ancestor)]
                assert outer_start <= start
                assert end <= outer_end

    @given(desc=trees)
    @settings(max_examples=75)
    def test_identifier_span_is_its_image(self, desc: Any) -> None:
        root = _build(desc)
        text, spans = _spans(root)
        for current in root.walk():
            if current.kind is NodeKind.IDENTIFIER:
                start, end = spans[id(current)]
                assert text[start:end] == current.image

    @given(desc=trees)
    @settings(max_examples=50)
    def test_rendering_is_deterministic(self, desc: Any) -> None:
        first = Debugger()
        second = Debugger()
        root = _build(desc)
        assert first.debug(root) and second.debug(root)
        assert first.data() == second.data()
        assert first.span() == second.span() == (0, len(first.data()))

    @given(desc=trees)
    @settings(max_examples=50)
    def test_parentheses_balanced(self, desc: Any) -> None:
        root = _build(desc)
        dbg = Debugger()
        dbg.debug(root)
        depth = 0
        for char in dbg.data():
            depth += {"(": 1, ")": -1}.get(char, 0)
            assert depth >= 0
        assert depth == 0
