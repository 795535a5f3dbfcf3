"""Expression tree nodes for pinpoint.

A single node class covers every kind; the ``kind`` field selects the
rendering rule. Nodes are frozen dataclasses with slots for:
- Immutability: the renderer only ever reads a tree
- Identity semantics: ``eq=False`` keeps ``==`` and ``hash`` identity-based,
  so a node can be located even when another node has the same shape
- Parent links: each child holds a plain reference to its parent,
  assigned once when the parent is constructed

Holding any node keeps its whole tree alive, so the node blamed for an
error is enough to rebuild the full expression later. The renderer never
mutates a tree; the parent/child cycle is left to the garbage collector.

Example:
    >>> a, b, c = identifier("a"), identifier("b"), identifier("c")
    >>> expr = node(NodeKind.MUL, node(NodeKind.ADDITIVE, a, b), c)
    >>> a.root() is expr
    True

Thread Safety:
All nodes are frozen after construction and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pinpoint.errors import TreeError
from pinpoint.kinds import NodeKind
from pinpoint.location import SourceLocation


@dataclass(frozen=True, slots=True, eq=False)
class Node:
    """Expression tree node.

    Attributes:
        kind: Node kind, selects the rendering rule
        children: Ordered child nodes
        image: Raw token text for literals and identifiers
        location: Where the node came from (optional)

    """

    kind: NodeKind
    children: tuple[Node, ...] = ()
    image: str | None = None
    location: SourceLocation | None = None
    _parent: Node | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for child in self.children:
            if child.parent() is not None or id(child) in seen:
                msg = f"{child.kind} node already belongs to another tree"
                raise TreeError(msg)
            seen.add(id(child))
        for child in self.children:
            object.__setattr__(child, "_parent", self)

    # -- DebuggableNode -------------------------------------------------------

    def parent(self) -> Node | None:
        """Parent node, None for the root."""
        return self._parent

    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> Node:
        return self.children[index]

    # -- Navigation -----------------------------------------------------------

    def root(self) -> Node:
        """Climb parent links to the tree root."""
        current = self
        while (up := current.parent()) is not None:
            current = up
        return current

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent, ... up to the root."""
        current = self.parent()
        while current is not None:
            yield current
            current = current.parent()

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)


# =============================================================================
# Builders
# =============================================================================


def node(
    kind: NodeKind,
    *children: Node,
    image: str | None = None,
    location: SourceLocation | None = None,
) -> Node:
    """Build a node from positional children."""
    return Node(kind=kind, children=children, image=image, location=location)


def identifier(name: str, *, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.IDENTIFIER, image=name, location=location)


def integer(value: int | str, *, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.INTEGER_LITERAL, image=str(value), location=location)


def number(value: float | str, *, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.FLOAT_LITERAL, image=str(value), location=location)


def string(text: str, *, location: SourceLocation | None = None) -> Node:
    """String literal; ``text`` is the unquoted content."""
    return Node(NodeKind.STRING_LITERAL, image=text, location=location)


def true(*, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.TRUE, location=location)


def false(*, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.FALSE, location=location)


def null(*, location: SourceLocation | None = None) -> Node:
    return Node(NodeKind.NULL, location=location)


__all__ = [
    "Node",
    "false",
    "identifier",
    "integer",
    "node",
    "null",
    "number",
    "string",
    "true",
]
