"""Protocols for pinpoint.

Defines the read-only view of an expression tree that the renderer consumes.
Any AST exposing these members can be debugged, not just pinpoint.nodes.Node.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DebuggableNode(Protocol):
    """Read-only node interface used by the Debugger.

    Nodes are compared by identity. The tree must be finite and acyclic,
    and every non-root node must appear among its parent's children.

    Thread Safety:
        The renderer only reads through this interface. Implementations
        must not change structure while a render is running.

    """

    @property
    def kind(self) -> Any:
        """The node kind (a NodeKind for every renderable node)."""
        ...

    @property
    def image(self) -> str | None:
        """Raw token text for literals and identifiers, None otherwise."""
        ...

    def parent(self) -> DebuggableNode | None:
        """The parent node, None for the root."""
        ...

    def child_count(self) -> int:
        """Number of children."""
        ...

    def child_at(self, index: int) -> DebuggableNode:
        """Child at ``index`` (0-based, tree order)."""
        ...
