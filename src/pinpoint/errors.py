"""Exception classes for pinpoint.

Provides standardized exceptions for error handling throughout pinpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pinpoint.location import SourceLocation
    from pinpoint.protocols import DebuggableNode


class PinpointError(Exception):
    """Base exception for all pinpoint errors.

    Subclass this for specific error categories.
    """

    pass


class TreeError(PinpointError):
    """Error while assembling an expression tree.

    Raised when a node would end up with two parents.
    """

    pass


class RenderError(PinpointError):
    """Error while rebuilding expression text from a tree.

    A render either completes or raises; partial output is discarded.
    """

    pass


class UnsupportedNodeError(RenderError):
    """The tree holds a node kind the renderer has no rule for.

    Signals a version mismatch between the tree producer and the renderer.
    Never recoverable by retrying.
    """

    def __init__(self, kind: Any) -> None:
        """Initialize with the offending kind.

        Args:
            kind: The unknown kind value found on the node
        """
        self.kind = kind
        super().__init__(f"Unexpected type of node: {kind!r}")


class EvaluationError(PinpointError):
    """Error raised by an evaluator, blamed on a specific node.

    The message is extended with the reconstructed expression and the span
    the failing node occupies in it:

        >>> str(err)
        "division by zero in 'x / (a - a)' at [4, 11]"

    The expression is rebuilt lazily, on first access.
    """

    def __init__(self, message: str, node: DebuggableNode | None = None) -> None:
        """Initialize evaluation error.

        Args:
            message: Description of the failure
            node: The node blamed for it (optional)
        """
        self.message = message
        self.node = node
        self._detail: str | None = None
        super().__init__(message)

    @property
    def location(self) -> SourceLocation | None:
        """Source position of the failing node, when the tree recorded one."""
        return getattr(self.node, "location", None)

    def detail(self) -> str:
        """Return the ``in '<expr>' at [start, end]`` suffix ("" without a node)."""
        if self._detail is None:
            from pinpoint.debugger import Debugger

            self._detail = ""
            if self.node is not None:
                dbg = Debugger()
                if dbg.debug(self.node):
                    self._detail = f" in '{dbg.data()}' at [{dbg.start()}, {dbg.end()}]"
        return self._detail

    def report(self) -> str:
        """Multi-line report: message, expression, caret underline."""
        from pinpoint.report import format_cause

        excerpt = format_cause(self.node)
        if not excerpt:
            return self.message
        return f"{self.message}\n{excerpt}"

    def __str__(self) -> str:
        location = f"{self.location} " if self.location is not None else ""
        return f"{location}{self.message}{self.detail()}"
