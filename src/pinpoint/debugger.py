"""Expression debugger: rebuilds expression text and locates a cause node.

Helps pinpoint the cause of problems in expressions that fail during
evaluation. Given the node blamed for a failure, the Debugger climbs to the
tree root, renders the whole tree back to expression text, and records the
half-open span ``[start, end)`` the cause occupies in that text.

    >>> dbg = Debugger()
    >>> dbg.debug(cause)
    True
    >>> dbg.data()
    '(a + b) * c'
    >>> dbg.start(), dbg.end()
    (0, 7)

Every child is visited through ``_accept``, which marks the buffer length
before and after rendering when the child is the cause. The buffer is append
only, so parentheses a rule emits around its own node fall inside that
node's span, while parentheses a parent emits around a child do not.

Output is syntactically valid but not byte-identical to the original
source. One formatting quirk is kept for compatibility: the two-operand
conditional renders as ``a?:b`` with no spaces around the marker.

Thread Safety:
All per-render state lives in a RenderContext created fresh by each
debug() call. A Debugger keeps the last result, so an instance must not be
shared between threads; use one Debugger per request.

"""

from dataclasses import dataclass, field

from pinpoint.config import get_debug_config
from pinpoint.errors import RenderError, UnsupportedNodeError
from pinpoint.kinds import (
    IMAGE_TERMINALS,
    INFIX_OPERATORS,
    KEYWORDS,
    PREFIX_OPERATORS,
    NodeKind,
    is_self_terminated,
    needs_parentheses,
)
from pinpoint.protocols import DebuggableNode
from pinpoint.stringbuilder import StringBuilder
from pinpoint.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each debug() call and never reused.

    Attributes:
        cause: Node to locate, compared by identity
        builder: Append-only output buffer
        start: Buffer offset where the cause's text begins
        end: Buffer offset where the cause's text ends (0 = not found)
        terminator: Statement separator for this render
        visited: Number of nodes rendered

    """

    cause: DebuggableNode | None = None
    builder: StringBuilder = field(default_factory=StringBuilder)
    start: int = 0
    end: int = 0
    terminator: str = ";"
    visited: int = 0


class Debugger:
    """Rebuild expression text from a tree and locate a cause node in it.

    Usage:
        >>> dbg = Debugger()
        >>> if dbg.debug(failing_node):
        ...     text = dbg.data()[dbg.start() : dbg.end()]

    """

    __slots__ = ("_ctx", "_data")

    def __init__(self) -> None:
        self._ctx = RenderContext()
        self._data = ""

    def debug(self, node: DebuggableNode | None) -> bool:
        """Seek the location of an error cause (a node) in its expression.

        Args:
            node: The node to debug; None is a no-op

        Returns:
            True if the cause was located, False otherwise

        Raises:
            UnsupportedNodeError: The tree holds a kind with no rendering rule
            RenderError: The tree is malformed (e.g. a missing operand)

        """
        self._ctx = RenderContext()
        self._data = ""
        if node is None:
            return False

        config = get_debug_config()
        ctx = RenderContext(cause=node, terminator=config.statement_terminator)

        # the cause's root is the start of the traversal
        root = node
        while (up := root.parent()) is not None:
            root = up

        logger.debug("Rendering tree rooted at %s to locate %s", root.kind, node.kind)
        self._accept(root, ctx)

        self._ctx = ctx
        self._data = ctx.builder.build()
        found = ctx.end > 0
        logger.debug(
            "Rendered %d nodes into %d characters, cause %s",
            ctx.visited,
            len(ctx.builder),
            f"at [{ctx.start}, {ctx.end})" if found else "not found",
        )
        return found

    def data(self) -> str:
        """The rebuilt expression."""
        return self._data

    def start(self) -> int:
        """Starting offset of the cause in the expression."""
        return self._ctx.start

    def end(self) -> int:
        """End offset (exclusive) of the cause in the expression."""
        return self._ctx.end

    def span(self) -> tuple[int, int]:
        return self._ctx.start, self._ctx.end

    def cause_text(self) -> str:
        """The substring of data() occupied by the cause."""
        return self._data[self._ctx.start : self._ctx.end]

    # =========================================================================
    # Cause tracking
    # =========================================================================

    def _accept(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render a node, marking the buffer around it if it is the cause."""
        if node is ctx.cause:
            ctx.start = len(ctx.builder)
        self._render(node, ctx)
        if node is ctx.cause:
            ctx.end = len(ctx.builder)

    def _check(self, node: DebuggableNode, text: str, ctx: RenderContext) -> None:
        """Append a terminal's text atomically, marking it if it is the cause."""
        if node is ctx.cause:
            ctx.start = len(ctx.builder)
        ctx.builder.append(text)
        if node is ctx.cause:
            ctx.end = len(ctx.builder)

    def _statement(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render a statement; blocks, if, for and while need no terminator."""
        self._accept(node, ctx)
        if not is_self_terminated(node.kind):
            ctx.builder.append(ctx.terminator)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Dispatch a node to its rendering rule."""
        ctx.visited += 1
        match node.kind:
            case NodeKind.SCRIPT:
                for i in range(node.child_count()):
                    self._statement(node.child_at(i), ctx)
            case NodeKind.BLOCK:
                ctx.builder.append("{ ")
                for i in range(node.child_count()):
                    self._statement(node.child_at(i), ctx)
                ctx.builder.append(" }")
            case NodeKind.IF:
                self._render_if(node, ctx)
            case NodeKind.WHILE:
                self._render_while(node, ctx)
            case NodeKind.FOREACH:
                self._render_foreach(node, ctx)
            case (
                NodeKind.ASSIGNMENT
                | NodeKind.OR
                | NodeKind.AND
                | NodeKind.BITWISE_OR
                | NodeKind.BITWISE_XOR
                | NodeKind.BITWISE_AND
                | NodeKind.EQ
                | NodeKind.NE
                | NodeKind.LT
                | NodeKind.GT
                | NodeKind.LE
                | NodeKind.GE
                | NodeKind.MUL
                | NodeKind.DIV
                | NodeKind.MOD
            ):
                self._render_infix(node, ctx)
            case NodeKind.ADDITIVE:
                self._render_additive(node, ctx)
            case NodeKind.ADDITIVE_OPERATOR:
                ctx.builder.append(f" {_image(node)} ")
            case NodeKind.NOT | NodeKind.BITWISE_COMPLEMENT | NodeKind.UNARY_MINUS:
                self._render_prefix(node, ctx)
            case NodeKind.TERNARY:
                self._render_ternary(node, ctx)
            case kind if kind in IMAGE_TERMINALS:
                self._check(node, _image(node), ctx)
            case NodeKind.STRING_LITERAL:
                escaped = _image(node).replace("'", "\\'")
                self._check(node, f"'{escaped}'", ctx)
            case NodeKind.TRUE | NodeKind.FALSE | NodeKind.NULL | NodeKind.SIZE_METHOD:
                self._check(node, KEYWORDS[node.kind], ctx)
            case NodeKind.REFERENCE:
                _require(node, 1)
                self._accept(node.child_at(0), ctx)
                for i in range(1, node.child_count()):
                    ctx.builder.append(".")
                    self._accept(node.child_at(i), ctx)
            case NodeKind.ARRAY_ACCESS:
                _require(node, 1)
                self._accept(node.child_at(0), ctx)
                for i in range(1, node.child_count()):
                    ctx.builder.append("[")
                    self._accept(node.child_at(i), ctx)
                    ctx.builder.append("]")
            case NodeKind.ARRAY_LITERAL:
                if node.child_count() == 0:
                    ctx.builder.append("[ ]")
                else:
                    ctx.builder.append("[ ")
                    self._render_list(node, 0, ctx)
                    ctx.builder.append(" ]")
            case NodeKind.MAP_LITERAL:
                if node.child_count() == 0:
                    ctx.builder.append("{ : }")
                else:
                    ctx.builder.append("{ ")
                    self._render_list(node, 0, ctx)
                    ctx.builder.append(" }")
            case NodeKind.MAP_ENTRY:
                _require(node, 2)
                self._accept(node.child_at(0), ctx)
                ctx.builder.append(" : ")
                self._accept(node.child_at(1), ctx)
            case NodeKind.METHOD:
                _require(node, 1)
                self._accept(node.child_at(0), ctx)
                self._render_arguments(node, 1, ctx)
            case NodeKind.FUNCTION:
                _require(node, 2)
                self._accept(node.child_at(0), ctx)
                ctx.builder.append(":")
                self._accept(node.child_at(1), ctx)
                self._render_arguments(node, 2, ctx)
            case NodeKind.CONSTRUCTOR:
                ctx.builder.append("new ")
                self._render_arguments(node, 0, ctx)
            case NodeKind.SIZE_FUNCTION:
                self._render_call("size", node, ctx)
            case NodeKind.EMPTY_FUNCTION:
                self._render_call("empty", node, ctx)
            case _:
                logger.debug("No rendering rule for node kind %r", node.kind)
                raise UnsupportedNodeError(node.kind)

    # =========================================================================
    # Rules
    # =========================================================================

    def _render_infix(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render ``child0 op child1 op ...``, parenthesized if the parent binds tighter."""
        operator = f" {INFIX_OPERATORS[node.kind]} "
        paren = needs_parentheses(node.kind, _parent_kind(node))
        if paren:
            ctx.builder.append("(")
        for i in range(node.child_count()):
            if i > 0:
                ctx.builder.append(operator)
            self._accept(node.child_at(i), ctx)
        if paren:
            ctx.builder.append(")")

    def _render_additive(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render an additive chain.

        Operands are either joined by the node's own operator (image, ``+``
        by default) or separated by explicit ADDITIVE_OPERATOR children,
        which render their own padded token.
        """
        operator = f" {node.image or '+'} "
        paren = needs_parentheses(node.kind, _parent_kind(node))
        if paren:
            ctx.builder.append("(")
        previous: DebuggableNode | None = None
        for i in range(node.child_count()):
            child = node.child_at(i)
            if (
                previous is not None
                and child.kind is not NodeKind.ADDITIVE_OPERATOR
                and previous.kind is not NodeKind.ADDITIVE_OPERATOR
            ):
                ctx.builder.append(operator)
            self._accept(child, ctx)
            previous = child
        if paren:
            ctx.builder.append(")")

    def _render_prefix(self, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render ``op operand``; compound operands get parentheses."""
        _require(node, 1)
        operand = node.child_at(0)
        paren = operand.child_count() > 1
        ctx.builder.append(PREFIX_OPERATORS[node.kind])
        if paren:
            ctx.builder.append("(")
        self._accept(operand, ctx)
        if paren:
            ctx.builder.append(")")

    def _render_ternary(self, node: DebuggableNode, ctx: RenderContext) -> None:
        _require(node, 2)
        self._accept(node.child_at(0), ctx)
        if node.child_count() > 2:
            ctx.builder.append(" ? ")
            self._accept(node.child_at(1), ctx)
            ctx.builder.append(" : ")
            self._accept(node.child_at(2), ctx)
        else:
            # elvis: no padding around the marker
            ctx.builder.append("?:")
            self._accept(node.child_at(1), ctx)

    def _render_if(self, node: DebuggableNode, ctx: RenderContext) -> None:
        _require(node, 1)
        ctx.builder.append("if (")
        self._accept(node.child_at(0), ctx)
        ctx.builder.append(") ")
        if node.child_count() > 1:
            self._statement(node.child_at(1), ctx)
            if node.child_count() > 2:
                ctx.builder.append(" else ")
                self._statement(node.child_at(2), ctx)
        else:
            ctx.builder.append(ctx.terminator)

    def _render_while(self, node: DebuggableNode, ctx: RenderContext) -> None:
        _require(node, 1)
        ctx.builder.append("while (")
        self._accept(node.child_at(0), ctx)
        ctx.builder.append(") ")
        if node.child_count() > 1:
            self._statement(node.child_at(1), ctx)
        else:
            ctx.builder.append(ctx.terminator)

    def _render_foreach(self, node: DebuggableNode, ctx: RenderContext) -> None:
        _require(node, 2)
        ctx.builder.append("for(")
        self._accept(node.child_at(0), ctx)
        ctx.builder.append(" : ")
        self._accept(node.child_at(1), ctx)
        ctx.builder.append(") ")
        if node.child_count() > 2:
            self._statement(node.child_at(2), ctx)
        else:
            ctx.builder.append(ctx.terminator)

    def _render_call(self, name: str, node: DebuggableNode, ctx: RenderContext) -> None:
        """Render a builtin of one argument, e.g. ``size(x)``."""
        _require(node, 1)
        ctx.builder.append(name).append("(")
        self._accept(node.child_at(0), ctx)
        ctx.builder.append(")")

    def _render_arguments(self, node: DebuggableNode, first: int, ctx: RenderContext) -> None:
        """Render children from ``first`` on as ``(arg, arg, ...)``."""
        ctx.builder.append("(")
        self._render_list(node, first, ctx)
        ctx.builder.append(")")

    def _render_list(self, node: DebuggableNode, first: int, ctx: RenderContext) -> None:
        for i in range(first, node.child_count()):
            if i > first:
                ctx.builder.append(", ")
            self._accept(node.child_at(i), ctx)


def _image(node: DebuggableNode) -> str:
    if node.image is None:
        msg = f"{node.kind} node has no token image"
        raise RenderError(msg)
    return node.image


def _require(node: DebuggableNode, count: int) -> None:
    if node.child_count() < count:
        msg = f"{node.kind} node needs at least {count} children, has {node.child_count()}"
        raise RenderError(msg)


def _parent_kind(node: DebuggableNode) -> NodeKind | None:
    parent = node.parent()
    return parent.kind if parent is not None else None


def debug(node: DebuggableNode | None) -> Debugger:
    """Debug ``node`` with a fresh Debugger and return it for inspection.

    Example:
        >>> dbg = debug(cause)
        >>> dbg.data(), dbg.span()
        ('(a + b) * c', (0, 7))

    """
    dbg = Debugger()
    dbg.debug(node)
    return dbg


def render(node: DebuggableNode) -> str:
    """Rebuild the text of the whole expression ``node`` belongs to."""
    return debug(node).data()
