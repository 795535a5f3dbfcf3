"""
pinpoint — locate the cause of an expression failure in rebuilt source text

When an expression fails during evaluation, the evaluator usually holds the
offending tree node but no longer the source string. pinpoint rebuilds
syntactically valid expression text from the tree and reports the exact
span the failing node occupies in it.

Quick Start:
    >>> from pinpoint import NodeKind, debug, identifier, node
    >>> a, b, c = identifier("a"), identifier("b"), identifier("c")
    >>> total = node(NodeKind.ADDITIVE, a, b)
    >>> expr = node(NodeKind.MUL, total, c)
    >>> dbg = debug(total)
    >>> dbg.data()
    '(a + b) * c'
    >>> dbg.span()
    (0, 7)

Error Reports:
    >>> from pinpoint import EvaluationError
    >>> str(EvaluationError("not a number", c))
    "not a number in '(a + b) * c' at [10, 11]"
"""

from pinpoint.config import (
    DebugConfig,
    debug_config_context,
    get_debug_config,
    reset_debug_config,
    set_debug_config,
)
from pinpoint.debugger import Debugger, RenderContext, debug, render
from pinpoint.errors import (
    EvaluationError,
    PinpointError,
    RenderError,
    TreeError,
    UnsupportedNodeError,
)
from pinpoint.kinds import NodeKind, needs_parentheses
from pinpoint.location import SourceLocation
from pinpoint.nodes import (
    Node,
    false,
    identifier,
    integer,
    node,
    null,
    number,
    string,
    true,
)
from pinpoint.protocols import DebuggableNode
from pinpoint.report import format_cause
from pinpoint.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "Debugger",
    "RenderContext",
    "debug",
    "format_cause",
    "render",
    # Tree
    "DebuggableNode",
    "Node",
    "NodeKind",
    "SourceLocation",
    "false",
    "identifier",
    "integer",
    "needs_parentheses",
    "node",
    "null",
    "number",
    "string",
    "true",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "DebugConfig",
    "debug_config_context",
    "get_debug_config",
    "reset_debug_config",
    "set_debug_config",
    # Errors
    "EvaluationError",
    "PinpointError",
    "RenderError",
    "TreeError",
    "UnsupportedNodeError",
]
