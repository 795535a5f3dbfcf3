"""Node kinds and the lookup tables that drive rendering.

Every expression node carries a ``NodeKind``. The renderer never inspects
concrete node types: operator tokens, precedence checks and statement
termination are all looked up by kind in the tables below.

Kind groups:
    Statements: SCRIPT, BLOCK, IF, WHILE, FOREACH, ASSIGNMENT
    Operators:  OR, AND, NOT, BITWISE_*, EQ, NE, LT, GT, LE, GE,
                ADDITIVE, ADDITIVE_OPERATOR, MUL, DIV, MOD, UNARY_MINUS, TERNARY
    Literals:   INTEGER_LITERAL, FLOAT_LITERAL, STRING_LITERAL, TRUE, FALSE, NULL
    Access:     IDENTIFIER, REFERENCE, ARRAY_ACCESS
    Structural: ARRAY_LITERAL, MAP_LITERAL, MAP_ENTRY
    Calls:      METHOD, FUNCTION, CONSTRUCTOR, SIZE_FUNCTION, SIZE_METHOD,
                EMPTY_FUNCTION

Thread Safety:
    All tables are immutable module constants.

"""

from enum import Enum
from types import MappingProxyType


class NodeKind(Enum):
    """Closed set of node kinds understood by the renderer."""

    # Root and statements
    SCRIPT = "script"
    BLOCK = "block"
    IF = "if"
    WHILE = "while"
    FOREACH = "foreach"
    ASSIGNMENT = "assignment"

    # Logical
    OR = "or"
    AND = "and"
    NOT = "not"

    # Bitwise
    BITWISE_OR = "bitwise_or"
    BITWISE_XOR = "bitwise_xor"
    BITWISE_AND = "bitwise_and"
    BITWISE_COMPLEMENT = "bitwise_complement"

    # Comparison
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    GT = "gt"
    LE = "le"
    GE = "ge"

    # Arithmetic
    ADDITIVE = "additive"
    ADDITIVE_OPERATOR = "additive_operator"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    UNARY_MINUS = "unary_minus"

    # Conditional (ternary and elvis)
    TERNARY = "ternary"

    # Literals
    INTEGER_LITERAL = "integer_literal"
    FLOAT_LITERAL = "float_literal"
    STRING_LITERAL = "string_literal"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"

    # Names and access
    IDENTIFIER = "identifier"
    REFERENCE = "reference"
    ARRAY_ACCESS = "array_access"

    # Structural literals
    ARRAY_LITERAL = "array_literal"
    MAP_LITERAL = "map_literal"
    MAP_ENTRY = "map_entry"

    # Calls
    METHOD = "method"
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    SIZE_FUNCTION = "size_function"
    SIZE_METHOD = "size_method"
    EMPTY_FUNCTION = "empty_function"


# Binary operators rendered as ``child0 op child1 op child2 ...``
INFIX_OPERATORS: MappingProxyType[NodeKind, str] = MappingProxyType(
    {
        NodeKind.OR: "||",
        NodeKind.AND: "&&",
        NodeKind.BITWISE_OR: "|",
        NodeKind.BITWISE_XOR: "^",
        NodeKind.BITWISE_AND: "&",
        NodeKind.EQ: "==",
        NodeKind.NE: "!=",
        NodeKind.LT: "<",
        NodeKind.GT: ">",
        NodeKind.LE: "<=",
        NodeKind.GE: ">=",
        NodeKind.MUL: "*",
        NodeKind.DIV: "/",
        NodeKind.MOD: "%",
        NodeKind.ASSIGNMENT: "=",
    }
)

PREFIX_OPERATORS: MappingProxyType[NodeKind, str] = MappingProxyType(
    {
        NodeKind.NOT: "!",
        NodeKind.BITWISE_COMPLEMENT: "~",
        NodeKind.UNARY_MINUS: "-",
    }
)

# Terminal kinds whose text never comes from the token image
KEYWORDS: MappingProxyType[NodeKind, str] = MappingProxyType(
    {
        NodeKind.TRUE: "true",
        NodeKind.FALSE: "false",
        NodeKind.NULL: "null",
        NodeKind.SIZE_METHOD: "size()",
    }
)

# Terminal kinds rendered from their token image, verbatim
IMAGE_TERMINALS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.IDENTIFIER,
        NodeKind.INTEGER_LITERAL,
        NodeKind.FLOAT_LITERAL,
    }
)

_MULTIPLICATIVE = frozenset({NodeKind.MUL, NodeKind.DIV, NodeKind.MOD})

# kind -> parent kinds that bind tighter and force parentheses around kind.
# Single-level check only; matches the expression grammar's precedence ladder.
PARENTHESIZE_UNDER: MappingProxyType[NodeKind, frozenset[NodeKind]] = MappingProxyType(
    {
        NodeKind.ADDITIVE: _MULTIPLICATIVE,
        NodeKind.BITWISE_OR: frozenset({NodeKind.BITWISE_AND}),
        NodeKind.BITWISE_XOR: frozenset({NodeKind.BITWISE_AND}),
        NodeKind.OR: frozenset({NodeKind.AND}),
    }
)

# Statements that end with their own closing form and take no separator
SELF_TERMINATED: frozenset[NodeKind] = frozenset(
    {
        NodeKind.BLOCK,
        NodeKind.IF,
        NodeKind.FOREACH,
        NodeKind.WHILE,
    }
)


def needs_parentheses(kind: NodeKind, parent_kind: NodeKind | None) -> bool:
    """Return True when a ``kind`` node must wrap itself under ``parent_kind``.

    Examples:
        >>> needs_parentheses(NodeKind.ADDITIVE, NodeKind.MUL)
        True
        >>> needs_parentheses(NodeKind.EQ, NodeKind.AND)
        False
        >>> needs_parentheses(NodeKind.OR, None)
        False
    """
    if parent_kind is None:
        return False
    return parent_kind in PARENTHESIZE_UNDER.get(kind, frozenset())


def is_self_terminated(kind: NodeKind) -> bool:
    """Return True for statements that need no trailing separator."""
    return kind in SELF_TERMINATED


__all__ = [
    "IMAGE_TERMINALS",
    "INFIX_OPERATORS",
    "KEYWORDS",
    "NodeKind",
    "PARENTHESIZE_UNDER",
    "PREFIX_OPERATORS",
    "SELF_TERMINATED",
    "is_self_terminated",
    "needs_parentheses",
]
