"""Rebuild an expression and underline the node an evaluator blamed."""

from pinpoint import EvaluationError, NodeKind, identifier, integer, node

divisor = node(NodeKind.ADDITIVE, identifier("a"), identifier("b"), image="-")
expr = node(NodeKind.DIV, node(NodeKind.MUL, identifier("x"), integer(100)), divisor)

err = EvaluationError("division by zero", divisor)
print(err)
print(err.report())
