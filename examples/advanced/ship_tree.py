"""Serialize a failing tree, restore it elsewhere, and report the cause."""

from pinpoint import DebugConfig, NodeKind, format_cause, from_json, identifier, node, to_json

operands = [identifier(f"price_{i}") for i in range(12)]
total = node(NodeKind.ADDITIVE, *operands)

payload = to_json(total, indent=2)
restored = from_json(payload)

cause = restored.child_at(7)
print(format_cause(cause, config=DebugConfig(max_report_width=40)))
