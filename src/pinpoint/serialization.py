"""Tree serialization: JSON round trip for expression trees.

Converts node trees to/from JSON-compatible dicts. Useful for:
- Shipping a failing expression tree alongside an error report
- Fixtures for tests of code that consumes trees
- Debugging and inspection

Dict shape (``image``, ``children`` and ``location`` are omitted when empty):

    {"kind": "mul",
     "children": [{"kind": "additive", "children": [...]},
                  {"kind": "identifier", "image": "c"}]}

All output is deterministic (sorted keys).

Example:
    from pinpoint.serialization import to_json, from_json

    restored = from_json(to_json(expr))
    assert render(restored) == render(expr)

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from typing import Any

from pinpoint.kinds import NodeKind
from pinpoint.location import SourceLocation
from pinpoint.nodes import Node


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its subtree to a JSON-compatible dict."""
    result: dict[str, Any] = {"kind": node.kind.value}
    if node.image is not None:
        result["image"] = node.image
    if node.children:
        result["children"] = [to_dict(child) for child in node.children]
    if node.location is not None:
        result["location"] = _location_to_dict(node.location)
    return result


def _location_to_dict(location: SourceLocation) -> dict[str, Any]:
    return {
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "end_lineno": location.end_lineno,
        "end_col_offset": location.end_col_offset,
        "source": location.source,
    }


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node tree from a dict (as produced by to_dict).

    Parent links are created afresh by node construction.

    Raises:
        ValueError: If ``kind`` is missing or unknown.

    """
    raw_kind = data.get("kind")
    if raw_kind is None:
        msg = "Missing 'kind' field in serialized node"
        raise ValueError(msg)
    try:
        kind = NodeKind(raw_kind)
    except ValueError:
        msg = f"Unknown node kind: {raw_kind!r}"
        raise ValueError(msg) from None

    location = data.get("location")
    return Node(
        kind=kind,
        children=tuple(from_dict(child) for child in data.get("children", ())),
        image=data.get("image"),
        location=SourceLocation(**location) if location is not None else None,
    )


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a node tree from a JSON string (as produced by to_json)."""
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
