"""Tree serialization: JSON round-trip for markup nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Inspecting what the parser made of a document
- Caching parsed trees between runs
- Handing a tree to tools written in other languages

All output is deterministic (sorted keys).

Example:
    from markfmt import parse
    from markfmt.serialization import to_json, from_json

    result = parse("<p>Hello <b>World</b></p>")
    json_str = to_json(result.nodes)
    assert from_json(json_str) == result.nodes

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from markfmt.location import SourceLocation
from markfmt.nodes import Attribute, Comment, Element, Node, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Text": Text,
    "Comment": Comment,
    "Element": Element,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes children, attributes and SourceLocation objects.

    Args:
        node: Any markup node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, Attribute):
        return {"name": value.name, "value": value.value}
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if field_name == "location" and isinstance(value, dict):
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            offset=value.get("offset", 0),
            source_file=value.get("source_file"),
        )
    if field_name == "attributes":
        return tuple(Attribute(item["name"], item.get("value")) for item in value)
    if field_name == "children":
        return tuple(from_dict(item) for item in value)
    return value


def to_json(nodes: Iterable[Node], *, indent: int | None = None) -> str:
    """Serialize a sequence of top-level nodes to a JSON array.

    Args:
        nodes: Top-level nodes (e.g. ``ParseResult.nodes``).
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(node) for node in nodes], sort_keys=True, indent=indent)


def from_json(data: str) -> tuple[Node, ...]:
    """Deserialize top-level nodes from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Tuple of nodes.

    Raises:
        ValueError: If the JSON is not an array of serialized nodes.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of nodes, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(from_dict(item) for item in raw)
