"""Token tree serialization.

Converts typed nodes to/from JSON-compatible dicts, and to the nested-list
"tokens" form used for inspecting what a template compiled to:

    >>> to_tokens(compile_template("Hi {{thing}}!"))
    ['multi', ['static', 'Hi '], ['mustache', 'etag', ['mustache', 'fetch', ['thing']]], ['static', '!']]

All JSON output is deterministic (sorted keys).

Example:
    from whisker import compile_template
    from whisker.serialization import to_json, from_json

    tree = compile_template("{{#items}}{{name}}{{/items}}")
    assert from_json(to_json(tree)) == tree

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from whisker.nodes import (
    Fetch,
    HashArgs,
    Interpolation,
    InvertedSection,
    Multi,
    Node,
    Number,
    Partial,
    Section,
    Static,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Multi": Multi,
    "Static": Static,
    "Number": Number,
    "Fetch": Fetch,
    "HashArgs": HashArgs,
    "Interpolation": Interpolation,
    "Section": Section,
    "InvertedSection": InvertedSection,
    "Partial": Partial,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any Whisker node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, bool
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

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
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(root: Multi, *, indent: int | None = None) -> str:
    """Serialize a compiled tree to a JSON string.

    Args:
        root: Tree to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(root), sort_keys=True, indent=indent)


def from_json(data: str) -> Multi:
    """Deserialize a compiled tree from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Multi.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Multi):
        msg = f"Expected Multi, got {type(node).__name__}"
        raise ValueError(msg)
    return node


def to_tokens(node: Node) -> list[Any]:
    """Convert a node to the nested-list tokens form.

    Tags are ``["mustache", <kind>, ...]`` where kind is ``etag`` (escaped
    interpolation), ``utag`` (unescaped), ``section``,
    ``inverted_section``, ``partial`` or ``fetch``.

    Raises:
        TypeError: If ``node`` is not a Whisker node.

    """
    match node:
        case Multi(children=children):
            return ["multi", *(to_tokens(child) for child in children)]
        case Static(text=text):
            return ["static", text]
        case Number(literal=literal):
            return ["number", literal]
        case Fetch(path=path):
            return ["mustache", "fetch", list(path)]
        case HashArgs(pairs=pairs):
            return ["hash", [[["static", key], to_tokens(value)] for key, value in pairs]]
        case Interpolation(callee=callee, args=args, escaped=escaped):
            kind = "etag" if escaped else "utag"
            return ["mustache", kind, to_tokens(callee), *(to_tokens(arg) for arg in args)]
        case Section(callee=callee, body=body, raw=raw, delimiters=delimiters):
            return ["mustache", "section", to_tokens(callee), to_tokens(body), raw, list(delimiters)]
        case InvertedSection(callee=callee, body=body, raw=raw, delimiters=delimiters):
            return [
                "mustache",
                "inverted_section",
                to_tokens(callee),
                to_tokens(body),
                raw,
                list(delimiters),
            ]
        case Partial(name=name, padding=padding):
            return ["mustache", "partial", name, padding]
        case _:
            msg = f"Not a Whisker node: {type(node).__name__}"
            raise TypeError(msg)
