#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/ast/serialization.py
"""JSON serialization for AST structures.

Trees are converted to plain dictionaries of the form::

    {
        "node_type": "Heading",
        "level": 1,
        "attrs": {},
        "span": {"start_line": 1, "start_col": 1, "end_line": 1, "end_col": 7},
        "children": [{"node_type": "Text", "value": "Hello", "attrs": {}}]
    }

``span`` is omitted when absent and ``children`` is present exactly for
structural variants. ``ast_to_json`` wraps the root in a versioned envelope.

Examples
--------
    >>> from docz.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text(value="Hello")])])
    >>> json_to_ast(ast_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from docz.ast.nodes import NODE_TYPES, Node, Span

SCHEMA_VERSION = 1

_COMMON_FIELDS = ("children", "attrs", "span")


def _span_to_dict(span: Span) -> dict[str, int]:
    return {
        "start_line": span.start_line,
        "start_col": span.start_col,
        "end_line": span.end_line,
        "end_col": span.end_col,
    }


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node and its subtree to a dictionary.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        JSON-compatible dictionary

    """
    result: dict[str, Any] = {"node_type": node.variant}
    for f in fields(node):  # type: ignore[arg-type]
        if f.name in _COMMON_FIELDS:
            continue
        value = getattr(node, f.name)
        result[f.name] = list(value) if isinstance(value, list) else value

    result["attrs"] = dict(node.attrs)
    if node.span is not None:
        result["span"] = _span_to_dict(node.span)

    children = node.get_children()
    if children is not None:
        result["children"] = [ast_to_dict(child) for child in children]
    return result


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary produced by ``ast_to_dict`` back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed node with its subtree

    Raises
    ------
    ValueError
        If the node type is unknown or the payload is malformed

    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node dictionary, got {type(data).__name__}")

    node_type = data.get("node_type")
    node_class = NODE_TYPES.get(str(node_type))
    if node_class is None:
        raise ValueError(f"Unknown node type: {node_type!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(node_class):  # type: ignore[arg-type]
        if f.name in _COMMON_FIELDS:
            continue
        if f.name in data:
            kwargs[f.name] = data[f.name]

    attrs = data.get("attrs", {})
    if not isinstance(attrs, dict):
        raise ValueError(f"{node_type}: 'attrs' must be an object, got {type(attrs).__name__}")
    kwargs["attrs"] = {str(key): (None if value is None else str(value)) for key, value in attrs.items()}

    span = data.get("span")
    if span is not None:
        try:
            kwargs["span"] = Span(span["start_line"], span["start_col"], span["end_line"], span["end_col"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"{node_type}: malformed span {span!r}") from e

    if not node_class.is_leaf():
        children = data.get("children", [])
        if not isinstance(children, list):
            raise ValueError(f"{node_type}: 'children' must be a list")
        kwargs["children"] = [dict_to_ast(child) for child in children]
    elif "children" in data:
        raise ValueError(f"{node_type} nodes cannot have children")

    try:
        return node_class(**kwargs)
    except TypeError as e:
        raise ValueError(f"{node_type}: invalid fields: {e}") from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST to a JSON string with a schema version envelope.

    Parameters
    ----------
    node : Node
        Root node to serialize
    indent : int or None, default = None
        Indentation for pretty printing

    Returns
    -------
    str
        JSON document ``{"schema_version": 1, "root": {...}}``

    """
    return json.dumps({"schema_version": SCHEMA_VERSION, "root": ast_to_dict(node)}, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string produced by ``ast_to_json``.

    Raises
    ------
    ValueError
        If the JSON is invalid, the schema version is unsupported or the tree
        is malformed

    """
    try:
        payload = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid AST JSON (line {e.lineno}, column {e.colno}): {e.msg}") from e

    if not isinstance(payload, dict) or "root" not in payload:
        raise ValueError("AST JSON must be an object with a 'root' node")
    version = payload.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported AST schema version: {version!r} (expected {SCHEMA_VERSION})")
    return dict_to_ast(payload["root"])
