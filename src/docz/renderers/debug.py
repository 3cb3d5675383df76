#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/debug.py
"""Structural dump of a tree.

The dump has one line per node, children indented by two spaces below their
parent, in document order::

    Document(title='Book', summary=None, authors=None, attrs={})
      Chapter(title=None, attrs={}, span=1:1-1:7)
        Heading(level=1, attrs={})
          Text(value='Hello', attrs={})

Each line lists the variant's own fields with their ``repr``, then ``attrs``
with sorted keys, then the span when there is one. Two trees dump to the same
text exactly when they have the same variants, fields, attributes, spans and
child order, which makes the dump the reference fixture for structural tests.

"""

from __future__ import annotations

from dataclasses import fields

from docz.ast.nodes import Node
from docz.renderers.base import BaseRenderer

INDENT = "  "

_COMMON_FIELDS = ("children", "attrs", "span")


def format_node_line(node: Node) -> str:
    """Format the dump line of a single node, without indentation or children."""
    parts = [f"{f.name}={getattr(node, f.name)!r}" for f in fields(node) if f.name not in _COMMON_FIELDS]  # type: ignore[arg-type]
    attrs = ", ".join(f"{key!r}: {value!r}" for key, value in sorted(node.attrs.items()))
    parts.append(f"attrs={{{attrs}}}")
    if node.span is not None:
        parts.append(f"span={node.span}")
    return f"{node.variant}({', '.join(parts)})"


def dump_tree(node: Node) -> str:
    """Return the structural dump of a tree, one line per node.

    The walk uses an explicit stack, so very deep trees do not hit the
    recursion limit.

    """
    lines: list[str] = []
    stack: list[tuple[Node, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        lines.append(INDENT * depth + format_node_line(current))
        children = current.get_children()
        if children:
            stack.extend((child, depth + 1) for child in reversed(children))
    return "\n".join(lines) + "\n"


class DebugRenderer(BaseRenderer):
    """Render a tree to its structural dump.

    Every variant is supported, ``Other`` included, so the dump never fails.

    Examples
    --------
        >>> from docz.ast import Paragraph, Text
        >>> print(DebugRenderer().render_as_text(Paragraph(children=[Text(value="Hi")])), end="")
        Paragraph(attrs={})
          Text(value='Hi', attrs={})

    """

    file_extension = "txt"

    def render(self, node: Node) -> bytes:
        """Render the structural dump as UTF-8 bytes."""
        return dump_tree(node).encode("utf-8")
