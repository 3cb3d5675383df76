#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/ast/traversal.py
"""Tree traversal and rewriting.

Every processor and most tree-walking helpers are built from three primitives:

- ``visit``: read-only pre-order walk.
- ``visit_mut``: the same walk, with the callback allowed to edit node fields
  in place (but not the tree shape).
- ``visit_and_modify``: the rewrite primitive. A callback returns a
  replacement node or None (delete the node and its subtree). The engine then
  recurses into the *replacement's* children and attaches the surviving,
  rewritten children to the replacement.

The callback of ``visit_and_modify`` therefore decides how to rewrite a parent
while looking at the parent's original children, but the tree that comes out
holds the independently rewritten children. Processors rely on this order.

Examples
--------
Wrap a document in a chapter and drop comments:

    >>> from docz.ast import Chapter, Comment, Document, Paragraph, Text
    >>> def rewrite(node):
    ...     if isinstance(node, Document):
    ...         return Chapter(children=node.children)
    ...     if isinstance(node, Comment):
    ...         return None
    ...     return node
    >>> doc = Document(children=[Comment(value="x"), Paragraph(children=[Text(value="hi")])])
    >>> visit_and_modify(doc, rewrite)
    Chapter(title=None, children=[Paragraph(children=[Text(value='hi', attrs={}, span=None)], attrs={}, span=None)], attrs={}, span=None)

"""

from __future__ import annotations

import copy
from typing import Callable, Optional, TypeVar

from docz.ast.nodes import Node, Text

NodeT = TypeVar("NodeT", bound=Node)

VisitCallback = Callable[[Node], None]
RewriteCallback = Callable[[Node], Optional[Node]]


def visit(node: Node, callback: VisitCallback) -> None:
    """Call ``callback`` on every node of the tree, pre-order.

    The node itself is visited first, then each child left to right,
    recursively. Every node is visited exactly once. The walk uses an explicit
    stack, so very deep trees do not hit the recursion limit.

    Parameters
    ----------
    node : Node
        Root of the tree to walk
    callback : callable
        Function called with each node; its return value is ignored

    """
    stack = [node]
    while stack:
        current = stack.pop()
        callback(current)
        children = current.get_children()
        if children:
            stack.extend(reversed(children))


def visit_mut(node: Node, callback: VisitCallback) -> None:
    """Call ``callback`` on every node with permission to edit it in place.

    Same order as ``visit``. The callback may change fields of the node it
    receives (text, attributes, titles...). Children are read after the
    callback returns, so edits to the children list are honoured, but
    restructuring belongs in ``visit_and_modify``.

    Parameters
    ----------
    node : Node
        Root of the tree to walk
    callback : callable
        Function called with each node; its return value is ignored

    """
    callback(node)
    children = node.get_children_mut()
    if children:
        for child in list(children):
            visit_mut(child, callback)


def visit_and_modify(node: Node, f: RewriteCallback) -> Optional[Node]:
    """Rewrite a tree, returning a new one.

    ``f`` is applied to ``node``:

    - If it returns None, the node and its whole subtree are deleted and None
      is returned.
    - Otherwise, the engine recurses into the children of the *replacement*
      with the same rule, drops every child whose recursion returned None, and
      sets the survivors, in order, as the replacement's children.

    The input tree is never modified and the output tree shares no node with
    it: the replacement is copied (without its subtree) before the rewritten
    children are attached, so ``f`` may safely return its argument unchanged.

    Parameters
    ----------
    node : Node
        Root of the tree to rewrite
    f : callable
        Function mapping a node to its replacement, or None to delete it

    Returns
    -------
    Node or None
        The rewritten tree, or None if the root was deleted

    """
    replacement = f(node)
    if replacement is None:
        return None

    children = replacement.get_children()
    if children is None:
        return copy.deepcopy(replacement)

    rewritten: list[Node] = []
    for child in children:
        new_child = visit_and_modify(child, f)
        if new_child is not None:
            rewritten.append(new_child)

    shell = copy.copy(replacement)
    shell.children = []  # type: ignore[attr-defined]
    result = copy.deepcopy(shell)
    result.children = rewritten  # type: ignore[attr-defined]
    return result


def clone_node(node: NodeT) -> NodeT:
    """Create a deep copy of a node and its subtree.

    Stages that need to reuse a subtree of their input clone it first, so no
    node is ever shared between two trees.

    """
    return copy.deepcopy(node)


def count_nodes(node: Node) -> int:
    """Return the number of nodes in the tree, root included."""
    count = 0

    def _count(_: Node) -> None:
        nonlocal count
        count += 1

    visit(node, _count)
    return count


def extract_nodes(node: Node, node_type: type[NodeT]) -> list[NodeT]:
    """Return every node of ``node_type`` in the tree, in document order.

    Examples
    --------
        >>> headings = extract_nodes(doc, Heading)  # doctest: +SKIP

    """
    found: list[NodeT] = []

    def _collect(current: Node) -> None:
        if isinstance(current, node_type):
            found.append(current)

    visit(node, _collect)
    return found


def node_text(node: Node) -> str:
    """Concatenate the values of all Text nodes in the tree.

    Used for slugs, titles and alt texts, where only the plain text matters.

    """
    return "".join(text.value for text in extract_nodes(node, Text))
