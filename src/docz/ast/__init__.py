#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST is the format-independent representation shared by every parser,
processor and renderer in docz:

- nodes: node variants, Span and the children accessors
- visitors: visitor base class used by renderers
- traversal: visit, visit_mut and visit_and_modify, plus small tree helpers
- serialization: JSON serialization and deserialization of trees

Examples
--------
    >>> from docz.ast import Document, Heading, Text
    >>> from docz.renderers.debug import DebugRenderer
    >>> doc = Document(title="Book", children=[Heading(level=1, children=[Text(value="Hello")])])
    >>> print(DebugRenderer().render_as_text(doc))
    Document(title='Book', summary=None, authors=None, attrs={})
      Heading(level=1, attrs={})
        Text(value='Hello', attrs={})

"""

from __future__ import annotations

from docz.ast.nodes import (
    NODE_TYPES,
    Attrs,
    BlockQuote,
    Bold,
    Chapter,
    CodeBlock,
    Comment,
    DescrDetail,
    DescrItem,
    DescrList,
    DescrTerm,
    Document,
    FootnoteDef,
    FootnoteRef,
    Fragment,
    Heading,
    Html,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    Metadata,
    Node,
    Other,
    Paragraph,
    ParentNode,
    Section,
    SoftBreak,
    Span,
    StrikeThrough,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from docz.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from docz.ast.traversal import (
    clone_node,
    count_nodes,
    extract_nodes,
    node_text,
    visit,
    visit_and_modify,
    visit_mut,
)
from docz.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "Attrs",
    "BlockQuote",
    "Bold",
    "Chapter",
    "CodeBlock",
    "Comment",
    "DescrDetail",
    "DescrItem",
    "DescrList",
    "DescrTerm",
    "Document",
    "FootnoteDef",
    "FootnoteRef",
    "Fragment",
    "Heading",
    "Html",
    "Image",
    "InlineCode",
    "Italic",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Metadata",
    "Node",
    "NodeVisitor",
    "Other",
    "Paragraph",
    "ParentNode",
    "Section",
    "SoftBreak",
    "Span",
    "StrikeThrough",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "ast_to_dict",
    "ast_to_json",
    "clone_node",
    "count_nodes",
    "dict_to_ast",
    "extract_nodes",
    "json_to_ast",
    "node_text",
    "visit",
    "visit_and_modify",
    "visit_mut",
]
