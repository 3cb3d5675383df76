#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy every parser produces, every processor
rewrites and every renderer consumes. Each variant is a dataclass carrying only
the fields relevant to it, plus two fields common to all variants:

- ``attrs``: free-form string attributes (e.g. ``"id"`` overrides). Values may
  be ``None`` for flag-like keys.
- ``span``: optional source position, set only by parsers that track it.

Node Hierarchy
--------------
Leaf variants never carry children:
    - Text, InlineCode, Html, Comment, Image, Metadata, FootnoteRef
    - LineBreak, SoftBreak, ThematicBreak, CodeBlock

Structural variants always carry a (possibly empty) ``children`` list:
    - Document, Fragment, Chapter, Section
    - Heading, Paragraph, BlockQuote, List, ListItem
    - Table, TableRow, TableCell
    - Link, Bold, Italic, StrikeThrough, Superscript, FootnoteDef
    - DescrList, DescrItem, DescrTerm, DescrDetail, Other

Only Document carries document-level metadata (title, summary, authors).

"""

from __future__ import annotations

import re
from abc import ABC
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

Attrs = dict[str, Optional[str]]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class Span:
    """Source position of a node: 1-based, inclusive line and column range.

    Spans are only meaningful relative to the text the node was parsed from;
    processors that synthesize or relocate nodes drop them.

    Parameters
    ----------
    start_line : int
        First line of the node
    start_col : int
        Column of the first character on ``start_line``
    end_line : int
        Last line of the node
    end_col : int
        Column of the last character on ``end_line``

    Raises
    ------
    ValueError
        If a position is below 1 or ``start_line > end_line``

    """

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def __post_init__(self) -> None:
        """Validate the position values."""
        for name in ("start_line", "start_col", "end_line", "end_col"):
            if getattr(self, name) < 1:
                raise ValueError(f"Span {name} must be >= 1, got {getattr(self, name)}")
        if self.start_line > self.end_line:
            raise ValueError(f"Span start_line ({self.start_line}) is after end_line ({self.end_line})")

    @classmethod
    def new(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> Span:
        """Create a span from its four coordinates."""
        return cls(start_line, start_col, end_line, end_col)

    def __str__(self) -> str:
        """Format as ``start_line:start_col-end_line:end_col``."""
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses are dataclasses. The variant tag of a node is its class name,
    and the visitor method it dispatches to is derived from that name
    (``BlockQuote`` -> ``visit_block_quote``).

    Attributes
    ----------
    attrs : dict
        Free-form attributes, string keys to optional string values
    span : Span or None
        Source position, when the producing parser tracks it

    """

    attrs: Attrs
    span: Optional[Span]

    _visit_method: ClassVar[str] = "generic_visit"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Derive the visitor method name from the class name."""
        super().__init_subclass__(**kwargs)
        cls._visit_method = "visit_" + _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()

    @property
    def variant(self) -> str:
        """Return the variant tag of this node."""
        return type(self).__name__

    @classmethod
    def is_leaf(cls) -> bool:
        """Return True if this variant never carries children."""
        return True

    def get_children(self) -> Optional[list[Node]]:
        """Return the children of this node, or None for leaf variants.

        Structural variants always return a list, even when it is empty, so
        "no children yet" and "cannot have children" stay distinguishable.
        The returned list is the node's own storage; treat it as read-only and
        use ``get_children_mut`` to edit it.

        """
        return None

    def get_children_mut(self) -> Optional[list[Node]]:
        """Return a mutable handle on the children, or None for leaf variants.

        The handle is the same list object ``get_children`` returns, so edits
        through it are seen by every reader of the node.

        """
        return None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to the visitor method for this variant.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_*`` methods

        Returns
        -------
        Any
            Result from the visitor's method

        """
        return getattr(visitor, self._visit_method)(self)


class ParentNode(Node):
    """Base class for structural variants; the ``children`` field is always a list."""

    children: list[Node]

    @classmethod
    def is_leaf(cls) -> bool:
        """Structural variants are never leaves."""
        return False

    def get_children(self) -> Optional[list[Node]]:
        """Return the children list."""
        return self.children

    def get_children_mut(self) -> Optional[list[Node]]:
        """Return the children list for in-place edits."""
        return self.children


# ============================================================================
# Document structure
# ============================================================================


@dataclass
class Document(ParentNode):
    """Root node of a document.

    Parameters
    ----------
    title : str or None, default = None
        Document title
    summary : str or None, default = None
        Short description of the document
    authors : list of str or None, default = None
        Author names
    children : list of Node, default = empty list
        Top-level content
    attrs : dict, default = empty dict
        Free-form attributes
    span : Span or None, default = None
        Source position

    """

    title: Optional[str] = None
    summary: Optional[str] = None
    authors: Optional[list[str]] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Fragment(ParentNode):
    """Sequence of nodes without any document-level metadata."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Chapter(ParentNode):
    """One chapter of an aggregated document, usually one source file.

    Parameters
    ----------
    title : str or None, default = None
        Chapter title, typically recovered from the file's frontmatter

    """

    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Section(ParentNode):
    """Generic grouping of block content inside a chapter or document."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


# ============================================================================
# Block-level nodes
# ============================================================================


@dataclass
class Heading(ParentNode):
    """Section heading.

    Parameters
    ----------
    level : int
        Heading level, 1 to 6
    children : list of Node, default = empty list
        Inline content

    Raises
    ------
    ValueError
        If ``level`` is outside 1..6

    """

    level: int
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None

    def __post_init__(self) -> None:
        """Validate the heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(ParentNode):
    """Paragraph of inline content."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class BlockQuote(ParentNode):
    """Quoted block content."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class List(ParentNode):
    """Ordered or unordered list whose children are ListItem nodes.

    Parameters
    ----------
    ordered : bool, default = False
        True for a numbered list
    start : int or None, default = None
        First number of an ordered list, None when it starts at the default

    """

    ordered: bool = False
    start: Optional[int] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class ListItem(ParentNode):
    """List entry.

    Parameters
    ----------
    checked : bool or None, default = None
        Task state: None for a plain item, False/True for an unchecked/checked task

    """

    checked: Optional[bool] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Table(ParentNode):
    """Table whose children are TableRow nodes, header rows first."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class TableRow(ParentNode):
    """Table row whose children are TableCell nodes."""

    is_header: bool = False
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class TableCell(ParentNode):
    """Table cell with inline content and an optional column alignment ("left", "center", "right")."""

    align: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class CodeBlock(Node):
    """Literal block of code.

    Parameters
    ----------
    value : str
        Literal code text
    info : str or None, default = None
        Fence info string, usually the language

    """

    value: str = ""
    info: Optional[str] = None
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Html(Node):
    """Raw HTML passed through from the source."""

    value: str = ""
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Comment(Node):
    """Source comment; renders to nothing in HTML and Markdown output."""

    value: str = ""
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Metadata(Node):
    """Raw frontmatter text (without its ``---`` delimiters)."""

    value: str = ""
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class FootnoteDef(ParentNode):
    """Footnote definition; ``id`` matches the FootnoteRef nodes pointing at it."""

    id: str
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class DescrList(ParentNode):
    """Definition list whose children are DescrItem nodes."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class DescrItem(ParentNode):
    """One term with its details (DescrTerm followed by DescrDetail nodes)."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class DescrTerm(ParentNode):
    """Term being defined, inline content."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class DescrDetail(ParentNode):
    """Definition of a term, block content."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Other(ParentNode):
    """Escape hatch for constructs the node model does not know, tagged by ``name``."""

    name: str
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


# ============================================================================
# Inline nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    value: str = ""
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class InlineCode(Node):
    """Inline code span."""

    value: str = ""
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Link(ParentNode):
    """Hyperlink; the children are the link text.

    Parameters
    ----------
    url : str
        Link target
    title : str or None, default = None
        Optional link title

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Image(Node):
    """Image reference.

    Parameters
    ----------
    url : str
        Image source
    alt : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title

    """

    url: str
    alt: str = ""
    title: Optional[str] = None
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class LineBreak(Node):
    """Hard line break."""

    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class SoftBreak(Node):
    """Soft line break, rendered as a newline or a space."""

    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Bold(ParentNode):
    """Strong emphasis."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Italic(ParentNode):
    """Emphasis."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class StrikeThrough(ParentNode):
    """Struck-through text."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class Superscript(ParentNode):
    """Superscript text."""

    children: list[Node] = field(default_factory=list)
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


@dataclass
class FootnoteRef(Node):
    """Reference to the FootnoteDef with the same ``id``."""

    id: str
    attrs: Attrs = field(default_factory=dict)
    span: Optional[Span] = None


NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Fragment,
        Chapter,
        Section,
        Heading,
        Paragraph,
        BlockQuote,
        List,
        ListItem,
        Table,
        TableRow,
        TableCell,
        CodeBlock,
        ThematicBreak,
        Html,
        Comment,
        Metadata,
        FootnoteDef,
        DescrList,
        DescrItem,
        DescrTerm,
        DescrDetail,
        Other,
        Text,
        InlineCode,
        Link,
        Image,
        LineBreak,
        SoftBreak,
        Bold,
        Italic,
        StrikeThrough,
        Superscript,
        FootnoteRef,
    )
}
"""Every concrete variant, keyed by variant tag."""
