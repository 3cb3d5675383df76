#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/ast/visitors.py
"""Visitor pattern base class for AST rendering.

Every renderer that walks the tree subclasses ``NodeVisitor``. All ``visit_*``
methods are abstract, so a renderer missing a method for some variant cannot be
instantiated; adding a variant to the node model surfaces every renderer that
has to handle it. A renderer that cannot represent a variant implements the
method by raising ``UnsupportedNodeError`` rather than dropping the content.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from docz.ast.nodes import (
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
    Section,
    SoftBreak,
    StrikeThrough,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Nodes dispatch to these methods through ``Node.accept``.

    Examples
    --------
    Renderers subclass it together with BaseRenderer:

        >>> class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):  # doctest: +SKIP
        ...     def visit_text(self, node):
        ...         self._output.append(escape_html(node.value))

    """

    def visit_children(self, node: Node) -> None:
        """Visit the children of ``node`` in order; no-op for leaves."""
        for child in node.get_children() or []:
            child.accept(self)

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_fragment(self, node: Fragment) -> Any:
        """Visit a Fragment node."""
        pass

    @abstractmethod
    def visit_chapter(self, node: Chapter) -> Any:
        """Visit a Chapter node."""
        pass

    @abstractmethod
    def visit_section(self, node: Section) -> Any:
        """Visit a Section node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_html(self, node: Html) -> Any:
        """Visit a Html node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_metadata(self, node: Metadata) -> Any:
        """Visit a Metadata node."""
        pass

    @abstractmethod
    def visit_footnote_def(self, node: FootnoteDef) -> Any:
        """Visit a FootnoteDef node."""
        pass

    @abstractmethod
    def visit_descr_list(self, node: DescrList) -> Any:
        """Visit a DescrList node."""
        pass

    @abstractmethod
    def visit_descr_item(self, node: DescrItem) -> Any:
        """Visit a DescrItem node."""
        pass

    @abstractmethod
    def visit_descr_term(self, node: DescrTerm) -> Any:
        """Visit a DescrTerm node."""
        pass

    @abstractmethod
    def visit_descr_detail(self, node: DescrDetail) -> Any:
        """Visit a DescrDetail node."""
        pass

    @abstractmethod
    def visit_other(self, node: Other) -> Any:
        """Visit a Other node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit a InlineCode node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit a Italic node."""
        pass

    @abstractmethod
    def visit_strike_through(self, node: StrikeThrough) -> Any:
        """Visit a StrikeThrough node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_footnote_ref(self, node: FootnoteRef) -> Any:
        """Visit a FootnoteRef node."""
        pass
