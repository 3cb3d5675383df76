#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/pdf.py
"""PDF rendering from AST.

This module provides the PdfRenderer class which converts AST nodes to PDF
with ReportLab's platypus layout engine. Block nodes become flowables
(paragraphs, preformatted code, list and table flowables); inline nodes are
translated to ReportLab's paragraph markup (``<b>``, ``<i>``, ``<font>``...).

The document opens with a title page built from the Document title, authors
and summary, and every chapter starts on a new page; both are configurable
through PdfRendererOptions.

"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from reportlab.lib.styles import StyleSheet1
    from reportlab.platypus import Flowable

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
from docz.ast.visitors import NodeVisitor
from docz.constants import DEPS_PDF_RENDER
from docz.exceptions import RenderError
from docz.options.pdf import PdfRendererOptions
from docz.renderers.base import BaseRenderer, InlineContentMixin
from docz.utils.decorators import requires_dependencies
from docz.utils.text import escape_html, escape_xml_text

logger = logging.getLogger(__name__)


class PdfRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to PDF.

    Block visitors append flowables to ``_flowables``; inline visitors append
    paragraph markup to ``_output``.

    Parameters
    ----------
    options : PdfRendererOptions or None, default = None
        PDF rendering options

    Examples
    --------
        >>> from docz.ast import Document, Heading, Text
        >>> doc = Document(title="Report", children=[Heading(level=1, children=[Text(value="Intro")])])
        >>> PdfRenderer().render(doc)[:4]
        b'%PDF'

    """

    file_extension = "pdf"

    def __init__(self, options: PdfRendererOptions | None = None):
        """Initialize the PDF renderer with options."""
        BaseRenderer._validate_options_type(options, PdfRendererOptions, "pdf")
        options = options or PdfRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: PdfRendererOptions = options
        self._flowables: list[Flowable] = []
        self._output: list[str] = []
        # _styles is initialized in render() before any visitor methods are called
        self._styles: Any = None
        self._quote_depth: int = 0
        self._footnotes: list[FootnoteDef] = []

    def is_binary(self) -> bool:
        """PDF output is binary."""
        return True

    @requires_dependencies("pdf", DEPS_PDF_RENDER)
    def render(self, node: Node) -> bytes:
        """Render the tree to the bytes of a PDF file.

        Raises
        ------
        UnsupportedNodeError
            If the tree contains an Other node
        RenderError
            If ReportLab fails to lay out or write the document

        """
        from reportlab.lib import colors
        from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
        from reportlab.lib.pagesizes import A4, LEGAL, LETTER
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import inch
        from reportlab.platypus import (
            HRFlowable,
            ListFlowable,
            PageBreak,
            Preformatted,
            SimpleDocTemplate,
            Spacer,
            TableStyle,
        )
        from reportlab.platypus import ListItem as ReportLabListItem
        from reportlab.platypus import Paragraph as ReportLabParagraph
        from reportlab.platypus import Table as ReportLabTable

        # Store imports as instance variables
        self._colors = colors
        self._alignments = {"left": TA_LEFT, "center": TA_CENTER, "right": TA_RIGHT}
        self._page_sizes = {"a4": A4, "letter": LETTER, "legal": LEGAL}
        self._ParagraphStyle = ParagraphStyle
        self._getSampleStyleSheet = getSampleStyleSheet
        self._inch = inch
        self._HRFlowable = HRFlowable
        self._ListFlowable = ListFlowable
        self._ListItem = ReportLabListItem
        self._PageBreak = PageBreak
        self._Paragraph = ReportLabParagraph
        self._Preformatted = Preformatted
        self._Spacer = Spacer
        self._ReportLabTable = ReportLabTable
        self._TableStyle = TableStyle

        doc = node if isinstance(node, Document) else Document(children=[node])

        self._flowables = []
        self._output = []
        self._quote_depth = 0
        self._footnotes = []
        self._styles = self._create_styles()

        if self.options.title_page:
            self._add_title_page(doc)
        node.accept(self)
        self._add_footnotes()

        if not self._flowables:
            self._flowables.append(self._Spacer(1, 1))

        doc_kwargs: dict[str, Any] = {
            "pagesize": self._page_sizes[self.options.page_size],
            "rightMargin": self.options.margin,
            "leftMargin": self.options.margin,
            "topMargin": self.options.margin,
            "bottomMargin": self.options.margin,
            "title": doc.title or "",
            "author": ", ".join(doc.authors or []),
            "subject": doc.summary or "",
        }
        if self.options.creator:
            doc_kwargs["creator"] = self.options.creator

        buffer = BytesIO()
        try:
            SimpleDocTemplate(buffer, **doc_kwargs).build(self._flowables)
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to render PDF: {e!r}", rendering_stage="rendering", original_error=e) from e
        finally:
            self._flowables = []
        return buffer.getvalue()

    def _get_bold_font(self, base_font: str) -> str:
        """Get the bold variant of a standard font."""
        font_bold_map = {
            "Times-Roman": "Times-Bold",
            "Helvetica": "Helvetica-Bold",
            "Courier": "Courier-Bold",
        }
        return font_bold_map.get(base_font, base_font + "-Bold")

    def _create_styles(self) -> StyleSheet1:
        """Create paragraph styles for the document."""
        styles = self._getSampleStyleSheet()
        font_size = self.options.font_size

        styles["Normal"].fontName = self.options.font_name
        styles["Normal"].fontSize = font_size
        styles["Normal"].leading = font_size * 1.3

        bold_font = self._get_bold_font(self.options.font_name)
        for level in range(1, 7):
            style = styles[f"Heading{level}"]
            style.fontName = bold_font
            style.fontSize = font_size + (7 - level) * 2
            style.leading = style.fontSize * 1.2
            style.spaceBefore = 12
            style.spaceAfter = 12

        styles["Title"].fontName = bold_font
        styles["Title"].fontSize = font_size * 2.5
        styles["Title"].leading = styles["Title"].fontSize * 1.2

        styles.add(
            self._ParagraphStyle(name="TitleMeta", parent=styles["Normal"], alignment=self._alignments["center"])
        )
        styles.add(
            self._ParagraphStyle(
                name="DoczCode",
                parent=styles["Normal"],
                fontName=self.options.code_font,
                fontSize=font_size - 1,
                leading=(font_size - 1) * 1.2,
                backColor=self._colors.HexColor("#F5F5F5"),
                leftIndent=10,
                rightIndent=10,
                spaceBefore=6,
                spaceAfter=6,
            )
        )
        styles.add(
            self._ParagraphStyle(
                name="BlockQuote",
                parent=styles["Normal"],
                leftIndent=20,
                rightIndent=20,
                textColor=self._colors.HexColor("#666666"),
            )
        )
        styles.add(self._ParagraphStyle(name="DescrDetail", parent=styles["Normal"], leftIndent=20))
        styles.add(self._ParagraphStyle(name="Footnote", parent=styles["Normal"], fontSize=font_size - 2))
        for name, alignment in self._alignments.items():
            styles.add(self._ParagraphStyle(name=f"Cell-{name}", parent=styles["Normal"], alignment=alignment))
        return styles

    def _paragraph_style(self) -> Any:
        return self._styles["BlockQuote"] if self._quote_depth else self._styles["Normal"]

    def _render_flowables(self, nodes: list[Node]) -> list[Flowable]:
        """Render block nodes into a separate list of flowables."""
        saved_flowables = self._flowables
        self._flowables = []
        try:
            for child in nodes:
                child.accept(self)
            return self._flowables
        finally:
            self._flowables = saved_flowables

    def _add_title_page(self, doc: Document) -> None:
        """Add a title page when the document has a title, authors or a summary."""
        if not (doc.title or doc.authors or doc.summary):
            return
        self._flowables.append(self._Spacer(1, 2 * self._inch))
        if doc.title:
            self._flowables.append(self._Paragraph(escape_xml_text(doc.title), self._styles["Title"]))
        if doc.authors:
            self._flowables.append(self._Paragraph(escape_xml_text(", ".join(doc.authors)), self._styles["TitleMeta"]))
        if doc.summary:
            self._flowables.append(self._Spacer(1, 0.3 * self._inch))
            self._flowables.append(self._Paragraph(escape_xml_text(doc.summary), self._styles["TitleMeta"]))
        self._flowables.append(self._PageBreak())

    def _add_footnotes(self) -> None:
        """Append the collected footnote definitions after a rule."""
        if not self._footnotes:
            return
        self._flowables.append(self._Spacer(1, 0.3 * self._inch))
        self._flowables.append(self._HRFlowable(width="80%", color=self._colors.grey))
        for footnote in self._footnotes:
            label = f"<super>{escape_xml_text(footnote.id)}</super> "
            children = list(footnote.children)
            if children and isinstance(children[0], Paragraph):
                first = children.pop(0)
                markup = label + self._render_inline_content(first.children)
                self._flowables.append(self._Paragraph(markup, self._styles["Footnote"]))
            else:
                self._flowables.append(self._Paragraph(label, self._styles["Footnote"]))
            self._flowables.extend(self._render_flowables(children))

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        self.visit_children(node)

    def visit_fragment(self, node: Fragment) -> None:
        self.visit_children(node)

    def visit_chapter(self, node: Chapter) -> None:
        """Render a Chapter, on a new page unless it is the first flowable.

        The chapter title is shown as a top-level heading unless the chapter
        already opens with a heading.

        """
        if self.options.chapter_page_breaks and self._flowables and not isinstance(self._flowables[-1], self._PageBreak):
            self._flowables.append(self._PageBreak())
        opens_with_heading = bool(node.children) and isinstance(node.children[0], Heading)
        if node.title and not opens_with_heading:
            self._flowables.append(self._Paragraph(escape_xml_text(node.title), self._styles["Heading1"]))
        self.visit_children(node)

    def visit_section(self, node: Section) -> None:
        self.visit_children(node)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        text = self._render_inline_content(node.children)
        self._flowables.append(self._Paragraph(text, self._styles[f"Heading{node.level}"]))

    def visit_paragraph(self, node: Paragraph) -> None:
        text = self._render_inline_content(node.children)
        self._flowables.append(self._Paragraph(text, self._paragraph_style()))
        self._flowables.append(self._Spacer(1, 0.1 * self._inch))

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._quote_depth += 1
        try:
            self.visit_children(node)
        finally:
            self._quote_depth -= 1

    def visit_list(self, node: List) -> None:
        """Render a List as a ListFlowable; task items are prefixed with ``[ ]`` or ``[x]``."""
        bullet_type = "1" if node.ordered else "bullet"
        items = []
        for item_node in node.children:
            flowables = self._render_flowables([item_node])
            if not flowables:
                flowables = [self._Paragraph("", self._paragraph_style())]
            items.append(self._ListItem(flowables))

        if items:
            start = (node.start if node.start is not None else 1) if node.ordered else None
            self._flowables.append(self._ListFlowable(items, bulletType=bullet_type, start=start))
            self._flowables.append(self._Spacer(1, 0.1 * self._inch))

    def visit_list_item(self, node: ListItem) -> None:
        children = list(node.children)
        if node.checked is not None:
            box = "[x] " if node.checked else "[ ] "
            if children and isinstance(children[0], Paragraph):
                first = children.pop(0)
                self._flowables.append(
                    self._Paragraph(box + self._render_inline_content(first.children), self._paragraph_style())
                )
            else:
                self._flowables.append(self._Paragraph(box, self._paragraph_style()))
        for child in children:
            child.accept(self)

    def visit_table(self, node: Table) -> None:
        """Render a Table; a leading header row is drawn bold on a grey background."""
        rows = self._table_rows(node)
        num_cols = self._compute_table_columns(rows)
        if not rows or num_cols == 0:
            return

        data: list[list[Any]] = []
        for row in rows:
            cells = []
            for cell in row.children:
                align = cell.align if isinstance(cell, TableCell) and cell.align in self._alignments else "left"
                markup = self._render_inline_content(cell.get_children() or [])
                if row.is_header:
                    markup = f"<b>{markup}</b>"
                cells.append(self._Paragraph(markup, self._styles[f"Cell-{align}"]))
            cells += [self._Paragraph("", self._styles["Normal"]) for _ in range(num_cols - len(cells))]
            data.append(cells)

        table = self._ReportLabTable(data)
        style_commands: list[Any] = [
            ("GRID", (0, 0), (-1, -1), 0.5, self._colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ]
        if rows[0].is_header:
            style_commands.append(("BACKGROUND", (0, 0), (-1, 0), self._colors.HexColor("#EEEEEE")))
        table.setStyle(self._TableStyle(style_commands))
        self._flowables.append(table)
        self._flowables.append(self._Spacer(1, 0.2 * self._inch))

    def visit_table_row(self, node: TableRow) -> None:
        """Rows are laid out by visit_table."""
        self.visit_table(Table(children=[node]))

    def visit_table_cell(self, node: TableCell) -> None:
        """Cells are laid out by visit_table."""
        self._output.append(self._render_inline_content(node.children))

    def visit_code_block(self, node: CodeBlock) -> None:
        self._flowables.append(self._Preformatted(node.value.rstrip("\n"), self._styles["DoczCode"]))
        self._flowables.append(self._Spacer(1, 0.1 * self._inch))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._flowables.append(
            self._HRFlowable(
                width="100%",
                thickness=1,
                color=self._colors.grey,
                spaceAfter=0.2 * self._inch,
                spaceBefore=0.2 * self._inch,
            )
        )

    def visit_html(self, node: Html) -> None:
        """Raw HTML is shown as source text: as code for a block, escaped inline otherwise."""
        if "\n" in node.value.strip("\n"):
            self._flowables.append(self._Preformatted(node.value.rstrip("\n"), self._styles["DoczCode"]))
        else:
            self._output.append(
                f'<font name="{self.options.code_font}">{escape_xml_text(node.value.strip())}</font>'
            )

    def visit_comment(self, node: Comment) -> None:
        """Comments render to nothing."""

    def visit_metadata(self, node: Metadata) -> None:
        """Frontmatter is not content; it renders to nothing."""

    def visit_footnote_def(self, node: FootnoteDef) -> None:
        """Footnote definitions are collected and rendered at the end of the document."""
        self._footnotes.append(node)

    def visit_descr_list(self, node: DescrList) -> None:
        self.visit_children(node)
        self._flowables.append(self._Spacer(1, 0.1 * self._inch))

    def visit_descr_item(self, node: DescrItem) -> None:
        self.visit_children(node)

    def visit_descr_term(self, node: DescrTerm) -> None:
        text = self._render_inline_content(node.children)
        self._flowables.append(self._Paragraph(f"<b>{text}</b>", self._styles["Normal"]))

    def visit_descr_detail(self, node: DescrDetail) -> None:
        for flowable in self._render_flowables(node.children):
            if isinstance(flowable, self._Paragraph):
                flowable = self._Paragraph(flowable.text, self._styles["DescrDetail"])
            self._flowables.append(flowable)

    def visit_other(self, node: Other) -> None:
        self._unsupported(node)

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self._output.append(escape_xml_text(node.value))

    def visit_inline_code(self, node: InlineCode) -> None:
        self._output.append(
            f'<font name="{self.options.code_font}" backColor="#F0F0F0">{escape_xml_text(node.value)}</font>'
        )

    def visit_link(self, node: Link) -> None:
        inner = self._render_inline_content(node.children)
        self._output.append(f'<link href="{escape_html(node.url)}" color="blue">{inner}</link>')

    def visit_image(self, node: Image) -> None:
        """Images are shown as a link labelled with their alt text."""
        label = escape_xml_text(node.alt or node.url)
        self._output.append(f'<link href="{escape_html(node.url)}" color="blue">[{label}]</link>')

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("<br/>")

    def visit_soft_break(self, node: SoftBreak) -> None:
        self._output.append(" ")

    def visit_bold(self, node: Bold) -> None:
        self._output.append(f"<b>{self._render_inline_content(node.children)}</b>")

    def visit_italic(self, node: Italic) -> None:
        self._output.append(f"<i>{self._render_inline_content(node.children)}</i>")

    def visit_strike_through(self, node: StrikeThrough) -> None:
        self._output.append(f"<strike>{self._render_inline_content(node.children)}</strike>")

    def visit_superscript(self, node: Superscript) -> None:
        self._output.append(f"<super>{self._render_inline_content(node.children)}</super>")

    def visit_footnote_ref(self, node: FootnoteRef) -> None:
        self._output.append(f"<super>{escape_xml_text(node.id)}</super>")
