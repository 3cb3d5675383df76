#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts AST nodes to
CommonMark text with the GFM extensions mistune reads back (tables, task
lists, strikethrough, footnotes), plus definition lists and ``^superscript^``.

Every block visitor appends exactly one chunk, without surrounding blank
lines, to ``_output``; containers render their children one by one and join
the chunks with blank lines, prefixing or indenting the lines as their syntax
requires (``> `` for quotes, the marker width for list items).

"""

from __future__ import annotations

import re

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
from docz.constants import FRONTMATTER_DELIMITER
from docz.frontmatter import serialize_frontmatter
from docz.options.markdown import MarkdownRendererOptions
from docz.renderers.base import BaseRenderer, InlineContentMixin

_ESCAPED_CHARS = re.compile(r"([\\`*_\[\]<])")
_BACKTICK_RUN = re.compile(r"`+")

# Block markers that would open a heading, quote, list or setext underline
_LINE_START_MARKER = re.compile(r"^( {0,3})([#>+=-])", re.MULTILINE)
_LINE_START_ORDERED = re.compile(r"^( {0,3})(\d{1,9})([.)])", re.MULTILINE)

_ALIGNMENT_ROWS = {"left": ":---", "center": ":---:", "right": "---:"}


def _indent_lines(text: str, first_prefix: str, rest_prefix: str) -> str:
    """Prefix the first line with ``first_prefix`` and the others with ``rest_prefix``.

    Empty lines get the prefix stripped of trailing spaces, so no line ends in
    whitespace.

    """
    lines = text.split("\n")
    result = []
    for index, line in enumerate(lines):
        prefix = first_prefix if index == 0 else rest_prefix
        result.append(prefix + line if line else prefix.rstrip())
    return "\n".join(result)


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from docz.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, children=[Text(value="Title")])])
        >>> print(MarkdownRenderer().render_as_text(doc), end="")
        # Title

    """

    file_extension = "md"

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._item_marker: str | None = None

    def render(self, node: Node) -> bytes:
        """Render a tree to UTF-8 Markdown.

        Raises
        ------
        UnsupportedNodeError
            If the tree contains an Other node

        """
        self._output = []
        self._item_marker = None
        node.accept(self)
        text = "".join(self._output).strip("\n")
        self._output = []
        return (text + "\n" if text else "").encode("utf-8")

    def _render_blocks(self, nodes: list[Node], separator: str = "\n\n") -> str:
        """Render block nodes one by one and join the non-empty results."""
        chunks = []
        for child in nodes:
            rendered = self._render_inline_content([child])
            if rendered:
                chunks.append(rendered)
        return separator.join(chunks)

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document, with its title, summary and authors as frontmatter."""
        chunks = []
        data = {
            key: value
            for key, value in (("title", node.title), ("summary", node.summary), ("authors", node.authors))
            if value is not None
        }
        if data:
            chunks.append(serialize_frontmatter(data).rstrip("\n"))
        body = self._render_blocks(node.children)
        if body:
            chunks.append(body)
        self._output.append("\n\n".join(chunks))

    def visit_fragment(self, node: Fragment) -> None:
        self._output.append(self._render_blocks(node.children))

    def visit_chapter(self, node: Chapter) -> None:
        """Render a Chapter as its content; the title lives in the source frontmatter."""
        self._output.append(self._render_blocks(node.children))

    def visit_section(self, node: Section) -> None:
        self._output.append(self._render_blocks(node.children))

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        content = self._render_inline_content(node.children)
        self._output.append(f"{'#' * node.level} {content}".rstrip())

    def visit_paragraph(self, node: Paragraph) -> None:
        content = self._render_inline_content(node.children)
        content = _LINE_START_MARKER.sub(r"\1\\\2", content)
        self._output.append(_LINE_START_ORDERED.sub(r"\1\2\\\3", content))

    def visit_block_quote(self, node: BlockQuote) -> None:
        content = self._render_blocks(node.children)
        self._output.append(_indent_lines(content, "> ", "> ") if content else ">")

    def visit_list(self, node: List) -> None:
        """Render a List; ordered lists number their items from ``start`` (default 1)."""
        items = []
        number = node.start if node.start is not None else 1
        for child in node.children:
            if node.ordered:
                self._item_marker = f"{number}."
                number += 1
            else:
                self._item_marker = self.options.bullet
            items.append(self._render_inline_content([child]))
        self._item_marker = None
        self._output.append("\n".join(item for item in items if item))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem with the marker chosen by the enclosing list.

        Items holding a single paragraph (and possibly nested lists) stay
        tight; items with several paragraphs are separated by blank lines.

        """
        marker = self._item_marker or self.options.bullet
        self._item_marker = None

        paragraphs = sum(1 for child in node.children if isinstance(child, Paragraph))
        separator = "\n" if paragraphs <= 1 else "\n\n"
        content = self._render_blocks(node.children, separator)
        if node.checked is not None:
            content = ("[x] " if node.checked else "[ ] ") + content

        indent = " " * (len(marker) + 1)
        self._output.append(_indent_lines(content, f"{marker} ", indent) if content else marker)

    def visit_table(self, node: Table) -> None:
        """Render a Table as a GFM pipe table.

        GFM requires a header; when the table has no header row, the first row
        is used as one.

        """
        rows = self._table_rows(node)
        if not rows:
            return
        num_cols = self._compute_table_columns(rows)
        header_index = next((i for i, row in enumerate(rows) if row.is_header), 0)
        header = rows[header_index]
        body = rows[:header_index] + rows[header_index + 1 :]

        lines = [self._render_row(header, num_cols)]
        aligns: list[str | None] = [cell.align if isinstance(cell, TableCell) else None for cell in header.children]
        aligns += [None] * (num_cols - len(aligns))
        lines.append("| " + " | ".join(_ALIGNMENT_ROWS.get(align or "", "---") for align in aligns) + " |")
        lines.extend(self._render_row(row, num_cols) for row in body)
        self._output.append("\n".join(lines))

    def _render_row(self, row: TableRow, num_cols: int) -> str:
        cells = [self._render_inline_content([cell]) for cell in row.children]
        cells += [""] * (num_cols - len(cells))
        return "| " + " | ".join(cells) + " |"

    def visit_table_row(self, node: TableRow) -> None:
        self._output.append(self._render_row(node, len(node.children)))

    def visit_table_cell(self, node: TableCell) -> None:
        content = self._render_inline_content(node.children)
        self._output.append(content.replace("|", "\\|").replace("\n", " "))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a fenced code block, lengthening the fence if the code contains it."""
        fence = self.options.code_fence
        while fence in node.value:
            fence += fence[0]
        value = node.value if not node.value or node.value.endswith("\n") else node.value + "\n"
        self._output.append(f"{fence}{node.info or ''}\n{value}{fence}")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._output.append("---")

    def visit_html(self, node: Html) -> None:
        self._output.append(node.value.rstrip("\n"))

    def visit_comment(self, node: Comment) -> None:
        """Comments render to nothing."""

    def visit_metadata(self, node: Metadata) -> None:
        """Re-emit raw frontmatter between ``---`` delimiters."""
        value = node.value if not node.value or node.value.endswith("\n") else node.value + "\n"
        self._output.append(f"{FRONTMATTER_DELIMITER}\n{value}{FRONTMATTER_DELIMITER}")

    def visit_footnote_def(self, node: FootnoteDef) -> None:
        content = self._render_blocks(node.children)
        self._output.append(_indent_lines(content, f"[^{node.id}]: ", "    "))

    def visit_descr_list(self, node: DescrList) -> None:
        self._output.append(self._render_blocks(node.children))

    def visit_descr_item(self, node: DescrItem) -> None:
        self._output.append(self._render_blocks(node.children, "\n"))

    def visit_descr_term(self, node: DescrTerm) -> None:
        self._output.append(self._render_inline_content(node.children))

    def visit_descr_detail(self, node: DescrDetail) -> None:
        content = self._render_blocks(node.children)
        self._output.append(_indent_lines(content, ": ", "  "))

    def visit_other(self, node: Other) -> None:
        self._unsupported(node)

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self._output.append(_ESCAPED_CHARS.sub(r"\\\1", node.value))

    def visit_inline_code(self, node: InlineCode) -> None:
        """Render inline code with a backtick run longer than any run in the code."""
        longest = max((len(run) for run in _BACKTICK_RUN.findall(node.value)), default=0)
        ticks = "`" * (longest + 1)
        padding = " " if node.value.startswith("`") or node.value.endswith("`") else ""
        self._output.append(f"{ticks}{padding}{node.value}{padding}{ticks}")

    def visit_link(self, node: Link) -> None:
        text = self._render_inline_content(node.children)
        self._output.append(f"[{text}]({self._format_destination(node.url, node.title)})")

    def visit_image(self, node: Image) -> None:
        alt = _ESCAPED_CHARS.sub(r"\\\1", node.alt)
        self._output.append(f"![{alt}]({self._format_destination(node.url, node.title)})")

    @staticmethod
    def _format_destination(url: str, title: str | None) -> str:
        destination = f"<{url}>" if " " in url or not url else url
        if title:
            escaped_title = title.replace('"', '\\"')
            return f'{destination} "{escaped_title}"'
        return destination

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("\\\n")

    def visit_soft_break(self, node: SoftBreak) -> None:
        self._output.append("\n")

    def visit_bold(self, node: Bold) -> None:
        symbol = self.options.emphasis_symbol * 2
        self._output.append(f"{symbol}{self._render_inline_content(node.children)}{symbol}")

    def visit_italic(self, node: Italic) -> None:
        symbol = self.options.emphasis_symbol
        self._output.append(f"{symbol}{self._render_inline_content(node.children)}{symbol}")

    def visit_strike_through(self, node: StrikeThrough) -> None:
        self._output.append(f"~~{self._render_inline_content(node.children)}~~")

    def visit_superscript(self, node: Superscript) -> None:
        self._output.append(f"^{self._render_inline_content(node.children)}^")

    def visit_footnote_ref(self, node: FootnoteRef) -> None:
        self._output.append(f"[^{node.id}]")
