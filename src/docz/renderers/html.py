#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts AST nodes to
HTML5. In standalone mode the body is wrapped in a complete document built
from a Jinja2 template (title, generator, author and description meta tags,
embedded stylesheet); otherwise only the body markup is produced.

Structural variants map to markup HtmlParser reads back: a Chapter becomes
``<div x-tag="chapter">`` and a Section becomes ``<section>``.

"""

from __future__ import annotations

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
from docz.ast.traversal import node_text
from docz.ast.visitors import NodeVisitor
from docz.constants import DEFAULT_UNTITLED, DEPS_HTML_RENDER
from docz.options.html import HtmlRendererOptions
from docz.renderers.base import BaseRenderer, InlineContentMixin
from docz.utils.decorators import requires_dependencies
from docz.utils.text import escape_html, slugify

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ language }}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{% if generator %}<meta name="generator" content="{{ generator }}">
{% endif %}{% if authors %}<meta name="author" content="{{ authors | join(', ') }}">
{% endif %}{% if description %}<meta name="description" content="{{ description }}">
{% endif %}<title>{{ title }}</title>
{% if css %}<style>
{{ css }}
</style>
{% endif %}</head>
<body>
{{ body }}</body>
</html>
"""


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from docz.ast import Document, Paragraph, Text
        >>> from docz.options import HtmlRendererOptions
        >>> renderer = HtmlRenderer(HtmlRendererOptions(standalone=False))
        >>> renderer.render_as_text(Document(children=[Paragraph(children=[Text(value="Hi")])]))
        '<p>Hi</p>\\n'

    """

    file_extension = "html"

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._seen_ids: set[str] = set()

    def render(self, node: Node) -> bytes:
        """Render a tree to UTF-8 HTML.

        Raises
        ------
        UnsupportedNodeError
            If the tree contains an Other node

        """
        self._output = []
        self._seen_ids = set()
        node.accept(self)
        body = "".join(self._output)
        self._output = []

        if self.options.standalone:
            document = node if isinstance(node, Document) else Document()
            return self._wrap_in_document(document, body).encode("utf-8")
        return body.encode("utf-8")

    @requires_dependencies("html", DEPS_HTML_RENDER)
    def _wrap_in_document(self, doc: Document, body: str) -> str:
        """Wrap rendered body markup in the standalone document template."""
        from jinja2 import Environment
        from markupsafe import Markup

        env = Environment(autoescape=True, keep_trailing_newline=True)
        template = env.from_string(DOCUMENT_TEMPLATE)
        return template.render(
            language=self.options.language,
            generator=self.options.creator,
            authors=doc.authors or [],
            description=doc.summary,
            title=doc.title or DEFAULT_UNTITLED,
            css=Markup(self.options.css) if self.options.css else None,
            body=Markup(body),
        )

    def _render_children(self, node: Node) -> str:
        return self._render_inline_content(node.get_children() or [])

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        self.visit_children(node)

    def visit_fragment(self, node: Fragment) -> None:
        self.visit_children(node)

    def visit_chapter(self, node: Chapter) -> None:
        """Render a Chapter as ``<div x-tag="chapter">``; the title goes in ``data-title``."""
        title = f' data-title="{escape_html(node.title)}"' if node.title else ""
        self._output.append(f'<div x-tag="chapter"{self._id_attr(node)}{title}>\n')
        self.visit_children(node)
        self._output.append("</div>\n")

    def visit_section(self, node: Section) -> None:
        self._output.append(f"<section{self._id_attr(node)}>\n")
        self.visit_children(node)
        self._output.append("</section>\n")

    @staticmethod
    def _id_attr(node: Node) -> str:
        node_id = node.attrs.get("id")
        return f' id="{escape_html(node_id)}"' if node_id else ""

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading, with an id from its ``id`` attribute or a slug of its text."""
        content = self._render_children(node)
        id_attr = ""
        if self.options.heading_ids:
            explicit = node.attrs.get("id")
            if explicit:
                self._seen_ids.add(explicit)
                heading_id = explicit
            else:
                heading_id = slugify(node_text(node), seen_slugs=self._seen_ids)
            id_attr = f' id="{escape_html(heading_id)}"'
        self._output.append(f"<h{node.level}{id_attr}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append(f"<p>{self._render_children(node)}</p>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._output.append("<blockquote>\n")
        self.visit_children(node)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start not in (None, 1) else ""
        self._output.append(f"<{tag}{start_attr}>\n")
        self.visit_children(node)
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem; task items start with a disabled checkbox.

        A single paragraph is rendered without its ``<p>`` wrapper, as for a
        tight list.

        """
        self._output.append("<li>")
        if node.checked is not None:
            checked = " checked" if node.checked else ""
            self._output.append(f'<input type="checkbox" disabled{checked}> ')
        if len(node.children) == 1 and isinstance(node.children[0], Paragraph):
            self._output.append(self._render_children(node.children[0]))
        else:
            self.visit_children(node)
        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table; leading header rows go in ``<thead>``, the rest in ``<tbody>``."""
        rows = self._table_rows(node)
        head_count = 0
        while head_count < len(rows) and rows[head_count].is_header:
            head_count += 1

        self._output.append("<table>\n")
        if head_count:
            self._output.append("<thead>\n")
            for row in rows[:head_count]:
                row.accept(self)
            self._output.append("</thead>\n")
        if head_count < len(rows):
            self._output.append("<tbody>\n")
            for row in rows[head_count:]:
                row.accept(self)
            self._output.append("</tbody>\n")
        self._output.append("</table>\n")

    def visit_table_row(self, node: TableRow) -> None:
        tag = "th" if node.is_header else "td"
        self._output.append("<tr>")
        for cell in node.children:
            align = cell.align if isinstance(cell, TableCell) else None
            style = f' style="text-align: {align}"' if align else ""
            self._output.append(f"<{tag}{style}>{self._render_children(cell)}</{tag}>")
        self._output.append("</tr>\n")

    def visit_table_cell(self, node: TableCell) -> None:
        style = f' style="text-align: {node.align}"' if node.align else ""
        self._output.append(f"<td{style}>{self._render_children(node)}</td>")

    def visit_code_block(self, node: CodeBlock) -> None:
        language = node.info.split()[0] if node.info and node.info.split() else None
        class_attr = f' class="language-{escape_html(language)}"' if language else ""
        self._output.append(f"<pre><code{class_attr}>{escape_html(node.value, quote=False)}</code></pre>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._output.append("<hr>\n")

    def visit_html(self, node: Html) -> None:
        self._output.append(node.value)

    def visit_comment(self, node: Comment) -> None:
        """Comments render to nothing."""

    def visit_metadata(self, node: Metadata) -> None:
        """Frontmatter is not content; it renders to nothing."""

    def visit_footnote_def(self, node: FootnoteDef) -> None:
        self._output.append(f'<div class="footnote" id="fn-{escape_html(node.id)}">\n')
        self.visit_children(node)
        self._output.append("</div>\n")

    def visit_descr_list(self, node: DescrList) -> None:
        self._output.append("<dl>\n")
        self.visit_children(node)
        self._output.append("</dl>\n")

    def visit_descr_item(self, node: DescrItem) -> None:
        self.visit_children(node)

    def visit_descr_term(self, node: DescrTerm) -> None:
        self._output.append(f"<dt>{self._render_children(node)}</dt>\n")

    def visit_descr_detail(self, node: DescrDetail) -> None:
        if len(node.children) == 1 and isinstance(node.children[0], Paragraph):
            self._output.append(f"<dd>{self._render_children(node.children[0])}</dd>\n")
            return
        self._output.append("<dd>\n")
        self.visit_children(node)
        self._output.append("</dd>\n")

    def visit_other(self, node: Other) -> None:
        self._unsupported(node)

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self._output.append(escape_html(node.value, quote=False))

    def visit_inline_code(self, node: InlineCode) -> None:
        self._output.append(f"<code>{escape_html(node.value, quote=False)}</code>")

    def visit_link(self, node: Link) -> None:
        title = f' title="{escape_html(node.title)}"' if node.title else ""
        self._output.append(f'<a href="{escape_html(node.url)}"{title}>{self._render_children(node)}</a>')

    def visit_image(self, node: Image) -> None:
        title = f' title="{escape_html(node.title)}"' if node.title else ""
        self._output.append(f'<img src="{escape_html(node.url)}" alt="{escape_html(node.alt)}"{title}>')

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("<br>\n")

    def visit_soft_break(self, node: SoftBreak) -> None:
        self._output.append("\n")

    def visit_bold(self, node: Bold) -> None:
        self._output.append(f"<strong>{self._render_children(node)}</strong>")

    def visit_italic(self, node: Italic) -> None:
        self._output.append(f"<em>{self._render_children(node)}</em>")

    def visit_strike_through(self, node: StrikeThrough) -> None:
        self._output.append(f"<del>{self._render_children(node)}</del>")

    def visit_superscript(self, node: Superscript) -> None:
        self._output.append(f"<sup>{self._render_children(node)}</sup>")

    def visit_footnote_ref(self, node: FootnoteRef) -> None:
        identifier = escape_html(node.id)
        self._output.append(
            f'<sup class="footnote-ref" id="fnref-{identifier}"><a href="#fn-{identifier}">{identifier}</a></sup>'
        )
