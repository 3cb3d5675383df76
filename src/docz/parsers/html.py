#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/parsers/html.py
"""HTML to AST converter.

This module parses HTML with BeautifulSoup and builds a docz Document. The
``<head>`` feeds the document-level fields (``<title>``, ``description`` and
``author`` meta tags); the ``<body>`` maps onto the node model:

- ``section`` and ``article`` become Section nodes
- ``div`` with ``x-tag="chapter"`` becomes a Chapter (the markup HtmlRenderer
  emits for chapters), other ``div``, ``main`` and ``span`` elements are
  transparent
- HTML comments become Comment nodes
- elements the node model has no variant for become ``Other(name=<tag>)``

BeautifulSoup does not expose source positions through the stdlib parser, so
nodes produced here carry no span.

"""

from __future__ import annotations

import logging
import re
from typing import Any

from docz.ast import (
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
    Heading,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Other,
    Paragraph,
    Section,
    StrikeThrough,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from docz.constants import DEPS_HTML
from docz.exceptions import ParseError
from docz.options.html import HtmlParserOptions
from docz.parsers.base import BaseParser
from docz.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_FOOTNOTE_TARGET = re.compile(r"^#fn-(.+)$")

# Elements whose content is never part of the document body
_SKIPPED_ELEMENTS = frozenset({"script", "style", "template", "noscript", "head"})

# Containers whose children are spliced into the parent
_TRANSPARENT_BLOCKS = frozenset({"div", "main", "body", "html"})
_TRANSPARENT_INLINES = frozenset({"span"})


class HtmlParser(BaseParser):
    """Convert HTML bytes to an AST Document.

    Parameters
    ----------
    options : HtmlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> doc = HtmlParser().parse(b"<html><head><title>Book</title></head><body><p>Hi</p></body></html>")
        >>> doc.title
        'Book'

    """

    BLOCK_ELEMENTS = frozenset(
        {
            "p",
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            "blockquote",
            "ul",
            "ol",
            "li",
            "pre",
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "hr",
            "dl",
            "dt",
            "dd",
            "div",
            "section",
            "article",
            "main",
            "header",
            "footer",
            "nav",
            "aside",
            "figure",
            "details",
            "form",
            "body",
            "html",
        }
    )

    def __init__(self, options: HtmlParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, HtmlParserOptions, "html")
        options = options or HtmlParserOptions()
        super().__init__(options)
        self.options: HtmlParserOptions = options

        self._block_handlers: dict[str, Any] = {
            "p": self._process_paragraph,
            "h1": self._process_heading,
            "h2": self._process_heading,
            "h3": self._process_heading,
            "h4": self._process_heading,
            "h5": self._process_heading,
            "h6": self._process_heading,
            "blockquote": lambda node: BlockQuote(children=self._process_block_container(node)),
            "ul": self._process_list,
            "ol": self._process_list,
            "pre": self._process_code_block,
            "table": self._process_table,
            "hr": lambda node: ThematicBreak(),
            "dl": self._process_definition_list,
            "section": self._process_section,
            "article": self._process_section,
        }
        self._inline_handlers: dict[str, Any] = {
            "strong": lambda node: Bold(children=self._process_children_to_inline(node)),
            "b": lambda node: Bold(children=self._process_children_to_inline(node)),
            "em": lambda node: Italic(children=self._process_children_to_inline(node)),
            "i": lambda node: Italic(children=self._process_children_to_inline(node)),
            "s": lambda node: StrikeThrough(children=self._process_children_to_inline(node)),
            "del": lambda node: StrikeThrough(children=self._process_children_to_inline(node)),
            "strike": lambda node: StrikeThrough(children=self._process_children_to_inline(node)),
            "sup": self._process_superscript,
            "code": lambda node: InlineCode(value=node.get_text()),
            "a": self._process_link,
            "img": self._process_image,
            "br": lambda node: LineBreak(),
        }

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, data: bytes) -> Document:
        """Parse HTML bytes into an AST Document.

        Parameters
        ----------
        data : bytes
            HTML source in the configured encoding

        Returns
        -------
        Document
            AST document with title, summary and authors taken from the head

        Raises
        ------
        ParseError
            If the input cannot be decoded or the tree builder is unavailable

        """
        from bs4 import BeautifulSoup, FeatureNotFound

        html_content = self._decode(data)
        try:
            soup = BeautifulSoup(html_content, self.options.parser)
        except FeatureNotFound as e:
            raise ParseError(f"BeautifulSoup tree builder not available: {self.options.parser}", original_error=e) from e

        document = Document()
        self._extract_metadata(soup, document)

        body = soup.body if soup.body is not None else soup
        document.children = self._process_block_container(body)
        logger.debug("Parsed HTML into %d top-level nodes", len(document.children))
        return document

    @staticmethod
    def _extract_metadata(soup: Any, document: Document) -> None:
        """Fill the Document fields from ``<title>`` and ``<meta>`` tags."""
        if soup.title is not None and soup.title.string:
            document.title = soup.title.string.strip() or None

        authors: list[str] = []
        for meta in soup.find_all("meta"):
            name = str(meta.get("name", "")).lower()
            content = meta.get("content")
            if not content:
                continue
            if name == "description":
                document.summary = str(content).strip()
            elif name == "author":
                authors.extend(part.strip() for part in str(content).split(",") if part.strip())
        if authors:
            document.authors = authors

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _is_block_element(self, node: Any) -> bool:
        name = getattr(node, "name", None)
        if not isinstance(name, str):
            return False
        return name in self.BLOCK_ELEMENTS

    def _process_node_to_ast(self, node: Any) -> Node | list[Node] | None:
        """Process a BeautifulSoup node to AST nodes.

        Parameters
        ----------
        node : Any
            BeautifulSoup node to process

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s)

        """
        from bs4.element import Comment as HtmlComment
        from bs4.element import NavigableString, PreformattedString

        if isinstance(node, HtmlComment):
            if not self.options.keep_comments:
                return None
            return Comment(value=str(node).strip())

        # Doctype, CDATA and processing instructions
        if isinstance(node, PreformattedString):
            return None

        if isinstance(node, NavigableString):
            text = _WHITESPACE.sub(" ", str(node))
            if text.strip():
                return Text(value=text)
            return None

        name = getattr(node, "name", None)
        if not isinstance(name, str) or name in _SKIPPED_ELEMENTS:
            return None

        if name == "div" and node.get("x-tag") == "chapter":
            return self._process_chapter(node)
        if name == "div" and "footnote" in (node.get("class") or []) and node.get("id", "").startswith("fn-"):
            return FootnoteDef(id=node["id"][3:], children=self._process_block_container(node))

        handler = self._block_handlers.get(name) or self._inline_handlers.get(name)
        if handler is not None:
            return handler(node)

        if name in _TRANSPARENT_BLOCKS:
            return self._process_block_container(node)
        if name in _TRANSPARENT_INLINES:
            return self._process_children_to_inline(node)

        logger.debug("Keeping unknown element <%s> as Other", name)
        if self._has_block_children(node) or self._is_block_element(node):
            children = self._process_block_container(node)
        else:
            children = self._process_children_to_inline(node)
        return Other(name=name, children=children, attrs=_element_attrs(node))

    def _has_block_children(self, node: Any) -> bool:
        return any(self._is_block_element(child) for child in getattr(node, "children", []))

    def _process_block_container(self, node: Any) -> list[Node]:
        """Process the children of a block container.

        Runs of inline content between block elements are wrapped in a
        Paragraph; whitespace-only text between blocks is dropped.

        """
        children: list[Node] = []
        inline_buffer: list[Node] = []

        def flush() -> None:
            nonlocal inline_buffer
            trimmed = _trim_inline(inline_buffer)
            if trimmed:
                children.append(Paragraph(children=trimmed))
            inline_buffer = []

        for child in node.children:
            result = self._process_node_to_ast(child)
            if result is None:
                continue
            results = result if isinstance(result, list) else [result]
            if self._is_block_element(child) or not all(_is_inline_node(n) for n in results):
                flush()
                children.extend(results)
            else:
                inline_buffer.extend(results)

        flush()
        return children

    def _process_children_to_inline(self, node: Any) -> list[Node]:
        """Process node children to inline nodes.

        Block elements in an inline context (``<td><p>..</p></td>``,
        ``<a><div>..</div></a>``) are reduced to their inline content, with a
        space between consecutive blocks.

        """
        result: list[Node] = []
        after_block = False
        for child in node.children:
            ast_nodes = self._process_node_to_ast(child)
            if ast_nodes is None:
                continue
            nodes = ast_nodes if isinstance(ast_nodes, list) else [ast_nodes]
            is_block = self._is_block_element(child)
            if is_block:
                nodes = _flatten_to_inline(nodes)
                if not nodes:
                    continue
            if result and (is_block or after_block):
                result.append(Text(value=" "))
            result.extend(nodes)
            after_block = is_block
        return result

    # ------------------------------------------------------------------
    # Block elements
    # ------------------------------------------------------------------

    def _process_paragraph(self, node: Any) -> Paragraph:
        return Paragraph(children=_trim_inline(self._process_children_to_inline(node)))

    def _process_heading(self, node: Any) -> Heading:
        """Process ``<h1>``..``<h6>``; an ``id`` attribute is kept in attrs."""
        level = int(node.name[1])
        attrs = {"id": str(node["id"])} if node.get("id") else {}
        return Heading(level=level, children=_trim_inline(self._process_children_to_inline(node)), attrs=attrs)

    def _process_section(self, node: Any) -> Section:
        attrs = {"id": str(node["id"])} if node.get("id") else {}
        return Section(children=self._process_block_container(node), attrs=attrs)

    def _process_chapter(self, node: Any) -> Chapter:
        """Process ``<div x-tag="chapter">``; the title comes from ``data-title``."""
        title = node.get("data-title") or None
        return Chapter(title=title, children=self._process_block_container(node))

    def _process_list(self, node: Any) -> List:
        """Process ``<ul>`` and ``<ol>``; only ``<li>`` children are kept."""
        ordered = node.name == "ol"
        start = None
        if ordered and node.get("start"):
            try:
                start = int(node["start"])
            except ValueError:
                logger.debug("Ignoring non-numeric list start %r", node["start"])
        items: list[Node] = [
            self._process_list_item(child) for child in node.children if getattr(child, "name", None) == "li"
        ]
        return List(ordered=ordered, start=start, children=items)

    def _process_list_item(self, node: Any) -> ListItem:
        """Process ``<li>``; a checkbox input of this item (not of a nested one) marks a task item."""
        checked = None
        for checkbox in node.find_all("input", attrs={"type": "checkbox"}):
            if checkbox.find_parent("li") is node:
                checked = checkbox.has_attr("checked")
                checkbox.decompose()
                break
        return ListItem(checked=checked, children=self._process_block_container(node))

    def _process_code_block(self, node: Any) -> CodeBlock:
        """Process ``<pre>``; the language comes from a ``language-*`` class on the inner ``<code>``."""
        code = node.find("code")
        source = code if code is not None else node
        info = None
        for css_class in source.get("class") or []:
            if css_class.startswith("language-"):
                info = css_class[len("language-") :] or None
                break
        return CodeBlock(value=source.get_text(), info=info)

    def _process_table(self, node: Any) -> Table:
        """Process ``<table>``; rows made only of ``<th>`` cells (or inside ``<thead>``) are header rows."""
        rows: list[Node] = []
        for row in node.find_all("tr"):
            if row.find_parent("table") is not node:
                continue
            cells = row.find_all(["th", "td"], recursive=False)
            in_head = row.parent is not None and row.parent.name == "thead"
            is_header = in_head or (bool(cells) and all(cell.name == "th" for cell in cells))
            rows.append(TableRow(is_header=is_header, children=[self._process_table_cell(cell) for cell in cells]))
        return Table(children=rows)

    def _process_table_cell(self, cell: Any) -> TableCell:
        align = cell.get("align")
        style = cell.get("style") or ""
        match = re.search(r"text-align\s*:\s*(left|center|right)", style)
        if match:
            align = match.group(1)
        return TableCell(align=align or None, children=_trim_inline(self._process_children_to_inline(cell)))

    def _process_definition_list(self, node: Any) -> DescrList:
        """Process ``<dl>``; each ``<dt>`` starts a new item and ``<dd>`` elements attach to it."""
        items: list[Node] = []
        current: DescrItem | None = None
        for child in node.children:
            name = getattr(child, "name", None)
            if name == "dt":
                if current is None or any(isinstance(c, DescrDetail) for c in current.children):
                    current = DescrItem()
                    items.append(current)
                current.children.append(DescrTerm(children=_trim_inline(self._process_children_to_inline(child))))
            elif name == "dd":
                if current is None:
                    current = DescrItem()
                    items.append(current)
                current.children.append(DescrDetail(children=self._process_block_container(child)))
        return DescrList(children=items)

    # ------------------------------------------------------------------
    # Inline elements
    # ------------------------------------------------------------------

    def _process_superscript(self, node: Any) -> Superscript | FootnoteRef:
        """Process ``<sup>``; a footnote reference link becomes a FootnoteRef."""
        link = node.find("a", href=_FOOTNOTE_TARGET)
        if link is not None and "footnote-ref" in (node.get("class") or []):
            match = _FOOTNOTE_TARGET.match(link["href"])
            if match:
                return FootnoteRef(id=match.group(1))
        return Superscript(children=self._process_children_to_inline(node))

    def _process_link(self, node: Any) -> Link:
        return Link(
            url=str(node.get("href", "")),
            title=node.get("title") or None,
            children=self._process_children_to_inline(node),
        )

    def _process_image(self, node: Any) -> Image:
        return Image(url=str(node.get("src", "")), alt=str(node.get("alt", "")), title=node.get("title") or None)


def _is_inline_node(node: Node) -> bool:
    return isinstance(
        node,
        (Text, InlineCode, Link, Image, LineBreak, Bold, Italic, StrikeThrough, Superscript, FootnoteRef),
    )


def _flatten_to_inline(nodes: list[Node]) -> list[Node]:
    """Replace block nodes by their inline content, separating blocks with a space."""
    result: list[Node] = []
    for node in nodes:
        if _is_inline_node(node) or isinstance(node, (Comment, Other)):
            result.append(node)
            continue
        if isinstance(node, CodeBlock):
            inline: list[Node] = [InlineCode(value=node.value.strip())] if node.value.strip() else []
        else:
            inline = _trim_inline(_flatten_to_inline(node.get_children() or []))
        if inline:
            if result:
                result.append(Text(value=" "))
            result.extend(inline)
    return result


def _trim_inline(nodes: list[Node]) -> list[Node]:
    """Strip leading whitespace of the first and trailing whitespace of the last Text node."""
    if nodes and isinstance(nodes[0], Text):
        nodes[0].value = nodes[0].value.lstrip()
        if not nodes[0].value:
            nodes = nodes[1:]
    if nodes and isinstance(nodes[-1], Text):
        nodes[-1].value = nodes[-1].value.rstrip()
        if not nodes[-1].value:
            nodes = nodes[:-1]
    return nodes


def _element_attrs(node: Any) -> dict[str, str | None]:
    attrs: dict[str, str | None] = {}
    for key, value in node.attrs.items():
        attrs[str(key)] = " ".join(value) if isinstance(value, list) else (None if value is None else str(value))
    return attrs


def html_to_ast(html_content: str, options: HtmlParserOptions | None = None) -> Document:
    """Parse an HTML string into an AST Document."""
    return HtmlParser(options).parse(html_content.encode((options or HtmlParserOptions()).encoding))
