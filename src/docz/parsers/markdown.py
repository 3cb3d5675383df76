#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/parsers/markdown.py
"""Markdown to AST converter.

This module parses Markdown with mistune and maps mistune's token stream onto
the docz node model. A leading ``---`` frontmatter block is split off first and
kept, unparsed, as a ``Metadata`` node so that later processors decide what to
do with it.

mistune does not report source positions, so only the Document (whole input)
and the Metadata node (the delimited block) carry spans.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Callable

from docz.ast import (
    BlockQuote,
    Bold,
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
from docz.constants import DEPS_MARKDOWN
from docz.frontmatter import split_frontmatter
from docz.options.markdown import MarkdownParserOptions
from docz.parsers.base import BaseParser, text_span
from docz.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    import mistune

logger = logging.getLogger(__name__)

TokenHandler = Callable[[dict[str, Any]], "Node | list[Node] | None"]

# Tokens mistune emits that carry no content
_SKIPPED_TOKENS = frozenset({"blank_line"})

# Footnote references and definitions; mistune only reports the upper-cased key
_FOOTNOTE_LABEL = re.compile(r"\[\^((?:[^\\\[\]\s]|\\.){1,500})\]")


class MarkdownParser(BaseParser):
    """Convert Markdown bytes to an AST Document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse(b"# Hello\\n")
        >>> doc.children[0]
        Heading(level=1, children=[Text(value='Hello', attrs={}, span=None)], attrs={}, span=None)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._footnote_labels: dict[str, str] = {}

        self._block_handlers: dict[str, TokenHandler] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "list_item": self._process_list_item,
            "task_list_item": self._process_list_item,
            "table": self._process_table,
            "thematic_break": lambda token: ThematicBreak(),
            "block_html": self._process_html_block,
            "footnotes": self._process_footnotes,
            "def_list": self._process_definition_list,
        }
        self._inline_handlers: dict[str, TokenHandler] = {
            "text": lambda token: Text(value=token.get("raw", "")),
            "strong": lambda token: Bold(children=self._process_inline_tokens(token.get("children", []))),
            "emphasis": lambda token: Italic(children=self._process_inline_tokens(token.get("children", []))),
            "strikethrough": lambda token: StrikeThrough(children=self._process_inline_tokens(token.get("children", []))),
            "superscript": lambda token: Superscript(children=self._process_inline_tokens(token.get("children", []))),
            "codespan": lambda token: InlineCode(value=token.get("raw", "")),
            "linebreak": lambda token: LineBreak(),
            "softbreak": lambda token: SoftBreak(),
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

    def _create_markdown(self) -> mistune.Markdown:
        """Create a mistune instance producing tokens instead of HTML."""
        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        if self.options.parse_definition_lists:
            plugins.append("def_list")
        if self.options.parse_superscript:
            plugins.append("superscript")
        return mistune.create_markdown(plugins=plugins, renderer=None)

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, data: bytes) -> Document:
        """Parse Markdown bytes into an AST Document.

        Parameters
        ----------
        data : bytes
            UTF-8 Markdown source

        Returns
        -------
        Document
            AST document. A frontmatter block, if any, is its first child.

        Raises
        ------
        ParseError
            If the input cannot be decoded
        FrontmatterError
            If a frontmatter block is not closed

        """
        text = self._decode(data)

        children: list[Node] = []
        body = text
        body_first_line = 1
        if self.options.extract_frontmatter:
            split = split_frontmatter(text)
            if split.frontmatter is not None:
                children.append(Metadata(value=split.frontmatter, span=Span(1, 1, split.line_count, 3)))
                body = split.body
                body_first_line = split.line_count + 1

        self._footnote_labels = _collect_footnote_labels(body)
        tokens, _state = self._create_markdown().parse(body)
        children.extend(self._process_tokens(tokens))

        logger.debug("Parsed %d top-level nodes (body starts at line %d)", len(children), body_first_line)
        return Document(children=children, span=text_span(text))

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            if token_type in _SKIPPED_TOKENS:
                continue
            handler = self._block_handlers.get(token_type) or self._inline_handlers.get(token_type)
            result = handler(token) if handler else self._process_unknown(token, inline=False)
            if result is None:
                continue
            if isinstance(result, list):
                nodes.extend(result)
            else:
                nodes.append(result)
        return nodes

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of inline tokens into AST nodes.

        Adjacent text tokens (mistune splits text around backslash escapes and
        entities) are merged into one Text node.

        """
        nodes: list[Node] = []
        for token in tokens:
            handler = self._inline_handlers.get(token.get("type", ""))
            result = handler(token) if handler else self._process_unknown(token, inline=True)
            if result is None:
                continue
            for node in result if isinstance(result, list) else [result]:
                if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                    nodes[-1].value += node.value
                else:
                    nodes.append(node)
        return nodes

    def _process_unknown(self, token: dict[str, Any], inline: bool) -> Other:
        """Keep a token the node model has no variant for as an Other node."""
        token_type = token.get("type", "unknown")
        logger.debug("Keeping unknown mistune token %r as Other", token_type)
        children_tokens = token.get("children", [])
        children = self._process_inline_tokens(children_tokens) if inline else self._process_tokens(children_tokens)
        attrs: dict[str, str | None] = {}
        if "raw" in token:
            attrs["raw"] = str(token["raw"])
        return Other(name=token_type, children=children, attrs=attrs)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token with 'attrs' (level) and inline 'children'."""
        level = token.get("attrs", {}).get("level", 1)
        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        """Process paragraph and block_text tokens (block_text is a tight list item's text)."""
        return Paragraph(children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process block_code token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs' (info)

        Returns
        -------
        CodeBlock
            Code block node; the info string is None for indented code

        """
        info = token.get("attrs", {}).get("info") or None
        return CodeBlock(value=token.get("raw", ""), info=info)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        return BlockQuote(children=self._process_tokens(token.get("children", [])))

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        mistune only records ``start`` for ordered lists that do not start at 1.

        """
        attrs = token.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start") if ordered else None
        return List(ordered=ordered, start=start, children=self._process_tokens(token.get("children", [])))

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list_item and task_list_item tokens."""
        attrs = token.get("attrs", {})
        checked = bool(attrs["checked"]) if "checked" in attrs else None
        return ListItem(checked=checked, children=self._process_tokens(token.get("children", [])))

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Header cells are direct children of ``table_head``; body rows are
        ``table_row`` tokens under ``table_body``.

        """
        rows: list[Node] = []
        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                rows.append(TableRow(is_header=True, children=self._process_table_cells(part.get("children", []))))
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    cells = self._process_table_cells(row_token.get("children", []))
                    rows.append(TableRow(is_header=False, children=cells))
        return Table(children=rows)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            align = cell_token.get("attrs", {}).get("align")
            cells.append(TableCell(align=align, children=self._process_inline_tokens(cell_token.get("children", []))))
        return cells

    def _process_html_block(self, token: dict[str, Any]) -> Html | Comment:
        """Process block_html token; a lone HTML comment becomes a Comment node."""
        content = token.get("raw", "")
        if _is_html_comment(content):
            return Comment(value=_extract_comment_text(content))
        return Html(value=content)

    def _process_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Process the footnotes container mistune appends after the document body."""
        definitions: list[Node] = []
        for item in token.get("children", []):
            attrs = item.get("attrs", {})
            identifier = self._footnote_id(attrs.get("key") or attrs.get("label") or attrs.get("index", ""))
            definitions.append(FootnoteDef(id=identifier, children=self._process_tokens(item.get("children", []))))
        return definitions

    def _process_definition_list(self, token: dict[str, Any]) -> DescrList:
        """Process def_list token.

        mistune emits a flat sequence of ``def_list_head`` (terms) and
        ``def_list_item`` (details) tokens; each term starts a new DescrItem.

        """
        items: list[Node] = []
        current: DescrItem | None = None
        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                if current is None or any(isinstance(c, DescrDetail) for c in current.children):
                    current = DescrItem()
                    items.append(current)
                current.children.append(DescrTerm(children=self._process_inline_tokens(child.get("children", []))))
            elif child_type in ("def_list_item", "def_list_content"):
                if current is None:
                    current = DescrItem()
                    items.append(current)
                current.children.append(DescrDetail(children=self._process_tokens(child.get("children", []))))
        return DescrList(children=items)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        return Link(
            url=attrs.get("url", ""),
            title=attrs.get("title") or None,
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Process image token; the alt text is the plain text of its children."""
        attrs = token.get("attrs", {})
        alt = "".join(_inline_plain_text(child) for child in token.get("children", []))
        return Image(url=attrs.get("url", ""), alt=alt, title=attrs.get("title") or None)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> Html | Comment:
        content = token.get("raw", "")
        if _is_html_comment(content):
            return Comment(value=_extract_comment_text(content))
        return Html(value=content)

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteRef:
        attrs = token.get("attrs", {})
        identifier = token.get("raw") or attrs.get("label") or attrs.get("key") or attrs.get("index", "")
        return FootnoteRef(id=self._footnote_id(identifier))

    def _footnote_id(self, key: Any) -> str:
        """Map mistune's normalized footnote key back to the label written in the source."""
        return self._footnote_labels.get(str(key), str(key))


def _collect_footnote_labels(text: str) -> dict[str, str]:
    """Map each normalized footnote key to the first label spelling found in ``text``."""
    labels: dict[str, str] = {}
    for match in _FOOTNOTE_LABEL.finditer(text):
        label = match.group(1)
        labels.setdefault(label.lower().upper(), label)
    return labels


def _inline_plain_text(token: dict[str, Any]) -> str:
    if "children" in token:
        return "".join(_inline_plain_text(child) for child in token["children"])
    return str(token.get("raw", ""))


def _is_html_comment(content: str) -> bool:
    stripped = content.strip()
    return stripped.startswith("<!--") and stripped.endswith("-->")


def _extract_comment_text(content: str) -> str:
    return content.strip()[4:-3].strip()


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    """Parse a Markdown string into an AST Document.

    Parameters
    ----------
    markdown_content : str
        Markdown source text
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document

    """
    return MarkdownParser(options).parse(markdown_content.encode("utf-8"))
