#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/epub.py
"""EPUB rendering from AST.

This module provides the EpubRenderer class which converts a Document to an
EPUB3 package with ebooklib. Every Chapter of the document becomes one XHTML
item, rendered by HtmlRenderer in fragment mode; content outside any chapter
(or a document without chapters) becomes an item of its own. The package gets
the document title, authors and summary as metadata, an embedded stylesheet,
NCX and nav navigation documents and a spine in document order.

"""

from __future__ import annotations

import logging
import uuid
from io import BytesIO
from typing import Any, Optional

from docz.ast.nodes import Chapter, Document, Fragment, Heading, Node
from docz.ast.traversal import extract_nodes, node_text
from docz.constants import DEFAULT_UNTITLED, DEPS_EPUB_RENDER, EPUB_STYLESHEET_NAME
from docz.exceptions import RenderError, UnsupportedNodeError
from docz.options.epub import EpubRendererOptions
from docz.options.html import HtmlRendererOptions
from docz.renderers.base import BaseRenderer
from docz.renderers.html import HtmlRenderer
from docz.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class EpubRenderer(BaseRenderer):
    """Render a Document to EPUB.

    Parameters
    ----------
    options : EpubRendererOptions or None, default = None
        EPUB rendering options

    Examples
    --------
        >>> from docz.ast import Chapter, Document, Heading, Text
        >>> doc = Document(title="My Book", children=[
        ...     Chapter(title="One", children=[Heading(level=1, children=[Text(value="Hello")])])
        ... ])
        >>> data = EpubRenderer().render(doc)
        >>> data[:2]
        b'PK'

    """

    file_extension = "epub"

    def __init__(self, options: EpubRendererOptions | None = None):
        """Initialize the EPUB renderer with options."""
        BaseRenderer._validate_options_type(options, EpubRendererOptions, "epub")
        options = options or EpubRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: EpubRendererOptions = options

        # Chapter bodies are HTML fragments
        self.html_renderer = HtmlRenderer(HtmlRendererOptions(standalone=False, creator=None))

    def is_binary(self) -> bool:
        """EPUB packages are ZIP archives."""
        return True

    @requires_dependencies("epub", DEPS_EPUB_RENDER)
    def render(self, node: Node) -> bytes:
        """Render the tree to the bytes of an EPUB file.

        Raises
        ------
        UnsupportedNodeError
            If the tree contains an Other node
        RenderError
            If ebooklib fails to build the package

        """
        from ebooklib import epub

        doc = node if isinstance(node, Document) else Document(children=[node])

        book = epub.EpubBook()
        self._set_metadata(book, doc)

        stylesheet = None
        if self.options.css:
            stylesheet = epub.EpubItem(
                uid="style_docz",
                file_name=EPUB_STYLESHEET_NAME,
                media_type="text/css",
                content=self.options.css.encode("utf-8"),
            )
            book.add_item(stylesheet)

        epub_chapters = []
        for idx, (title, children) in enumerate(self._split_into_chapters(doc), start=1):
            chapter_title = title or self.options.chapter_title_template.format(num=idx)
            chapter_html = self._render_chapter_html(children)

            epub_chapter = epub.EpubHtml(title=chapter_title, file_name=f"chapter_{idx}.xhtml", lang=self.options.language)
            epub_chapter.content = chapter_html
            if stylesheet is not None:
                epub_chapter.add_item(stylesheet)
            book.add_item(epub_chapter)
            epub_chapters.append(epub_chapter)

        logger.debug("Assembled %d EPUB chapter(s)", len(epub_chapters))

        if self.options.generate_toc:
            book.toc = tuple(epub_chapters)
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())
        book.spine = ["nav", *epub_chapters]

        buffer = BytesIO()
        try:
            epub.write_epub(buffer, book, {})
        except Exception as e:
            raise RenderError(f"Failed to write EPUB file: {e!r}", rendering_stage="rendering", original_error=e) from e
        return buffer.getvalue()

    def _set_metadata(self, book: Any, doc: Document) -> None:
        """Set EPUB metadata from the Document fields and options."""
        book.set_title(doc.title or DEFAULT_UNTITLED)
        for author in doc.authors or []:
            book.add_author(author)
        if doc.summary:
            book.add_metadata("DC", "description", doc.summary)
        book.set_language(self.options.language)
        book.set_identifier(self.options.identifier or f"urn:uuid:{uuid.uuid4()}")
        if self.options.creator:
            book.add_metadata("DC", "contributor", self.options.creator)

    def _split_into_chapters(self, doc: Document) -> list[tuple[Optional[str], list[Node]]]:
        """Split the document into (title, content) pairs, one per EPUB item.

        Each Chapter child is one item, titled by the chapter title or else its
        first heading. Runs of top-level nodes outside chapters form items of
        their own.

        """
        chapters: list[tuple[Optional[str], list[Node]]] = []
        loose: list[Node] = []
        for child in doc.children:
            if isinstance(child, Chapter):
                if loose:
                    chapters.append((self._first_heading_text(loose), loose))
                    loose = []
                title = child.title or self._first_heading_text(child.children)
                chapters.append((title, list(child.children)))
            else:
                loose.append(child)
        if loose or not chapters:
            chapters.append((self._first_heading_text(loose), loose))
        return chapters

    @staticmethod
    def _first_heading_text(nodes: list[Node]) -> Optional[str]:
        for node in nodes:
            headings = extract_nodes(node, Heading)
            if headings:
                return node_text(headings[0]).strip() or None
        return None

    def _render_chapter_html(self, children: list[Node]) -> str:
        """Render chapter content to an HTML fragment."""
        try:
            chapter_html = self.html_renderer.render_as_text(Fragment(children=children))
        except UnsupportedNodeError as e:
            raise UnsupportedNodeError(e.node_type or "Node", self.name) from e
        # lxml, used by ebooklib, refuses an empty document
        return chapter_html if chapter_html.strip() else "<p></p>"
