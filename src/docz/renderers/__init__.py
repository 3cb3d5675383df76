#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/__init__.py
"""AST renderers for converting trees to output formats.

Available renderers:
- MarkdownRenderer: Render to Markdown text
- HtmlRenderer: Render to HTML (standalone pages require jinja2)
- EpubRenderer: Render to EPUB (requires ebooklib)
- PdfRenderer: Render to PDF (requires reportlab)
- DebugRenderer: Indented structural dump of the tree
- JsonRenderer: Versioned JSON serialization of the tree

Renderers with optional dependencies import them when ``render`` is called,
so every class can be imported without its output library installed.

Examples
--------
    >>> from docz.ast import Document, Heading, Text
    >>> from docz.renderers import MarkdownRenderer
    >>> doc = Document(children=[Heading(level=1, children=[Text(value="Title")])])
    >>> MarkdownRenderer().render(doc)
    b'# Title\\n'

"""

from docz.renderers.ast_json import JsonRenderer
from docz.renderers.base import BaseRenderer, InlineContentMixin
from docz.renderers.debug import DebugRenderer, dump_tree
from docz.renderers.epub import EpubRenderer
from docz.renderers.html import HtmlRenderer
from docz.renderers.markdown import MarkdownRenderer
from docz.renderers.pdf import PdfRenderer

__all__ = [
    "BaseRenderer",
    "DebugRenderer",
    "EpubRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "JsonRenderer",
    "MarkdownRenderer",
    "PdfRenderer",
    "dump_tree",
]
