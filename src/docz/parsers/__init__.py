#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/parsers/__init__.py
"""Parsers package.

Each parser turns the bytes of one source file into a Node tree. The format
table in ``docz.formats`` maps file formats onto these classes.
"""

from docz.parsers.base import BaseParser, text_span
from docz.parsers.html import HtmlParser, html_to_ast
from docz.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = [
    "BaseParser",
    "HtmlParser",
    "MarkdownParser",
    "html_to_ast",
    "markdown_to_ast",
    "text_span",
]
