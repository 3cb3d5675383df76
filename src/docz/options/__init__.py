#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/options/__init__.py
"""Frozen dataclass options for parsers and renderers."""

from docz.options.ast_json import JsonRendererOptions
from docz.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from docz.options.epub import EpubRendererOptions
from docz.options.html import HtmlParserOptions, HtmlRendererOptions
from docz.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from docz.options.pdf import PdfRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "EpubRendererOptions",
    "HtmlParserOptions",
    "HtmlRendererOptions",
    "JsonRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "PdfRendererOptions",
]
