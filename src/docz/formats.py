#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/formats.py
"""Format identifiers and the parser/renderer tables.

Every file format docz reads or writes has a ``Format`` member. The tables
below map formats to the parser and renderer classes handling them; the build
service and the CLI resolve user-facing ids (``"md"``, ``"html"``, ...) and
file extensions through this module only.

Examples
--------
    >>> Format.parse("html")
    <Format.HTML: 'html'>
    >>> Format.from_path("src/01-setup.markdown")
    <Format.MD: 'md'>
    >>> create_renderer(Format.MD).file_extension
    'md'

"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Type

from docz.constants import HTML_EXTENSIONS, MARKDOWN_EXTENSIONS
from docz.exceptions import FormatError
from docz.parsers.base import BaseParser
from docz.parsers.html import HtmlParser
from docz.parsers.markdown import MarkdownParser
from docz.renderers.ast_json import JsonRenderer
from docz.renderers.base import BaseRenderer
from docz.renderers.debug import DebugRenderer
from docz.renderers.epub import EpubRenderer
from docz.renderers.html import HtmlRenderer
from docz.renderers.markdown import MarkdownRenderer
from docz.renderers.pdf import PdfRenderer


class Format(str, Enum):
    """File formats known to docz."""

    MD = "md"
    HTML = "html"
    PDF = "pdf"
    EPUB = "epub"
    DEBUG = "debug"
    JSON = "json"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, format_id: str) -> Format:
        """Resolve a format id, case-insensitively.

        Raises
        ------
        FormatError
            If the id names no known format

        """
        normalized = format_id.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        known = ", ".join(member.value for member in cls)
        raise FormatError(f"Unknown format '{format_id}' (expected one of: {known})", format_id=format_id)

    @classmethod
    def from_path(cls, path: str | Path) -> Format:
        """Resolve the source format of a file from its extension.

        Raises
        ------
        FormatError
            If the extension belongs to no readable format

        """
        suffix = Path(path).suffix.lower()
        if suffix in MARKDOWN_EXTENSIONS:
            return cls.MD
        if suffix in HTML_EXTENSIONS:
            return cls.HTML
        raise FormatError(f"No parser for files with extension '{suffix}': {path}", format_id=suffix or None)


PARSERS: Dict[Format, Type[BaseParser]] = {
    Format.MD: MarkdownParser,
    Format.HTML: HtmlParser,
}

RENDERERS: Dict[Format, Type[BaseRenderer]] = {
    Format.MD: MarkdownRenderer,
    Format.HTML: HtmlRenderer,
    Format.PDF: PdfRenderer,
    Format.EPUB: EpubRenderer,
    Format.DEBUG: DebugRenderer,
    Format.JSON: JsonRenderer,
}


def is_source_path(path: str | Path) -> bool:
    """Return True if a parser exists for the file's extension."""
    return Path(path).suffix.lower() in MARKDOWN_EXTENSIONS + HTML_EXTENSIONS


def create_parser(fmt: Format) -> BaseParser:
    """Instantiate the parser for a format with default options.

    Raises
    ------
    FormatError
        If the format cannot be parsed (for example PDF)

    """
    try:
        parser_class = PARSERS[fmt]
    except KeyError:
        raise FormatError(f"Format '{fmt}' cannot be used as a source", format_id=str(fmt)) from None
    return parser_class()


def create_renderer(fmt: Format) -> BaseRenderer:
    """Instantiate the renderer for a format with default options."""
    return RENDERERS[fmt]()
