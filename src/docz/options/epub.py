#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for EPUB rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docz.constants import DEFAULT_EPUB_CSS, DEFAULT_LANGUAGE
from docz.options.base import BaseRendererOptions


@dataclass(frozen=True)
class EpubRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to EPUB.

    Parameters
    ----------
    language : str, default "en"
        Book language code (ISO 639-1).
    identifier : str or None, default None
        Unique identifier (ISBN, URN...). A ``urn:uuid:`` is generated if None.
    chapter_title_template : str, default "Chapter {num}"
        Title for chapters that have neither a title nor a heading.
    generate_toc : bool, default True
        Build the table of contents (NCX and nav documents).
    css : str or None, default built-in stylesheet
        Stylesheet linked from every chapter; None for no stylesheet.

    """

    language: str = field(default=DEFAULT_LANGUAGE, metadata={"help": "Book language code", "importance": "core"})
    identifier: str | None = field(
        default=None, metadata={"help": "Unique book identifier (generated if unset)", "importance": "core"}
    )
    chapter_title_template: str = field(
        default="Chapter {num}", metadata={"help": "Fallback chapter title", "importance": "advanced"}
    )
    generate_toc: bool = field(default=True, metadata={"help": "Generate the table of contents", "importance": "core"})
    css: str | None = field(
        default=DEFAULT_EPUB_CSS, metadata={"help": "Stylesheet (None to disable)", "importance": "advanced"}
    )
