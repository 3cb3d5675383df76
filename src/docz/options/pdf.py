#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for PDF rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docz.constants import (
    DEFAULT_PDF_CODE_FONT,
    DEFAULT_PDF_FONT,
    DEFAULT_PDF_FONT_SIZE,
    DEFAULT_PDF_MARGIN,
    DEFAULT_PDF_PAGE_SIZE,
    PageSize,
)
from docz.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PdfRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to PDF with ReportLab.

    Parameters
    ----------
    page_size : {"a4", "letter", "legal"}, default "a4"
        Page size.
    margin : float, default 72.0
        Page margin in points, all four sides.
    font_name : str, default "Helvetica"
        Base font for text.
    code_font : str, default "Courier"
        Font for code.
    font_size : int, default 11
        Base font size in points.
    title_page : bool, default True
        Start with a page holding the document title, authors and summary.
    chapter_page_breaks : bool, default True
        Start every chapter on a new page.

    """

    page_size: PageSize = field(default=DEFAULT_PDF_PAGE_SIZE, metadata={"help": "Page size", "importance": "core"})
    margin: float = field(default=DEFAULT_PDF_MARGIN, metadata={"help": "Page margin in points", "importance": "core"})
    font_name: str = field(default=DEFAULT_PDF_FONT, metadata={"help": "Base font", "importance": "advanced"})
    code_font: str = field(default=DEFAULT_PDF_CODE_FONT, metadata={"help": "Code font", "importance": "advanced"})
    font_size: int = field(default=DEFAULT_PDF_FONT_SIZE, metadata={"help": "Base font size", "importance": "advanced"})
    title_page: bool = field(default=True, metadata={"help": "Add a title page", "importance": "core"})
    chapter_page_breaks: bool = field(
        default=True, metadata={"help": "Start chapters on a new page", "importance": "core"}
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If the margin is negative, the font size is not positive or the page size is unknown.

        """
        if self.page_size not in ("a4", "letter", "legal"):
            raise ValueError(f"Unknown page size: {self.page_size!r}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative, got {self.margin}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
