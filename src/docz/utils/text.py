#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/utils/text.py
"""Text helpers shared by renderers.

Examples
--------
    >>> from docz.utils.text import slugify
    >>> slugify("My Heading Title")
    'my-heading-title'
    >>> seen = set()
    >>> slugify("Intro", seen_slugs=seen), slugify("Intro", seen_slugs=seen)
    ('intro', 'intro-2')

"""

from __future__ import annotations

import re
import unicodedata
from html import escape
from typing import Set


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100) -> str:
    """Create a URL-safe slug from text with collision avoidance.

    Parameters
    ----------
    text : str
        Text to slugify (e.g., heading text)
    seen_slugs : Set[str] or None, default = None
        Previously generated slugs. When given, duplicates get a ``-2``,
        ``-3``... suffix and the result is added to the set.
    max_length : int, default = 100
        Maximum length of the slug before any collision suffix

    Returns
    -------
    str
        URL-safe slug, ``"section"`` when nothing usable is left

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = re.sub(r"[\s_]+", "-", normalized.lower())
    slug = re.sub(r"[^a-z0-9\-]", "", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")

    if not slug:
        slug = "section"
    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    if seen_slugs is None:
        return slug
    if slug not in seen_slugs:
        seen_slugs.add(slug)
        return slug

    counter = 2
    while f"{slug}-{counter}" in seen_slugs:
        counter += 1
    unique_slug = f"{slug}-{counter}"
    seen_slugs.add(unique_slug)
    return unique_slug


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape HTML special characters."""
    return escape(text, quote=quote)


def escape_xml_text(text: str) -> str:
    """Escape text for ReportLab paragraph markup (``&``, ``<`` and ``>`` only)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def offset_to_line_col(text: str, offset: int) -> tuple[int, int]:
    """Convert a 0-based character offset into a 1-based (line, column) pair."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    return line, offset - last_newline


__all__ = [
    "slugify",
    "escape_html",
    "escape_xml_text",
    "offset_to_line_col",
]
