#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docz.constants import DEFAULT_HTML_CSS, DEFAULT_LANGUAGE
from docz.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class HtmlParserOptions(BaseParserOptions):
    """Configuration options for parsing HTML into the AST.

    Parameters
    ----------
    keep_comments : bool, default True
        Keep HTML comments as Comment nodes.
    parser : str, default "html.parser"
        BeautifulSoup tree builder.

    """

    keep_comments: bool = field(default=True, metadata={"help": "Keep HTML comments", "importance": "advanced"})
    parser: str = field(
        default="html.parser", metadata={"help": "BeautifulSoup tree builder", "importance": "advanced"}
    )


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to HTML.

    Parameters
    ----------
    standalone : bool, default True
        Wrap the output in a complete HTML document (doctype, head, body).
    css : str or None, default built-in stylesheet
        Stylesheet embedded in the document head; None for no stylesheet.
    language : str, default "en"
        Value of the ``lang`` attribute of the html element.
    heading_ids : bool, default True
        Give headings an ``id`` (the node's ``id`` attribute or a slug of its text).

    """

    standalone: bool = field(default=True, metadata={"help": "Emit a complete HTML document", "importance": "core"})
    css: str | None = field(
        default=DEFAULT_HTML_CSS, metadata={"help": "Embedded stylesheet (None to disable)", "importance": "advanced"}
    )
    language: str = field(default=DEFAULT_LANGUAGE, metadata={"help": "Document language", "importance": "core"})
    heading_ids: bool = field(default=True, metadata={"help": "Add ids to headings", "importance": "advanced"})
