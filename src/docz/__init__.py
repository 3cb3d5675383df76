"""docz - build documentation from Markdown and HTML sources.

Source files are parsed into a format-independent tree, merged into a single
Document with one Chapter per file, and rendered to HTML, Markdown, EPUB, PDF,
a JSON serialization or a structural debug dump.

Key modules:
- ast: node model, traversal and serialization
- parsers: Markdown (mistune) and HTML (BeautifulSoup) parsers
- processors: chapter aggregation and document metadata
- renderers: one renderer per output format
- config / service: ``doc.toml`` projects and the build pipeline

Examples
--------
Convert a Markdown string to HTML:

    >>> from docz import markdown_to_ast
    >>> from docz.renderers import HtmlRenderer
    >>> from docz.options import HtmlRendererOptions
    >>> doc = markdown_to_ast("# Hello")
    >>> HtmlRenderer(HtmlRendererOptions(standalone=False)).render_as_text(doc)
    '<h1 id="hello">Hello</h1>\\n'

Build a project:

    >>> from docz import Config, Service
    >>> report = Service(Config.load("handbook")).build()  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "docz requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from docz.config import Config  # noqa: E402
from docz.exceptions import (  # noqa: E402
    BuildError,
    ConfigError,
    DependencyError,
    DoczError,
    FormatError,
    ParseError,
    ProcessError,
    RenderError,
    UnsupportedNodeError,
)
from docz.formats import Format, create_parser, create_renderer  # noqa: E402
from docz.parsers import html_to_ast, markdown_to_ast  # noqa: E402
from docz.service import BuildReport, Service  # noqa: E402

__all__ = [
    "__version__",
    "BuildError",
    "BuildReport",
    "Config",
    "ConfigError",
    "DependencyError",
    "DoczError",
    "Format",
    "FormatError",
    "ParseError",
    "ProcessError",
    "RenderError",
    "Service",
    "UnsupportedNodeError",
    "create_parser",
    "create_renderer",
    "html_to_ast",
    "markdown_to_ast",
]
