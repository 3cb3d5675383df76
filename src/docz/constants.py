#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the docz library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options
2. Frontmatter and Source Files - delimiters and recognized extensions
3. Project Configuration - doc.toml defaults
4. Format-Specific Constants - settings for each renderer
5. Dependencies - optional packages checked before use
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
BulletSymbol = Literal["-", "*", "+"]
PageSize = Literal["a4", "letter", "legal"]

# =============================================================================
# Frontmatter and Source Files
# =============================================================================

FRONTMATTER_DELIMITER = "---"

MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdx")
HTML_EXTENSIONS = (".html", ".htm")

# =============================================================================
# Project Configuration
# =============================================================================

CONFIG_FILENAME = "doc.toml"
DEFAULT_DOC_TITLE = "Doc title"
DEFAULT_DOC_DESCRIPTION = "Doc description"
DEFAULT_SRC_DIR = "src"
DEFAULT_ASSETS_DIR = "_assets"
DEFAULT_BUILD_DIR = "build"
DEFAULT_OUTPUTS = ("html",)
DEFAULT_INTRO_FILE = "00-intro.md"
DEFAULT_INTRO_CONTENT = """---
title: Introduction
---

# Introduction

Start writing here.
"""
OUTPUT_BASENAME = "doc"

# =============================================================================
# Format-Specific Constants
# =============================================================================

DEFAULT_CREATOR = "docz"
DEFAULT_LANGUAGE = "en"
DEFAULT_UNTITLED = "Untitled"

# HTML
DEFAULT_HTML_CSS = """
body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif;
       line-height: 1.6; max-width: 48rem; margin: 0 auto; padding: 2rem; color: #222; }
pre { background: #f6f8fa; padding: 1rem; overflow-x: auto; }
code { background: #f6f8fa; padding: 0.1rem 0.3rem; }
blockquote { border-left: 4px solid #ddd; margin-left: 0; padding-left: 1rem; color: #555; }
table { border-collapse: collapse; }
th, td { border: 1px solid #ddd; padding: 0.4rem 0.8rem; }
div[x-tag="chapter"] { margin-bottom: 3rem; }
""".strip()

# EPUB
EPUB_STYLESHEET_NAME = "style/docz.css"
DEFAULT_EPUB_CSS = """
body { font-family: serif; line-height: 1.5; }
h1, h2, h3 { font-family: sans-serif; }
pre { font-family: monospace; white-space: pre-wrap; }
blockquote { margin-left: 1.5em; font-style: italic; }
""".strip()

# PDF (points; 1 inch = 72 points)
DEFAULT_PDF_PAGE_SIZE: PageSize = "a4"
DEFAULT_PDF_MARGIN = 72.0
DEFAULT_PDF_FONT = "Helvetica"
DEFAULT_PDF_CODE_FONT = "Courier"
DEFAULT_PDF_FONT_SIZE = 11

# =============================================================================
# Dependencies (install_name, import_name, version_spec)
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_RENDER = [("jinja2", "jinja2", ">=3.1.0")]
DEPS_EPUB_RENDER = [("ebooklib", "ebooklib", ">=0.18")]
DEPS_PDF_RENDER = [("reportlab", "reportlab", ">=4.0.0")]
