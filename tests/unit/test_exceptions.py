#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy."""

import pytest

from docz.exceptions import (
    BuildError,
    ConfigError,
    DependencyError,
    DoczError,
    FormatError,
    FrontmatterError,
    InvalidOptionsError,
    ParseError,
    ProcessError,
    RenderError,
    UnsupportedNodeError,
    ValidationError,
)
from docz.options import HtmlParserOptions, MarkdownParserOptions


@pytest.mark.unit
class TestHierarchy:
    """Every docz error derives from DoczError."""

    @pytest.mark.parametrize(
        "error",
        [
            ParseError("x"),
            FrontmatterError("x"),
            ProcessError("x"),
            RenderError("x"),
            UnsupportedNodeError("Other", "HtmlRenderer"),
            ConfigError("x"),
            FormatError("x"),
            BuildError("x"),
            DependencyError("pdf", [("reportlab", ">=4.0.0")]),
            InvalidOptionsError("md", MarkdownParserOptions, HtmlParserOptions),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, DoczError)

    def test_specializations(self):
        assert issubclass(FrontmatterError, ParseError)
        assert issubclass(UnsupportedNodeError, RenderError)
        assert issubclass(InvalidOptionsError, ValidationError)


@pytest.mark.unit
class TestMessages:
    """Tests for the context carried in messages and attributes."""

    def test_parse_error_position(self):
        error = ParseError("Bad byte", line=3, column=7, source="a.md")
        assert str(error) == "a.md: Bad byte (line 3, column 7)"
        assert (error.line, error.column, error.source) == (3, 7, "a.md")

    def test_parse_error_without_position(self):
        assert str(ParseError("Bad")) == "Bad"

    def test_process_error(self):
        error = ProcessError("boom", processor="ChapterAggregationProcessor")
        assert str(error) == "ChapterAggregationProcessor: boom"

    def test_unsupported_node(self):
        error = UnsupportedNodeError("Other", "PdfRenderer")
        assert str(error) == "Other nodes are not supported by PdfRenderer"
        assert error.node_type == "Other"
        assert error.renderer == "PdfRenderer"

    def test_config_error_path(self):
        assert str(ConfigError("Config file not found", path="/p/doc.toml")) == "Config file not found: /p/doc.toml"

    def test_build_error_context(self):
        error = BuildError("failed", file="src/a.md", stage="parse")
        assert str(error) == "[stage=parse file=src/a.md] failed"
        rendered = BuildError("failed", stage="render", format_id="pdf")
        assert str(rendered) == "[stage=render format=pdf] failed"

    def test_original_error_kept(self):
        cause = KeyError("k")
        assert BuildError("x", original_error=cause).original_error is cause

    def test_dependency_error_install_hint(self):
        error = DependencyError("pdf", [("reportlab", ">=4.0.0")])
        assert "PDF format requires the following packages: 'reportlab>=4.0.0'" in str(error)
        assert 'pip install --upgrade "reportlab>=4.0.0"' in str(error)

    def test_invalid_options(self):
        error = InvalidOptionsError("md", MarkdownParserOptions, HtmlParserOptions)
        assert error.expected_type is MarkdownParserOptions
        assert error.received_type is HtmlParserOptions
