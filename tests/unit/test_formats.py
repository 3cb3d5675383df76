#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_formats.py
"""Unit tests for format ids and the parser/renderer tables."""

import pytest

from docz.exceptions import FormatError
from docz.formats import Format, create_parser, create_renderer, is_source_path
from docz.parsers import HtmlParser, MarkdownParser
from docz.renderers import DebugRenderer, EpubRenderer, HtmlRenderer, JsonRenderer, MarkdownRenderer, PdfRenderer


@pytest.mark.unit
class TestFormatParse:
    """Tests for Format.parse."""

    @pytest.mark.parametrize("format_id", ["md", "html", "pdf", "epub", "debug", "json"])
    def test_known_ids(self, format_id):
        assert Format.parse(format_id).value == format_id

    def test_case_and_whitespace_insensitive(self):
        assert Format.parse(" PDF ") is Format.PDF

    def test_unknown_id(self):
        with pytest.raises(FormatError, match="Unknown format 'docx'") as exc_info:
            Format.parse("docx")
        assert exc_info.value.format_id == "docx"

    def test_str_is_id(self):
        assert str(Format.EPUB) == "epub"


@pytest.mark.unit
class TestFormatFromPath:
    """Tests for source extension lookup."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("a.md", Format.MD),
            ("dir/b.markdown", Format.MD),
            ("C.MD", Format.MD),
            ("d.mdx", Format.MD),
            ("e.html", Format.HTML),
            ("f.htm", Format.HTML),
        ],
    )
    def test_known_extensions(self, path, expected):
        assert Format.from_path(path) is expected
        assert is_source_path(path)

    @pytest.mark.parametrize("path", ["notes.txt", "image.png", "Makefile"])
    def test_unknown_extensions(self, path):
        assert not is_source_path(path)
        with pytest.raises(FormatError):
            Format.from_path(path)


@pytest.mark.unit
class TestFactories:
    """Tests for create_parser and create_renderer."""

    def test_parsers(self):
        assert isinstance(create_parser(Format.MD), MarkdownParser)
        assert isinstance(create_parser(Format.HTML), HtmlParser)

    def test_output_only_format_has_no_parser(self):
        with pytest.raises(FormatError, match="cannot be used as a source"):
            create_parser(Format.PDF)

    @pytest.mark.parametrize(
        "fmt, renderer_class, extension",
        [
            (Format.MD, MarkdownRenderer, "md"),
            (Format.HTML, HtmlRenderer, "html"),
            (Format.PDF, PdfRenderer, "pdf"),
            (Format.EPUB, EpubRenderer, "epub"),
            (Format.DEBUG, DebugRenderer, "txt"),
            (Format.JSON, JsonRenderer, "json"),
        ],
    )
    def test_renderers(self, fmt, renderer_class, extension):
        renderer = create_renderer(fmt)
        assert isinstance(renderer, renderer_class)
        assert renderer.file_extension == extension
