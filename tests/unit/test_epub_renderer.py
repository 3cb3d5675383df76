#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_epub_renderer.py
"""Unit tests for EpubRenderer."""

import zipfile
from io import BytesIO

import pytest

from docz.ast import Chapter, Document, Heading, Other, Paragraph, Text
from docz.exceptions import UnsupportedNodeError
from docz.options import EpubRendererOptions
from docz.renderers import EpubRenderer


def _book() -> Document:
    return Document(
        title="My Book",
        summary="About things",
        authors=["Ada"],
        children=[
            Chapter(title="One", children=[Heading(level=1, children=[Text(value="Hello")])]),
            Chapter(children=[Heading(level=1, children=[Text(value="World")])]),
            Chapter(children=[Paragraph(children=[Text(value="no heading")])]),
        ],
    )


def _archive(data: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(BytesIO(data))


def _read_member(archive: zipfile.ZipFile, suffix: str) -> str:
    name = next(n for n in archive.namelist() if n.endswith(suffix))
    return archive.read(name).decode("utf-8")


@pytest.mark.unit
class TestEpubRenderer:
    """Tests for the EPUB package."""

    def test_zip_magic(self):
        data = EpubRenderer().render(_book())
        assert data[:2] == b"PK"
        assert EpubRenderer().is_binary()

    def test_one_item_per_chapter(self):
        archive = _archive(EpubRenderer().render(_book()))
        names = archive.namelist()
        for index in (1, 2, 3):
            assert any(name.endswith(f"chapter_{index}.xhtml") for name in names)
        assert "World" in _read_member(archive, "chapter_2.xhtml")

    def test_package_metadata(self):
        options = EpubRendererOptions(identifier="urn:isbn:9780000000000", language="de")
        opf = _read_member(_archive(EpubRenderer(options).render(_book())), ".opf")
        assert "My Book" in opf
        assert "Ada" in opf
        assert "About things" in opf
        assert "urn:isbn:9780000000000" in opf
        assert ">de<" in opf

    def test_chapter_titles_in_navigation(self):
        nav = _read_member(_archive(EpubRenderer().render(_book())), "nav.xhtml")
        assert "One" in nav
        assert "World" in nav
        assert "Chapter 3" in nav

    def test_document_without_chapters(self):
        doc = Document(children=[Paragraph(children=[Text(value="loose")])])
        archive = _archive(EpubRenderer().render(doc))
        assert "loose" in _read_member(archive, "chapter_1.xhtml")

    def test_other_is_unsupported(self):
        doc = Document(children=[Chapter(children=[Other(name="mark")])])
        with pytest.raises(UnsupportedNodeError, match="EpubRenderer"):
            EpubRenderer().render(doc)
