#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover:
- Standalone documents built from the Jinja2 template
- Fragment output for blocks and inlines
- Heading ids, chapters, tables and footnotes
- Unsupported nodes

"""

import pytest

from docz.ast import (
    Chapter,
    CodeBlock,
    Comment,
    Document,
    FootnoteDef,
    FootnoteRef,
    Heading,
    Html,
    Image,
    Link,
    List,
    ListItem,
    Metadata,
    Other,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)
from docz.exceptions import UnsupportedNodeError
from docz.options import HtmlRendererOptions
from docz.parsers.html import html_to_ast
from docz.renderers import HtmlRenderer


def _fragment(node, **options) -> str:
    return HtmlRenderer(HtmlRendererOptions(standalone=False, **options)).render_as_text(node)


def _para(text: str) -> Paragraph:
    return Paragraph(children=[Text(value=text)])


@pytest.mark.unit
class TestStandalone:
    """Tests for complete HTML documents."""

    def test_head_metadata(self):
        doc = Document(title="My Book", summary="About things", authors=["Ada", "Grace"], children=[_para("Hi")])
        html = HtmlRenderer().render_as_text(doc)
        assert html.startswith("<!DOCTYPE html>\n")
        assert '<html lang="en">' in html
        assert "<title>My Book</title>" in html
        assert '<meta name="generator" content="docz">' in html
        assert '<meta name="author" content="Ada, Grace">' in html
        assert '<meta name="description" content="About things">' in html
        assert "<body>\n<p>Hi</p>\n</body>" in html

    def test_title_is_escaped(self):
        html = HtmlRenderer().render_as_text(Document(title="A & <B>"))
        assert "<title>A &amp; &lt;B&gt;</title>" in html

    def test_untitled_and_no_optional_meta(self):
        html = HtmlRenderer(HtmlRendererOptions(creator=None, css=None)).render_as_text(Document())
        assert "<title>Untitled</title>" in html
        assert "generator" not in html
        assert 'name="author"' not in html
        assert "<style>" not in html

    def test_custom_css_and_language(self):
        options = HtmlRendererOptions(css="p { color: red; }", language="fr")
        html = HtmlRenderer(options).render_as_text(Document())
        assert '<html lang="fr">' in html
        assert "p { color: red; }" in html

    def test_standalone_output_parses_back(self):
        doc = Document(
            title="My Book",
            authors=["Ada"],
            children=[Chapter(title="One", children=[Heading(level=1, children=[Text(value="One")])])],
        )
        parsed = html_to_ast(HtmlRenderer().render_as_text(doc))
        assert parsed.title == "My Book"
        assert parsed.authors == ["Ada"]
        assert parsed.children[0].title == "One"


@pytest.mark.unit
class TestBlocks:
    """Tests for block markup."""

    def test_fragment(self):
        doc = Document(children=[_para("Hi")])
        assert HtmlRenderer(HtmlRendererOptions(standalone=False)).render(doc) == b"<p>Hi</p>\n"

    def test_heading_ids(self):
        doc = Document(
            children=[
                Heading(level=1, children=[Text(value="Hello")]),
                Heading(level=2, children=[Text(value="Hello")]),
                Heading(level=2, children=[Text(value="x")], attrs={"id": "custom"}),
            ]
        )
        assert _fragment(doc) == (
            '<h1 id="hello">Hello</h1>\n<h2 id="hello-2">Hello</h2>\n<h2 id="custom">x</h2>\n'
        )

    def test_heading_ids_disabled(self):
        doc = Document(children=[Heading(level=3, children=[Text(value="Hello")])])
        assert _fragment(doc, heading_ids=False) == "<h3>Hello</h3>\n"

    def test_chapter(self):
        doc = Document(children=[Chapter(title="One", children=[_para("a")])])
        assert _fragment(doc) == '<div x-tag="chapter" data-title="One">\n<p>a</p>\n</div>\n'

    def test_lists(self):
        lst = List(
            ordered=True,
            start=2,
            children=[ListItem(children=[_para("a")]), ListItem(checked=True, children=[_para("done")])],
        )
        assert _fragment(lst) == (
            '<ol start="2">\n<li>a</li>\n<li><input type="checkbox" disabled checked> done</li>\n</ol>\n'
        )

    def test_table(self):
        table = Table(
            children=[
                TableRow(is_header=True, children=[TableCell(align="right", children=[Text(value="A")])]),
                TableRow(children=[TableCell(children=[Text(value="1")])]),
            ]
        )
        assert _fragment(table) == (
            "<table>\n<thead>\n<tr><th style=\"text-align: right\">A</th></tr>\n</thead>\n"
            "<tbody>\n<tr><td>1</td></tr>\n</tbody>\n</table>\n"
        )

    def test_code_block_escaped(self):
        block = CodeBlock(value="a < b\n", info="python extra")
        assert _fragment(block) == '<pre><code class="language-python">a &lt; b\n</code></pre>\n'

    def test_raw_html_passed_through(self):
        assert _fragment(Html(value="<div>raw</div>\n")) == "<div>raw</div>\n"

    def test_comment_and_metadata_render_nothing(self):
        doc = Document(children=[Comment(value="x"), Metadata(value="title: T\n")])
        assert _fragment(doc) == ""

    def test_footnotes(self):
        doc = Document(
            children=[
                Paragraph(children=[Text(value="See"), FootnoteRef(id="1")]),
                FootnoteDef(id="1", children=[_para("Note.")]),
            ]
        )
        html = _fragment(doc)
        assert '<sup class="footnote-ref" id="fnref-1"><a href="#fn-1">1</a></sup>' in html
        assert '<div class="footnote" id="fn-1">\n<p>Note.</p>\n</div>\n' in html


@pytest.mark.unit
class TestInlines:
    """Tests for inline markup."""

    def test_text_escaped(self):
        assert _fragment(_para("a < b & c")) == "<p>a &lt; b &amp; c</p>\n"

    def test_link_and_image(self):
        paragraph = Paragraph(
            children=[
                Link(url="https://e.com/?a=1&b=2", title="E", children=[Text(value="e")]),
                Image(url="i.png", alt='say "hi"'),
            ]
        )
        assert _fragment(paragraph) == (
            '<p><a href="https://e.com/?a=1&amp;b=2" title="E">e</a>'
            '<img src="i.png" alt="say &quot;hi&quot;"></p>\n'
        )


@pytest.mark.unit
class TestUnsupported:
    """Tests for nodes HtmlRenderer cannot represent."""

    def test_other_raises(self):
        with pytest.raises(UnsupportedNodeError, match="Other nodes are not supported by HtmlRenderer"):
            HtmlRenderer().render(Document(children=[Other(name="mark")]))

    def test_table_with_non_row_child_raises(self):
        table = Table(children=[TableRow(children=[TableCell(children=[Text(value="a")])]), Paragraph()])
        with pytest.raises(UnsupportedNodeError, match="Paragraph nodes are not supported by HtmlRenderer"):
            HtmlRenderer().render(Document(children=[table]))
