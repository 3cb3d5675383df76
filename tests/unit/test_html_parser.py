#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_parser.py
"""Unit tests for HtmlParser.

Tests cover:
- Document metadata from the head
- Block and inline element mapping
- Chapter, section and footnote markup
- Comments, unknown elements and skipped elements

"""

import pytest

from docz.ast import (
    BlockQuote,
    Bold,
    Chapter,
    CodeBlock,
    Comment,
    DescrDetail,
    DescrList,
    DescrTerm,
    Document,
    FootnoteDef,
    FootnoteRef,
    Heading,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    ListItem,
    List,
    Other,
    Paragraph,
    Section,
    StrikeThrough,
    Table,
    TableCell,
    Text,
    ThematicBreak,
    extract_nodes,
    node_text,
)
from docz.exceptions import ParseError
from docz.options import HtmlParserOptions
from docz.parsers.html import HtmlParser, html_to_ast


@pytest.mark.unit
class TestMetadata:
    """Tests for head metadata extraction."""

    def test_title_description_authors(self):
        html = (
            "<html><head><title> My Book </title>"
            '<meta name="description" content="About things">'
            '<meta name="author" content="Ada, Grace">'
            "</head><body><p>x</p></body></html>"
        )
        doc = html_to_ast(html)
        assert doc.title == "My Book"
        assert doc.summary == "About things"
        assert doc.authors == ["Ada", "Grace"]

    def test_no_head(self):
        doc = html_to_ast("<p>Only body</p>")
        assert (doc.title, doc.summary, doc.authors) == (None, None, None)
        assert doc.children == [Paragraph(children=[Text(value="Only body")])]


@pytest.mark.unit
class TestBlocks:
    """Tests for block elements."""

    def test_headings_keep_id(self):
        doc = html_to_ast('<h2 id="setup">Setup</h2><h3>Next</h3>')
        assert doc.children == [
            Heading(level=2, children=[Text(value="Setup")], attrs={"id": "setup"}),
            Heading(level=3, children=[Text(value="Next")]),
        ]

    def test_paragraph_inline_content(self):
        doc = html_to_ast("<p>Hello <b>bold</b> <em>it</em> <del>x</del> <code>c</code></p>")
        paragraph = doc.children[0]
        assert node_text(extract_nodes(paragraph, Bold)[0]) == "bold"
        assert node_text(extract_nodes(paragraph, Italic)[0]) == "it"
        assert node_text(extract_nodes(paragraph, StrikeThrough)[0]) == "x"
        assert extract_nodes(paragraph, InlineCode) == [InlineCode(value="c")]

    def test_lists(self):
        doc = html_to_ast('<ol start="4"><li>a</li><li>b</li></ol><ul><li>c</li></ul>')
        ordered, unordered = doc.children
        assert isinstance(ordered, List) and ordered.ordered and ordered.start == 4
        assert [node_text(item) for item in ordered.children] == ["a", "b"]
        assert not unordered.ordered

    def test_task_items(self):
        doc = html_to_ast(
            '<ul><li><input type="checkbox" checked> done</li><li><input type="checkbox"> todo</li></ul>'
        )
        items = doc.children[0].children
        assert [item.checked for item in items] == [True, False]
        assert node_text(items[0]) == "done"

    def test_nested_task_item_keeps_its_own_checkbox(self):
        doc = html_to_ast("<ul><li>parent<ul><li><input type='checkbox' checked> child</li></ul></li></ul>")
        outer, inner = extract_nodes(doc, ListItem)
        assert [outer.checked, inner.checked] == [None, True]
        assert node_text(inner) == "child"

    def test_code_block_language(self):
        doc = html_to_ast('<pre><code class="language-python">x = 1\n</code></pre>')
        assert doc.children == [CodeBlock(value="x = 1\n", info="python")]

    def test_table_header_and_alignment(self):
        html = (
            "<table><thead><tr><th>A</th><th align=\"right\">B</th></tr></thead>"
            '<tbody><tr><td style="text-align: center">1</td><td>2</td></tr></tbody></table>'
        )
        table = html_to_ast(html).children[0]
        assert isinstance(table, Table)
        header, row = table.children
        assert header.is_header and not row.is_header
        assert header.children[1].align == "right"
        assert row.children[0].align == "center"

    def test_block_content_in_cell_is_kept(self):
        doc = html_to_ast("<table><tr><td><p>important</p></td><td><p>a</p><p>b</p></td></tr></table>")
        first, second = extract_nodes(doc, TableCell)
        assert first.children == [Text(value="important")]
        assert node_text(second) == "a b"

    def test_blockquote_hr_and_definition_list(self):
        doc = html_to_ast("<blockquote><p>q</p></blockquote><hr><dl><dt>T</dt><dd>D</dd></dl>")
        quote, rule, dl = doc.children
        assert isinstance(quote, BlockQuote)
        assert isinstance(rule, ThematicBreak)
        assert isinstance(dl, DescrList)
        item = dl.children[0]
        assert isinstance(item.children[0], DescrTerm)
        assert isinstance(item.children[1], DescrDetail)
        assert node_text(item) == "TD"

    def test_loose_inline_text_wrapped_in_paragraph(self):
        doc = html_to_ast("<div>loose <b>text</b><p>para</p></div>")
        assert [type(c) for c in doc.children] == [Paragraph, Paragraph]
        assert node_text(doc.children[0]) == "loose text"


@pytest.mark.unit
class TestStructure:
    """Tests for chapters, sections and footnotes."""

    def test_chapter_div(self):
        doc = html_to_ast('<div x-tag="chapter" data-title="One"><h1>One</h1></div>')
        assert doc.children == [Chapter(title="One", children=[Heading(level=1, children=[Text(value="One")])])]

    def test_section_and_article(self):
        doc = html_to_ast('<section id="s1"><p>a</p></section><article><p>b</p></article>')
        assert [type(c) for c in doc.children] == [Section, Section]
        assert doc.children[0].attrs == {"id": "s1"}

    def test_footnotes(self):
        html = (
            '<p>See<sup class="footnote-ref" id="fnref-n1"><a href="#fn-n1">n1</a></sup></p>'
            '<div class="footnote" id="fn-n1"><p>Note.</p></div>'
        )
        doc = html_to_ast(html)
        assert extract_nodes(doc, FootnoteRef) == [FootnoteRef(id="n1")]
        footnote = doc.children[1]
        assert isinstance(footnote, FootnoteDef)
        assert footnote.id == "n1"
        assert node_text(footnote) == "Note."

    def test_plain_sup_is_superscript(self):
        doc = html_to_ast("<p>x<sup>2</sup></p>")
        assert node_text(doc) == "x2"
        assert not extract_nodes(doc, FootnoteRef)


@pytest.mark.unit
class TestInlines:
    """Tests for links, images and breaks."""

    def test_link_image_break(self):
        doc = html_to_ast('<p><a href="https://e.com" title="E">e</a><br><img src="i.png" alt="I"></p>')
        paragraph = doc.children[0]
        assert extract_nodes(paragraph, Link)[0].title == "E"
        assert extract_nodes(paragraph, Image) == [Image(url="i.png", alt="I")]
        assert extract_nodes(paragraph, LineBreak)

    def test_block_content_in_link_is_kept(self):
        doc = html_to_ast('<p><a href="x"><div>click</div></a></p>')
        (link,) = extract_nodes(doc, Link)
        assert link.url == "x"
        assert link.children == [Text(value="click")]

    def test_code_block_in_link_becomes_inline_code(self):
        doc = html_to_ast('<p><a href="x"><pre><code>run()</code></pre></a></p>')
        (link,) = extract_nodes(doc, Link)
        assert link.children == [InlineCode(value="run()")]


@pytest.mark.unit
class TestSpecialContent:
    """Tests for comments, unknown and skipped elements."""

    def test_comment(self):
        doc = html_to_ast("<!-- hidden --><p>x</p>")
        assert doc.children[0] == Comment(value="hidden")

    def test_comments_dropped_when_disabled(self):
        doc = HtmlParser(HtmlParserOptions(keep_comments=False)).parse(b"<!-- hidden --><p>x</p>")
        assert not extract_nodes(doc, Comment)

    def test_unknown_element_is_other(self):
        doc = html_to_ast('<p><mark class="hl">x</mark></p>')
        other = extract_nodes(doc, Other)[0]
        assert other.name == "mark"
        assert other.attrs == {"class": "hl"}
        assert other.children == [Text(value="x")]

    def test_scripts_and_styles_skipped(self):
        doc = html_to_ast("<script>alert(1)</script><style>p{}</style><p>x</p>")
        assert doc.children == [Paragraph(children=[Text(value="x")])]

    def test_empty_document(self):
        assert html_to_ast("") == Document()

    def test_invalid_bytes(self):
        with pytest.raises(ParseError):
            HtmlParser().parse(b"<p>\xff</p>")

    def test_unknown_tree_builder(self):
        with pytest.raises(ParseError, match="tree builder"):
            HtmlParser(HtmlParserOptions(parser="no-such-builder")).parse(b"<p>x</p>")
