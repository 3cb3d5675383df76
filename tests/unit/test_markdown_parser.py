#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for MarkdownParser.

Tests cover:
- Block and inline constructs mapped from mistune tokens
- Frontmatter extraction into Metadata nodes
- Spans of the Document and Metadata nodes
- Decoding errors and options validation

"""

import sys

import pytest

from docz.ast import (
    BlockQuote,
    Bold,
    CodeBlock,
    Comment,
    DescrDetail,
    DescrList,
    DescrTerm,
    Document,
    FootnoteDef,
    FootnoteRef,
    Heading,
    Html,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    Metadata,
    Other,
    Paragraph,
    SoftBreak,
    Span,
    StrikeThrough,
    Superscript,
    Table,
    Text,
    ThematicBreak,
    extract_nodes,
    node_text,
)
from docz.exceptions import DependencyError, FrontmatterError, InvalidOptionsError, ParseError
from docz.options import HtmlParserOptions, MarkdownParserOptions
from docz.parsers.markdown import MarkdownParser, markdown_to_ast


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level constructs."""

    def test_heading(self):
        doc = markdown_to_ast("# Hello\n")
        assert doc == Document(children=[Heading(level=1, children=[Text(value="Hello")])], span=Span(1, 1, 1, 7))

    def test_heading_levels(self):
        doc = markdown_to_ast("## Two\n\n###### Six\n")
        assert [h.level for h in doc.children] == [2, 6]

    def test_paragraphs(self):
        doc = markdown_to_ast("First.\n\nSecond.\n")
        assert [type(c) for c in doc.children] == [Paragraph, Paragraph]
        assert node_text(doc.children[1]) == "Second."

    def test_fenced_code(self):
        doc = markdown_to_ast("```python\nprint(1)\n```\n")
        assert doc.children == [CodeBlock(value="print(1)\n", info="python")]

    def test_indented_code_has_no_info(self):
        doc = markdown_to_ast("    x = 1\n")
        assert isinstance(doc.children[0], CodeBlock)
        assert doc.children[0].info is None

    def test_block_quote(self):
        doc = markdown_to_ast("> quoted\n")
        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert node_text(quote) == "quoted"

    def test_thematic_break(self):
        doc = markdown_to_ast("a\n\n***\n\nb\n")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_unordered_list(self):
        doc = markdown_to_ast("- a\n- b\n")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert not lst.ordered
        assert lst.start is None
        assert [node_text(item) for item in lst.children] == ["a", "b"]
        assert all(isinstance(item, ListItem) and item.checked is None for item in lst.children)
        assert isinstance(lst.children[0].children[0], Paragraph)

    def test_ordered_list_start(self):
        lst = markdown_to_ast("3. x\n4. y\n").children[0]
        assert lst.ordered
        assert lst.start == 3

    def test_nested_list(self):
        doc = markdown_to_ast("- a\n  - b\n")
        outer = doc.children[0]
        inner = extract_nodes(outer.children[0], List)
        assert len(inner) == 1
        assert node_text(inner[0]) == "b"

    def test_task_list(self):
        lst = markdown_to_ast("- [x] done\n- [ ] todo\n").children[0]
        assert [item.checked for item in lst.children] == [True, False]
        assert node_text(lst.children[0]).strip() == "done"

    def test_table(self):
        doc = markdown_to_ast("| a | b |\n|:--|--:|\n| 1 | 2 |\n")
        table = doc.children[0]
        assert isinstance(table, Table)
        header, body = table.children
        assert header.is_header and not body.is_header
        assert [cell.align for cell in header.children] == ["left", "right"]
        assert [node_text(cell) for cell in body.children] == ["1", "2"]

    def test_html_block(self):
        doc = markdown_to_ast("<div>raw</div>\n")
        assert isinstance(doc.children[0], Html)
        assert "<div>raw</div>" in doc.children[0].value

    def test_html_comment(self):
        doc = markdown_to_ast("<!-- note -->\n")
        assert doc.children == [Comment(value="note")]

    def test_footnotes(self):
        doc = markdown_to_ast("Text[^1].\n\n[^1]: The note.\n")
        refs = extract_nodes(doc, FootnoteRef)
        defs = extract_nodes(doc, FootnoteDef)
        assert [ref.id for ref in refs] == ["1"]
        assert [d.id for d in defs] == ["1"]
        assert "The note." in node_text(defs[0])
        assert isinstance(doc.children[-1], FootnoteDef)

    def test_footnote_labels_keep_their_case(self):
        doc = markdown_to_ast("Text[^n1] and[^Note].\n\n[^n1]: First.\n[^Note]: Second.\n")
        assert [ref.id for ref in extract_nodes(doc, FootnoteRef)] == ["n1", "Note"]
        assert [d.id for d in extract_nodes(doc, FootnoteDef)] == ["n1", "Note"]

    def test_definition_list(self):
        doc = markdown_to_ast("Term\n: Definition\n")
        lists = extract_nodes(doc, DescrList)
        assert len(lists) == 1
        assert [node_text(t) for t in extract_nodes(lists[0], DescrTerm)] == ["Term"]
        assert "Definition" in node_text(extract_nodes(lists[0], DescrDetail)[0])


@pytest.mark.unit
class TestInlines:
    """Tests for inline constructs."""

    def test_emphasis_and_code(self):
        paragraph = markdown_to_ast("Some *em* and **strong** and `code`\n").children[0]
        assert node_text(extract_nodes(paragraph, Italic)[0]) == "em"
        assert node_text(extract_nodes(paragraph, Bold)[0]) == "strong"
        assert extract_nodes(paragraph, InlineCode) == [InlineCode(value="code")]

    def test_strikethrough(self):
        paragraph = markdown_to_ast("~~gone~~\n").children[0]
        assert paragraph.children == [StrikeThrough(children=[Text(value="gone")])]

    def test_superscript(self):
        paragraph = markdown_to_ast("2^10^\n").children[0]
        assert node_text(extract_nodes(paragraph, Superscript)[0]) == "10"

    def test_link_and_image(self):
        paragraph = markdown_to_ast('[site](https://example.com "T") ![alt text](img.png)\n').children[0]
        link = extract_nodes(paragraph, Link)[0]
        assert link.url == "https://example.com"
        assert link.title == "T"
        assert node_text(link) == "site"
        assert extract_nodes(paragraph, Image) == [Image(url="img.png", alt="alt text")]

    def test_soft_and_hard_breaks(self):
        soft = markdown_to_ast("a\nb\n").children[0]
        assert any(isinstance(c, SoftBreak) for c in soft.children)
        hard = markdown_to_ast("a  \nb\n").children[0]
        assert any(isinstance(c, LineBreak) for c in hard.children)

    def test_disabled_extension(self):
        options = MarkdownParserOptions(parse_strikethrough=False)
        paragraph = MarkdownParser(options).parse(b"~~gone~~\n").children[0]
        assert not extract_nodes(paragraph, StrikeThrough)
        assert node_text(paragraph) == "~~gone~~"


@pytest.mark.unit
class TestFrontmatter:
    """Tests for frontmatter handling."""

    def test_metadata_node_first(self):
        doc = markdown_to_ast("---\ntitle: Foo\n---\n# Foo\n")
        assert doc.children[0] == Metadata(value="title: Foo\n", span=Span(1, 1, 3, 3))
        assert isinstance(doc.children[1], Heading)
        assert doc.span == Span(1, 1, 4, 5)

    def test_frontmatter_not_interpreted(self):
        """The parser keeps frontmatter raw; Document fields stay unset."""
        doc = markdown_to_ast("---\ntitle: Foo\n---\n")
        assert doc.title is None

    def test_malformed_yaml_is_still_kept(self):
        doc = markdown_to_ast("---\ntitle: [oops\n---\nbody\n")
        assert doc.children[0].value == "title: [oops\n"

    def test_unclosed_frontmatter(self):
        with pytest.raises(FrontmatterError):
            markdown_to_ast("---\ntitle: Foo\n")

    def test_extraction_disabled(self):
        options = MarkdownParserOptions(extract_frontmatter=False)
        doc = MarkdownParser(options).parse(b"---\ntitle: Foo\n---\n")
        assert not extract_nodes(doc, Metadata)


@pytest.mark.unit
class TestParserContract:
    """Tests for errors, purity and unknown tokens."""

    def test_empty_input(self):
        doc = markdown_to_ast("")
        assert doc == Document()

    def test_invalid_utf8_reports_position(self):
        with pytest.raises(ParseError) as exc_info:
            MarkdownParser().parse(b"ok\n\xff")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 1
        assert "line 2" in str(exc_info.value)

    def test_non_bytes_input(self):
        with pytest.raises(ParseError, match="bytes"):
            MarkdownParser().parse("text")  # type: ignore[arg-type]

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(HtmlParserOptions())  # type: ignore[arg-type]

    def test_parsing_is_pure(self):
        source = b"# T\n\n- a\n- b\n\n| x |\n|---|\n| 1 |\n"
        parser = MarkdownParser()
        assert parser.parse(source) == parser.parse(source)

    def test_unknown_token_kept_as_other(self):
        parser = MarkdownParser()
        nodes = parser._process_tokens([{"type": "block_math", "raw": "x^2"}])
        assert nodes == [Other(name="block_math", attrs={"raw": "x^2"})]

    def test_escaped_text_is_one_text_node(self):
        doc = markdown_to_ast("\\# not a heading\n")
        assert doc.children == [Paragraph(children=[Text(value="# not a heading")])]

    def test_missing_mistune_raises_dependency_error(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "mistune", None)
        with pytest.raises(DependencyError, match="mistune"):
            MarkdownParser().parse(b"# x\n")
