#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_serialization.py
"""Unit tests for AST JSON serialization."""

import json

import pytest

from docz.ast import (
    Chapter,
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    ListItem,
    Metadata,
    Paragraph,
    Span,
    Text,
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
)


@pytest.mark.unit
class TestAstToDict:
    """Tests for the dictionary form."""

    def test_leaf_has_no_children_key(self):
        data = ast_to_dict(Text(value="hi"))
        assert data == {"node_type": "Text", "value": "hi", "attrs": {}}

    def test_structural_node_has_children_key(self):
        data = ast_to_dict(Paragraph())
        assert data["children"] == []

    def test_span_included_when_present(self):
        data = ast_to_dict(Metadata(value="title: A\n", span=Span(1, 1, 3, 3)))
        assert data["span"] == {"start_line": 1, "start_col": 1, "end_line": 3, "end_col": 3}

    def test_variant_fields(self):
        data = ast_to_dict(Heading(level=2, attrs={"id": "x"}))
        assert data["level"] == 2
        assert data["attrs"] == {"id": "x"}

    def test_document_fields(self):
        data = ast_to_dict(Document(title="T", authors=["A", "B"]))
        assert data["title"] == "T"
        assert data["summary"] is None
        assert data["authors"] == ["A", "B"]


@pytest.mark.unit
class TestDictToAst:
    """Tests for reconstruction and validation."""

    def test_nested_structure(self):
        tree = Document(
            title="Book",
            children=[
                Chapter(title="One", span=Span(1, 1, 4, 2), children=[
                    List(ordered=True, start=3, children=[ListItem(checked=True, children=[Paragraph()])]),
                    CodeBlock(value="x = 1\n", info="python"),
                    Paragraph(children=[Link(url="https://example.com", title="Ex", children=[Text(value="l")])]),
                ]),
            ],
        )
        assert dict_to_ast(ast_to_dict(tree)) == tree

    def test_unknown_node_type(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"node_type": "Spoiler"})

    def test_leaf_with_children_rejected(self):
        with pytest.raises(ValueError, match="cannot have children"):
            dict_to_ast({"node_type": "Text", "value": "x", "children": []})

    def test_missing_required_field(self):
        with pytest.raises(ValueError, match="invalid fields"):
            dict_to_ast({"node_type": "Link", "children": []})

    def test_malformed_span(self):
        with pytest.raises(ValueError, match="malformed span"):
            dict_to_ast({"node_type": "Text", "value": "x", "span": {"start_line": 1}})

    def test_missing_attrs_default_to_empty(self):
        assert dict_to_ast({"node_type": "ThematicBreak"}).attrs == {}


@pytest.mark.unit
class TestJson:
    """Tests for the JSON envelope."""

    def test_envelope(self):
        payload = json.loads(ast_to_json(Document()))
        assert payload["schema_version"] == 1
        assert payload["root"]["node_type"] == "Document"

    def test_round_trip_unicode(self):
        tree = Document(children=[Paragraph(children=[Text(value="héllo ✓")])])
        text = ast_to_json(tree, indent=2)
        assert "héllo ✓" in text
        assert json_to_ast(text) == tree

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="Invalid AST JSON"):
            json_to_ast("{not json")

    def test_wrong_schema_version(self):
        with pytest.raises(ValueError, match="schema version"):
            json_to_ast(json.dumps({"schema_version": 99, "root": {"node_type": "Document"}}))

    def test_missing_root(self):
        with pytest.raises(ValueError, match="'root'"):
            json_to_ast(json.dumps({"schema_version": 1}))
