#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/ast_json.py
"""JSON AST rendering.

The output is the versioned envelope produced by ``docz.ast.serialization``
and can be read back with ``json_to_ast``. This is useful for inspecting the
result of the processing stages and for feeding trees to other tools.

"""

from __future__ import annotations

from docz.ast.nodes import Node
from docz.ast.serialization import ast_to_json
from docz.options.ast_json import JsonRendererOptions
from docz.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render a tree to JSON.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
        >>> from docz.ast import Document, json_to_ast
        >>> renderer = JsonRenderer()
        >>> json_to_ast(renderer.render_as_text(Document())) == Document()
        True

    """

    file_extension = "json"

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render(self, node: Node) -> bytes:
        """Render the tree as UTF-8 encoded JSON."""
        return ast_to_json(node, indent=self.options.indent).encode("utf-8")
