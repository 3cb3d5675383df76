#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all AST renderers inherit
from. A renderer turns a Node tree into the bytes of one output file; text
formats also offer the decoded string through ``render_as_text``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NoReturn

from docz.ast.nodes import Node, Table, TableRow
from docz.exceptions import InvalidOptionsError, RenderError, UnsupportedNodeError
from docz.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Attributes
    ----------
    file_extension : str
        Extension (without dot) of the files this renderer produces

    Examples
    --------
    Creating a custom renderer:

        >>> from docz.ast import node_text
        >>> from docz.renderers.base import BaseRenderer
        >>>
        >>> class PlainTextRenderer(BaseRenderer):
        ...     file_extension = "txt"
        ...
        ...     def render(self, node):
        ...         return node_text(node).encode("utf-8")

    """

    file_extension: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options: BaseRendererOptions = options or BaseRendererOptions()

    @property
    def name(self) -> str:
        """Renderer name used in error messages."""
        return type(self).__name__

    @abstractmethod
    def render(self, node: Node) -> bytes:
        """Render a tree to the bytes of the output file.

        Parameters
        ----------
        node : Node
            Root of the tree to render, usually a Document

        Returns
        -------
        bytes
            Rendered output

        Raises
        ------
        RenderError
            If the tree contains a variant this renderer cannot represent
            (``UnsupportedNodeError``) or the output library fails

        """
        raise NotImplementedError

    def render_as_text(self, node: Node) -> str:
        """Render a tree and decode the output as UTF-8.

        Raises
        ------
        RenderError
            If rendering fails or the output is not valid UTF-8 (always the
            case for binary formats such as PDF)

        """
        data = self.render(node)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RenderError(
                f"{self.name} output is not valid UTF-8 (byte offset {e.start})",
                node_type=node.variant,
                rendering_stage="decoding",
                original_error=e,
            ) from e

    def is_binary(self) -> bool:
        """Return True if only the byte form of the output is meaningful."""
        return False

    def _unsupported(self, node: Node) -> NoReturn:
        """Fail on a variant this renderer cannot represent."""
        raise UnsupportedNodeError(node.variant, self.name)

    def _table_rows(self, node: Table) -> list[TableRow]:
        """Return the rows of a table, failing on any child that is not a TableRow."""
        rows: list[TableRow] = []
        for child in node.children:
            if not isinstance(child, TableRow):
                self._unsupported(child)
            rows.append(child)
        return rows

    @staticmethod
    def _compute_table_columns(rows: list[TableRow]) -> int:
        """Compute the maximum number of cells in any row of a table."""
        return max((len(row.children) for row in rows), default=0)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have an ``_output`` attribute (list of str)
    that its visitor methods append to.

    Examples
    --------
        >>> class MyRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):  # doctest: +SKIP
        ...     def visit_italic(self, node):
        ...         content = self._render_inline_content(node.children)
        ...         self._output.append(f"*{content}*")

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to a string by temporarily capturing the output."""
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output
