#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/processors/metadata.py
"""Document metadata injection."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from docz.ast import Document, Node, visit_and_modify
from docz.exceptions import ProcessError
from docz.processors.base import BaseProcessor

logger = logging.getLogger(__name__)


class DocMetadataProcessor(BaseProcessor):
    """Overwrite the title, summary and authors of every Document node.

    The values usually come from the project configuration. Children,
    attributes and spans are left untouched.

    Parameters
    ----------
    title : str or None, default = None
        Document title
    summary : str or None, default = None
        Short description
    authors : list of str or None, default = None
        Author names
    required : bool, default = False
        Fail with ProcessError when no title is given

    """

    def __init__(
        self,
        title: Optional[str] = None,
        summary: Optional[str] = None,
        authors: Optional[list[str]] = None,
        required: bool = False,
    ):
        self.title = title
        self.summary = summary
        self.authors = list(authors) if authors is not None else None
        self.required = required

    def process(self, nodes: Sequence[Node]) -> list[Node]:
        """Return copies of the trees with the Document fields replaced."""
        if self.required and not self.title:
            raise ProcessError("a document title is required", processor=self.name)

        result: list[Node] = []
        for node in nodes:
            rewritten = visit_and_modify(node, self._rewrite)
            if rewritten is not None:
                result.append(rewritten)
        logger.debug("Injected document metadata (title=%r)", self.title)
        return result

    def _rewrite(self, node: Node) -> Optional[Node]:
        if isinstance(node, Document):
            return Document(
                title=self.title,
                summary=self.summary,
                authors=list(self.authors) if self.authors is not None else None,
                children=node.children,
                attrs=dict(node.attrs),
                span=node.span,
            )
        return node
