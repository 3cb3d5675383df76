#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/processors/chapters.py
"""Chapter aggregation.

Every source file is parsed into its own Document. This processor turns each
of those Documents into a Chapter and gathers the chapters, in input order,
under a single new Document:

    Document(a.md)  Document(b.md)      Document
      Metadata        Heading      ->     Chapter(title from a.md frontmatter)
      Heading                               Heading
                                          Chapter(title=None)
                                            Heading

Metadata nodes are removed wherever they appear: frontmatter is consumed here
and never reaches a renderer. A malformed frontmatter block is logged and
treated as "no title"; it does not fail the build.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from docz.ast import Chapter, Document, Metadata, Node, visit_and_modify
from docz.exceptions import FrontmatterError
from docz.frontmatter import frontmatter_title
from docz.processors.base import BaseProcessor

logger = logging.getLogger(__name__)


def chapter_title(document: Document) -> Optional[str]:
    """Return the title recorded in a Document's first-level frontmatter.

    Every first-level Metadata child is tried in order and the first title
    found wins. Unparsable blocks are logged at error level and skipped.

    """
    for child in document.children:
        if not isinstance(child, Metadata):
            continue
        try:
            title = frontmatter_title(child.value)
        except FrontmatterError as e:
            location = f" at {child.span}" if child.span is not None else ""
            logger.error("invalid frontmatter%s: %s", location, e)
            continue
        if title is not None:
            return title
    return None


class ChapterAggregationProcessor(BaseProcessor):
    """Aggregate per-file Documents into one Document of Chapters.

    Each input Document becomes a Chapter inheriting its children, attributes
    and span; its title comes from the Document's frontmatter. Inputs that are
    not Documents are kept as they are (minus any Metadata). The output is
    always a single Document with no title, summary or authors; a later
    DocMetadataProcessor fills them in.

    Examples
    --------
        >>> from docz.ast import Heading, Text
        >>> doc = Document(children=[Metadata(value="title: Foo"), Heading(level=1, children=[Text(value="Hi")])])
        >>> result = ChapterAggregationProcessor().transform(doc)
        >>> result.children[0].title
        'Foo'

    """

    def process(self, nodes: Sequence[Node]) -> list[Node]:
        """Wrap each input Document in a Chapter under one aggregate Document."""
        chapters: list[Node] = []
        for node in nodes:
            chapter = visit_and_modify(node, self._rewrite)
            if chapter is not None:
                chapters.append(chapter)
        logger.debug("Aggregated %d chapter(s)", len(chapters))
        return [Document(children=chapters)]

    @staticmethod
    def _rewrite(node: Node) -> Optional[Node]:
        if isinstance(node, Document):
            return Chapter(
                title=chapter_title(node),
                children=node.children,
                attrs=dict(node.attrs),
                span=node.span,
            )
        if isinstance(node, Metadata):
            return None
        return node
