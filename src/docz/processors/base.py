#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/processors/base.py
"""Base class for tree processors.

A processor sits between parsing and rendering. It receives the exact output
of the previous stage (one tree per source file for the first processor) and
returns new trees; it never modifies its input in place. Processors are run in
a fixed, caller-supplied order and must not assume their position in it.

Examples
--------
    >>> from docz.ast import Comment, visit_and_modify
    >>> class DropComments(BaseProcessor):
    ...     def process(self, nodes):
    ...         rewritten = (visit_and_modify(n, lambda x: None if isinstance(x, Comment) else x) for n in nodes)
    ...         return [n for n in rewritten if n is not None]

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from docz.ast import Node
from docz.exceptions import ProcessError
from docz.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class BaseProcessor(ABC):
    """Abstract base class for tree processors."""

    @property
    def name(self) -> str:
        """Processor name used in error messages."""
        return type(self).__name__

    @abstractmethod
    def process(self, nodes: Sequence[Node]) -> list[Node]:
        """Transform a sequence of trees.

        Parameters
        ----------
        nodes : sequence of Node
            Output of the previous stage

        Returns
        -------
        list of Node
            New trees; the inputs are left untouched

        Raises
        ------
        ProcessError
            If the transformation cannot be completed

        """
        raise NotImplementedError

    def run(self, nodes: Sequence[Node]) -> list[Node]:
        """Run ``process``, wrapping unexpected failures in ProcessError.

        Any exception other than ProcessError is re-raised as a ProcessError
        naming this processor, with the original kept as ``original_error``.

        """
        with debug_timer(logger, f"Processor {self.name}"):
            try:
                return self.process(nodes)
            except ProcessError:
                raise
            except Exception as e:
                logger.error("Processor %s failed: %s", self.name, e)
                raise ProcessError(str(e), processor=self.name, original_error=e) from e

    def transform(self, node: Node) -> Node:
        """Single-tree variant of ``run``.

        Raises
        ------
        ProcessError
            If the processor does not return exactly one tree

        """
        result = self.run([node])
        if len(result) != 1:
            raise ProcessError(f"expected exactly one tree, got {len(result)}", processor=self.name)
        return result[0]


def run_processors(processors: Sequence[BaseProcessor], nodes: Sequence[Node]) -> list[Node]:
    """Run processors in order, each receiving the previous one's output."""
    current = list(nodes)
    for processor in processors:
        logger.debug("Running processor %s on %d tree(s)", processor.name, len(current))
        current = processor.run(current)
    return current
