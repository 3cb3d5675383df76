#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/processors/__init__.py
"""Tree processors run between parsing and rendering."""

from docz.processors.base import BaseProcessor, run_processors
from docz.processors.chapters import ChapterAggregationProcessor, chapter_title
from docz.processors.metadata import DocMetadataProcessor

__all__ = [
    "BaseProcessor",
    "ChapterAggregationProcessor",
    "DocMetadataProcessor",
    "chapter_title",
    "run_processors",
]
