#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docz.constants import BulletSymbol, EmphasisSymbol
from docz.options.base import BaseParserOptions, BaseRendererOptions


# docz/options/markdown.py
@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for parsing Markdown into the AST.

    Each ``parse_*`` flag enables the matching mistune plugin.

    Parameters
    ----------
    extract_frontmatter : bool, default True
        Emit a leading ``---`` block as a Metadata node instead of Markdown.
    parse_tables : bool, default True
        Parse GFM pipe tables.
    parse_strikethrough : bool, default True
        Parse ``~~struck~~`` text.
    parse_task_lists : bool, default True
        Parse ``- [ ]`` / ``- [x]`` task items.
    parse_footnotes : bool, default True
        Parse ``[^id]`` references and definitions.
    parse_definition_lists : bool, default True
        Parse definition lists.
    parse_superscript : bool, default True
        Parse ``^sup^`` text.

    """

    extract_frontmatter: bool = field(
        default=True,
        metadata={"help": "Emit a leading --- block as a Metadata node", "importance": "core"},
    )
    parse_tables: bool = field(default=True, metadata={"help": "Parse GFM pipe tables", "importance": "core"})
    parse_strikethrough: bool = field(
        default=True, metadata={"help": "Parse ~~strikethrough~~ text", "importance": "advanced"}
    )
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse task list items", "importance": "advanced"})
    parse_footnotes: bool = field(
        default=True, metadata={"help": "Parse footnote references and definitions", "importance": "advanced"}
    )
    parse_definition_lists: bool = field(
        default=True, metadata={"help": "Parse definition lists", "importance": "advanced"}
    )
    parse_superscript: bool = field(default=True, metadata={"help": "Parse ^superscript^ text", "importance": "advanced"})


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to Markdown.

    Parameters
    ----------
    bullet : {"-", "*", "+"}, default "-"
        Marker for unordered list items.
    emphasis_symbol : {"*", "_"}, default "*"
        Delimiter for emphasis and strong emphasis.
    code_fence : str, default "```"
        Fence for code blocks; lengthened automatically when the code contains it.

    """

    bullet: BulletSymbol = field(default="-", metadata={"help": "Unordered list marker", "importance": "core"})
    emphasis_symbol: EmphasisSymbol = field(
        default="*", metadata={"help": "Delimiter for emphasis and strong emphasis", "importance": "core"}
    )
    code_fence: str = field(default="```", metadata={"help": "Code block fence", "importance": "advanced"})

    def __post_init__(self) -> None:
        """Validate the fence."""
        if len(self.code_fence) < 3 or set(self.code_fence) not in ({"`"}, {"~"}):
            raise ValueError(f"code_fence must be at least three backticks or tildes, got {self.code_fence!r}")
