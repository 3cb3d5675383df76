#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for JSON AST rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docz.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST as JSON.

    Parameters
    ----------
    indent : int or None, default 2
        Indentation for pretty printing; None for compact output.

    """

    indent: int | None = field(default=2, metadata={"help": "JSON indentation (None for compact)", "importance": "core"})
