#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/frontmatter.py
"""YAML frontmatter helpers.

A source document may open with a frontmatter block: a line holding exactly
``---``, a YAML mapping, and a closing ``---`` line::

    ---
    title: Getting started
    ---

    # Getting started

The block is split off before the body is handed to the grammar library and
parsed on its own with PyYAML.

"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

import yaml

from docz.constants import FRONTMATTER_DELIMITER
from docz.exceptions import FrontmatterError


class FrontmatterSplit(NamedTuple):
    """Result of ``split_frontmatter``.

    Attributes
    ----------
    frontmatter : str or None
        Raw text between the delimiters, None when the document has no block
    body : str
        Remaining document text
    line_count : int
        Number of lines the block occupied, delimiters included (0 when absent)

    """

    frontmatter: Optional[str]
    body: str
    line_count: int


def split_frontmatter(text: str) -> FrontmatterSplit:
    """Split a leading frontmatter block from a document.

    Parameters
    ----------
    text : str
        Full document text

    Returns
    -------
    FrontmatterSplit
        The raw frontmatter (None if absent), the body, and the number of
        lines consumed

    Raises
    ------
    FrontmatterError
        If the opening delimiter is not followed by a closing one

    Examples
    --------
        >>> split_frontmatter("---\\ntitle: A\\n---\\nBody\\n")
        FrontmatterSplit(frontmatter='title: A\\n', body='Body\\n', line_count=3)

    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FRONTMATTER_DELIMITER:
        return FrontmatterSplit(None, text, 0)

    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") == FRONTMATTER_DELIMITER:
            frontmatter = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return FrontmatterSplit(frontmatter, body, index + 1)

    raise FrontmatterError("Frontmatter block is missing its closing '---' delimiter", line=1, column=1)


def parse_frontmatter(text: str) -> dict[str, Any]:
    """Parse frontmatter text into a mapping.

    Parameters
    ----------
    text : str
        YAML text without delimiters

    Returns
    -------
    dict
        Parsed mapping; empty for blank input

    Raises
    ------
    FrontmatterError
        If the YAML is invalid or is not a mapping. Line and column refer to
        the frontmatter text itself.

    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None
        problem = getattr(e, "problem", None) or str(e)
        raise FrontmatterError(f"Invalid frontmatter: {problem}", line=line, column=column, original_error=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(f"Frontmatter must be a mapping, got {type(data).__name__}")
    return data


def serialize_frontmatter(data: dict[str, Any]) -> str:
    """Serialize a mapping as a delimited frontmatter block.

    Examples
    --------
        >>> serialize_frontmatter({"title": "A"})
        '---\\ntitle: A\\n---\\n'

    """
    body = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False) if data else ""
    return f"{FRONTMATTER_DELIMITER}\n{body}{FRONTMATTER_DELIMITER}\n"


def frontmatter_title(text: str) -> Optional[str]:
    """Return the ``title`` entry of a frontmatter block, or None if it has none."""
    title = parse_frontmatter(text).get("title")
    if title is None:
        return None
    return str(title)
