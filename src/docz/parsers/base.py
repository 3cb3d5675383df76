#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/parsers/base.py
"""Base classes for document parsers.

A parser is a deterministic function from the bytes of one source file to a
Node tree. Parsers never read files themselves; loading sources is the build
service's job. Malformed input fails with ``ParseError`` and never yields a
partially built tree.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from docz.ast import Node, Span
from docz.exceptions import InvalidOptionsError, ParseError
from docz.options.base import BaseParserOptions
from docz.utils.text import offset_to_line_col

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from docz.ast import Document, Paragraph, Text
        >>> from docz.parsers.base import BaseParser
        >>>
        >>> class PlainTextParser(BaseParser):
        ...     def parse(self, data):
        ...         text = self._decode(data)
        ...         return Document(children=[Paragraph(children=[Text(value=text)])])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions = options or BaseParserOptions()

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, data: bytes) -> Node:
        """Parse source bytes into an AST.

        Parameters
        ----------
        data : bytes
            Raw content of one source file

        Returns
        -------
        Node
            Root of the parsed tree, normally a Document

        Raises
        ------
        ParseError
            If the input is malformed. The first problem found is reported.

        """
        raise NotImplementedError

    def _decode(self, data: bytes) -> str:
        """Decode source bytes, reporting the position of the first invalid byte.

        Raises
        ------
        ParseError
            If ``data`` is not bytes or cannot be decoded with the configured encoding

        """
        if not isinstance(data, (bytes, bytearray)):
            raise ParseError(f"Parser input must be bytes, got {type(data).__name__}")
        try:
            return bytes(data).decode(self.options.encoding)
        except UnicodeDecodeError as e:
            prefix = bytes(data[: e.start]).decode(self.options.encoding, errors="replace")
            line, column = offset_to_line_col(prefix, len(prefix))
            raise ParseError(
                f"Invalid {self.options.encoding} byte 0x{data[e.start]:02x}", line=line, column=column, original_error=e
            ) from e
        except LookupError as e:
            raise ParseError(f"Unknown encoding: {self.options.encoding}", original_error=e) from e


def text_span(text: str, first_line: int = 1) -> Optional[Span]:
    """Return the span covering ``text``, placed at ``first_line``; None for empty text.

    The end column is the column of the last character of the last non-empty
    line, so a trailing newline does not open an extra line.

    """
    lines = text.splitlines()
    if not lines:
        return None
    last = len(lines)
    while last > 1 and not lines[last - 1]:
        last -= 1
    return Span(first_line, 1, first_line + last - 1, max(1, len(lines[last - 1])))
