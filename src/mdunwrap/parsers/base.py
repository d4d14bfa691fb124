#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/parsers/base.py
"""Base class for document parsers.

A parser turns source text into a :class:`~mdunwrap.ast.Document`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Union

from mdunwrap.ast import Document
from mdunwrap.exceptions import InvalidOptionsError
from mdunwrap.options.base import BaseParserOptions
from mdunwrap.utils.io_utils import read_text


class BaseParser(ABC):
    """Abstract base class for all parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser-specific options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: Union[str, bytes, IO[str], IO[bytes]]) -> Document:
        """Parse input into an AST Document.

        Parameters
        ----------
        input_data : str, bytes, IO[str] or IO[bytes]
            Document content or a readable stream

        Returns
        -------
        Document
            AST document node

        """

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

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes, IO[str], IO[bytes]]) -> str:
        """Load text from a string, UTF-8 bytes or a readable stream."""
        return read_text(input_data)
