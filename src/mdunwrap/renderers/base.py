#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from. A
renderer turns a :class:`~mdunwrap.ast.Document` into text and can write the
result to a path or stream.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdunwrap.ast import Document
from mdunwrap.exceptions import InvalidOptionsError, OutputWriteError
from mdunwrap.options.base import BaseRendererOptions
from mdunwrap.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            File path or open stream; binary streams receive UTF-8

        Raises
        ------
        OutputWriteError
            If a file path cannot be written

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

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

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Raises
        ------
        OutputWriteError
            If the destination is a path that cannot be written

        """
        try:
            write_content(text, output)
        except OSError as e:
            if isinstance(output, (str, Path)):
                raise OutputWriteError(str(output), original_error=e) from e
            raise
