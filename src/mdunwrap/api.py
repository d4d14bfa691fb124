"""The exported API functions for unwrapping Markdown."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdunwrap/api.py
import logging
from pathlib import Path
from typing import IO, Union

from mdunwrap.ast.nodes import Document
from mdunwrap.exceptions import FileAccessError, OutputWriteError
from mdunwrap.exceptions import FileNotFoundError as MdunwrapFileNotFoundError
from mdunwrap.options.markdown import MarkdownParserOptions, UnwrapRendererOptions
from mdunwrap.parsers.markdown import MarkdownToAstConverter
from mdunwrap.renderers.unwrap import UnwrapRenderer
from mdunwrap.utils.io_utils import decode_text
from mdunwrap.utils.timing import debug_timer

logger = logging.getLogger(__name__)


def to_ast(
    source: Union[str, bytes, IO[str], IO[bytes]],
    parser_options: MarkdownParserOptions | None = None,
) -> Document:
    """Parse Markdown into an AST document.

    Parameters
    ----------
    source : str, bytes, IO[str] or IO[bytes]
        Markdown text, UTF-8 bytes, or a readable stream
    parser_options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    """
    with debug_timer(logger, "Parsing"):
        return MarkdownToAstConverter(parser_options).parse(source)


def from_ast(doc: Document, renderer_options: UnwrapRendererOptions | None = None) -> str:
    """Render an AST document as canonical, unwrapped Markdown.

    Parameters
    ----------
    doc : Document
        AST document node
    renderer_options : UnwrapRendererOptions or None, default = None
        Renderer configuration

    Returns
    -------
    str
        Canonical Markdown text

    """
    with debug_timer(logger, "Rendering"):
        return UnwrapRenderer(renderer_options).render_to_string(doc)


def unwrap(
    source: Union[str, bytes, IO[str], IO[bytes]],
    *,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: UnwrapRendererOptions | None = None,
) -> str:
    """Remove line-wrapping from a Markdown document.

    Soft line breaks inside paragraphs become single spaces, so each
    paragraph ends up on one line. Block structure, inline formatting, code
    blocks and hard line breaks are preserved, and the output is normalised to
    one canonical spelling.

    Parameters
    ----------
    source : str, bytes, IO[str] or IO[bytes]
        Markdown text, UTF-8 bytes, or a readable stream. A ``str`` is always
        treated as the document itself, never as a path.
    parser_options : MarkdownParserOptions or None, default = None
        Parser configuration
    renderer_options : UnwrapRendererOptions or None, default = None
        Renderer configuration

    Returns
    -------
    str
        Canonical Markdown text

    Raises
    ------
    ParsingError
        If binary input is not valid UTF-8 or the parser fails

    Examples
    --------
        >>> unwrap("A paragraph that was\\nwrapped at some width.\\n")
        'A paragraph that was wrapped at some width.\\n'

    """
    return from_ast(to_ast(source, parser_options), renderer_options)


def unwrap_file(
    path: Union[str, Path],
    *,
    write: bool = False,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: UnwrapRendererOptions | None = None,
) -> str:
    """Unwrap a Markdown file, optionally rewriting it in place.

    Parameters
    ----------
    path : str or Path
        File to read
    write : bool, default False
        When true the file is truncated and the unwrapped text written back
    parser_options : MarkdownParserOptions or None, default = None
        Parser configuration
    renderer_options : UnwrapRendererOptions or None, default = None
        Renderer configuration

    Returns
    -------
    str
        Canonical Markdown text

    Raises
    ------
    mdunwrap.exceptions.FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be opened (permissions, directories)
    ParsingError
        If the file is not valid UTF-8
    OutputWriteError
        If rewriting the file fails

    """
    file_path = Path(path)
    mode = "r+b" if write else "rb"

    try:
        f = open(file_path, mode)
    except FileNotFoundError as e:
        raise MdunwrapFileNotFoundError(str(file_path), original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(file_path), message=f"{file_path}: {e.strerror or e}", original_error=e) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise FileAccessError(str(file_path), message=f"{file_path}: {e.strerror or e}", original_error=e) from e

        output = from_ast(to_ast(decode_text(data), parser_options), renderer_options)

        if write:
            try:
                f.seek(0)
                f.truncate()
                f.write(output.encode("utf-8"))
            except OSError as e:
                raise OutputWriteError(str(file_path), original_error=e) from e
            logger.info("Rewrote %s", file_path)

    return output


__all__ = ["from_ast", "to_ast", "unwrap", "unwrap_file"]
