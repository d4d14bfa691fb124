#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/utils/io_utils.py
"""I/O utilities for reading Markdown input and writing rendered output.

Input is always UTF-8 (an optional byte order mark is dropped). Output is
written as UTF-8 to paths and binary streams, and as ``str`` to text streams.

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from mdunwrap.exceptions import ParsingError

logger = logging.getLogger(__name__)


def decode_text(data: bytes) -> str:
    """Decode UTF-8 input, dropping a leading byte order mark.

    Parameters
    ----------
    data : bytes
        Raw input bytes

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    ParsingError
        If the bytes are not valid UTF-8

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParsingError(f"Input is not valid UTF-8: {e}", parsing_stage="decoding", original_error=e) from e


def read_text(source: Union[str, bytes, IO[str], IO[bytes]]) -> str:
    """Return Markdown text from a string, bytes or readable stream.

    A ``str`` is always treated as the document itself, never as a path.

    Parameters
    ----------
    source : str, bytes, IO[str] or IO[bytes]
        Markdown content or a stream to read it from

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    ParsingError
        If binary input is not valid UTF-8
    TypeError
        If the source type is not supported

    """
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return decode_text(bytes(source))
    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, bytes):
            return decode_text(data)
        return str(data)
    raise TypeError(f"Unsupported input type: {type(source)!r}")


def write_content(
    content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str], None]
) -> Union[StringIO, BytesIO, None]:
    """Write content to output destination or return as file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Can be text (str) or binary (bytes) data.
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO (for str) or BytesIO (for bytes)
        - str or Path: Writes content to file at that path
        - IO[bytes]: Writes content to binary file-like object
        - IO[str]: Writes content to text file-like object

    Returns
    -------
    StringIO, BytesIO, or None
        File-like object when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If output type is not supported or content type doesn't match file mode

    """
    if output is None:
        if isinstance(content, str):
            return StringIO(content)
        elif isinstance(content, bytes):
            return BytesIO(content)
        else:
            raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            # newline="" keeps "\n" as-is on every platform
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        elif isinstance(content, bytes):
            output_path.write_bytes(content)
        else:
            raise TypeError(f"Content must be str or bytes, got {type(content)}")
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return None

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            binary_output = cast(IO[bytes], output)
            if isinstance(content, str):
                binary_output.write(content.encode("utf-8"))
            elif isinstance(content, bytes):
                binary_output.write(content)
            else:
                raise TypeError(f"Content must be str or bytes, got {type(content)}")
        else:
            text_output = cast(IO[str], output)
            if isinstance(content, bytes):
                text_output.write(content.decode("utf-8"))
            elif isinstance(content, str):
                text_output.write(content)
            else:
                raise TypeError(f"Content must be str or bytes, got {type(content)}")
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["decode_text", "read_text", "write_content"]
