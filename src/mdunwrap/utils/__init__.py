#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/utils/__init__.py
"""Utility modules for mdunwrap.

This package contains text escaping and input/output helpers shared by the
parser, the renderer and the CLI.
"""

from mdunwrap.utils.escape import escape_text, order_escape_sequences
from mdunwrap.utils.io_utils import decode_text, read_text, write_content
from mdunwrap.utils.timing import debug_timer

__all__ = [
    "debug_timer",
    "decode_text",
    "escape_text",
    "order_escape_sequences",
    "read_text",
    "write_content",
]
