"""mdunwrap - remove line-wrapping from Markdown documents.

mdunwrap parses CommonMark, walks the resulting syntax tree and re-emits the
document in one canonical spelling where every paragraph occupies a single
logical line. Soft line breaks become spaces; block structure, inline
formatting, code blocks and hard line breaks are preserved.

Requirements
------------
- Python 3.10+
- mistune 3 for CommonMark parsing

Examples
--------
Unwrap a string:

    >>> from mdunwrap import unwrap
    >>> unwrap("one\\ntwo\\n")
    'one two\\n'

Rewrite a file in place:

    >>> from mdunwrap import unwrap_file
    >>> unwrap_file("README.md", write=True)

Work with the AST directly:

    >>> from mdunwrap import to_ast, from_ast
    >>> doc = to_ast("- a\\n- b\\n")
    >>> from_ast(doc)
    '- a\\n- b\\n'

See Also
--------
mdunwrap.ast : AST node definitions and the event walker
mdunwrap.renderers : the unwrap renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdunwrap requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdunwrap.api import from_ast, to_ast, unwrap, unwrap_file
from mdunwrap.ast import Document, WalkEvent, walk
from mdunwrap.exceptions import MdunwrapError, ParsingError, RenderingError
from mdunwrap.options import MarkdownParserOptions, UnwrapRendererOptions
from mdunwrap.parsers import markdown_to_ast
from mdunwrap.renderers import UnwrapRenderer

__all__ = [
    "__version__",
    "unwrap",
    "unwrap_file",
    "to_ast",
    "from_ast",
    "markdown_to_ast",
    "walk",
    "WalkEvent",
    "Document",
    "UnwrapRenderer",
    "MarkdownParserOptions",
    "UnwrapRendererOptions",
    "MdunwrapError",
    "ParsingError",
    "RenderingError",
]
