#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdunwrap/renderers/__init__.py
"""AST renderers.

Available renderers:
- UnwrapRenderer: Render to canonical Markdown with line-wrapping removed

Examples
--------
Render a parsed document:

    >>> from mdunwrap.parsers import markdown_to_ast
    >>> from mdunwrap.renderers import UnwrapRenderer
    >>> doc = markdown_to_ast("one\\ntwo\\n")
    >>> UnwrapRenderer().render_to_string(doc)
    'one two\\n'

"""

from mdunwrap.renderers.base import BaseRenderer
from mdunwrap.renderers.prefix import PrefixStack
from mdunwrap.renderers.unwrap import RenderState, UnwrapRenderer, render_markdown

__all__ = ["BaseRenderer", "PrefixStack", "RenderState", "UnwrapRenderer", "render_markdown"]
