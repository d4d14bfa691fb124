#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the Markdown parser and the unwrap renderer.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from mdunwrap.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdunwrap.options.markdown import MarkdownParserOptions, UnwrapRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "UnwrapRendererOptions",
]
