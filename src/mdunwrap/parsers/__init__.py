#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/parsers/__init__.py
"""Parsers turning source text into the mdunwrap AST."""

from mdunwrap.parsers.base import BaseParser
from mdunwrap.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
