#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/ast/__init__.py
"""Abstract Syntax Tree for Markdown documents.

The tree is built by :mod:`mdunwrap.parsers.markdown` and walked as a flat
event stream by :func:`walk`.

"""

from mdunwrap.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    CustomBlock,
    CustomInline,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from mdunwrap.ast.walker import WalkEvent, walk

__all__ = [
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "CodeBlock",
    "List",
    "ListItem",
    "BlockQuote",
    "ThematicBreak",
    "HTMLBlock",
    "CustomBlock",
    "Text",
    "LineBreak",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "HTMLInline",
    "CustomInline",
    "WalkEvent",
    "walk",
]
