#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy produced by the Markdown parser and
consumed by the unwrap renderer. Each node carries a ``kind`` tag, owns its
ordered ``children`` and keeps a weak back-reference to its parent.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Paragraph, Heading, CodeBlock, List, ListItem
    - BlockQuote, ThematicBreak, HTMLBlock, CustomBlock

Inline nodes:
    - Text, LineBreak (hard or soft), Emphasis, Strong, Code
    - Link, Image, HTMLInline, CustomInline

The parent reference is only ever read, for example by a list item asking
whether its enclosing list is tight. It does not keep the parent alive and
is never used to drive traversal.

"""

from __future__ import annotations

import weakref
from abc import ABC
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Sequence

from mdunwrap.constants import BLOCK_KINDS, ORDERED_LIST_DELIMITERS


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses are dataclasses. Container subclasses declare a ``children``
    field; leaf subclasses inherit the empty default and set ``is_leaf``.

    Attributes
    ----------
    kind : str
        Node kind tag (e.g. ``"paragraph"``, ``"emph"``)
    is_leaf : bool
        True when the walker reports a single event for the node
    children : sequence of Node
        Owned child nodes in document order

    """

    kind: ClassVar[str] = ""
    is_leaf: ClassVar[bool] = False
    children: Sequence[Node] = ()

    _parent: Optional[weakref.ReferenceType[Node]] = None
    # Position among the parent's children, recorded when the child is attached.
    _index: int = 0

    def __post_init__(self) -> None:
        for index, child in enumerate(self.children):
            child._parent = weakref.ref(self)
            child._index = index

    @property
    def parent(self) -> Optional[Node]:
        """Return the enclosing node, or None for a root or detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def literal(self) -> Optional[str]:
        """Plain literal text for leaf text-like nodes, None otherwise."""
        return None

    @property
    def info(self) -> Optional[str]:
        """Info string for code blocks and custom nodes, None otherwise."""
        return None

    @property
    def is_block(self) -> bool:
        """Whether the node takes part in blank-line separation."""
        return self.kind in BLOCK_KINDS

    def append_child(self, child: Node) -> Node:
        """Append ``child`` and point its parent reference at this node.

        Parameters
        ----------
        child : Node
            Node to adopt

        Returns
        -------
        Node
            The appended child

        Raises
        ------
        TypeError
            If this node is a leaf and cannot own children

        """
        if self.is_leaf or not isinstance(self.children, list):
            raise TypeError(f"{type(self).__name__} nodes cannot have children")
        child._index = len(self.children)
        self.children.append(child)
        child._parent = weakref.ref(self)
        return child

    def iter_ancestors(self) -> Iterator[Node]:
        """Yield enclosing nodes from the parent up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    kind: ClassVar[str] = "document"

    children: list[Node] = field(default_factory=list)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[str] = "paragraph"

    children: list[Node] = field(default_factory=list)


@dataclass
class Heading(Node):
    """Heading node (ATX or setext in the source; always ATX on output).

    Parameters
    ----------
    level : int
        Heading level, 1 through 6
    children : list of Node, default = empty list
        Inline content of the heading

    """

    kind: ClassVar[str] = "heading"

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()


@dataclass
class CodeBlock(Node):
    """Code block node, fenced or indented.

    Parameters
    ----------
    content : str
        Literal code, normally terminated by a newline
    fenced : bool, default = True
        False for indented code blocks
    info_string : str or None, default = None
        Info string following the opening fence

    """

    kind: ClassVar[str] = "code_block"
    is_leaf: ClassVar[bool] = True

    content: Optional[str] = ""
    fenced: bool = True
    info_string: Optional[str] = None

    @property
    def literal(self) -> Optional[str]:
        return self.content

    @property
    def info(self) -> Optional[str]:
        return self.info_string


@dataclass
class List(Node):
    """List node holding ListItem children.

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists
    start : int, default = 1
        Number of the first item in an ordered list
    delimiter : str, default = "."
        Character following the number, ``.`` or ``)``
    tight : bool, default = True
        True when items are not separated by blank lines
    children : list of ListItem, default = empty list
        The list items

    """

    kind: ClassVar[str] = "list"

    ordered: bool = False
    start: int = 1
    delimiter: str = "."
    tight: bool = True
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.delimiter not in ORDERED_LIST_DELIMITERS:
            raise ValueError(f"List delimiter must be one of {ORDERED_LIST_DELIMITERS}, got {self.delimiter!r}")
        if self.start < 0:
            raise ValueError(f"List start must be non-negative, got {self.start}")
        super().__post_init__()


@dataclass
class ListItem(Node):
    """List item node.

    List attributes are read through the parent :class:`List`; a detached
    item reports a tight bullet list starting at 1.
    """

    kind: ClassVar[str] = "item"

    children: list[Node] = field(default_factory=list)

    def _list(self) -> Optional[List]:
        parent = self.parent
        return parent if isinstance(parent, List) else None

    @property
    def list_type(self) -> str:
        """``"ordered"`` or ``"bullet"``."""
        owner = self._list()
        return "ordered" if owner is not None and owner.ordered else "bullet"

    @property
    def list_tight(self) -> bool:
        owner = self._list()
        return owner.tight if owner is not None else True

    @property
    def list_delimiter(self) -> str:
        owner = self._list()
        return owner.delimiter if owner is not None else "."

    @property
    def list_start(self) -> int:
        owner = self._list()
        return owner.start if owner is not None else 1

    @property
    def number(self) -> int:
        """Ordinal of this item: the list start plus its position."""
        owner = self._list()
        if owner is None:
            return 1
        return owner.start + self._index


@dataclass
class BlockQuote(Node):
    """Block quote node containing block-level children."""

    kind: ClassVar[str] = "block_quote"

    children: list[Node] = field(default_factory=list)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    kind: ClassVar[str] = "thematic_break"
    is_leaf: ClassVar[bool] = True


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node."""

    kind: ClassVar[str] = "html_block"
    is_leaf: ClassVar[bool] = True

    content: Optional[str] = ""

    @property
    def literal(self) -> Optional[str]:
        return self.content


@dataclass
class CustomBlock(Node):
    """Block node of a kind mdunwrap does not model (e.g. a plugin table).

    Parameters
    ----------
    name : str
        Kind tag reported for the node
    children : list of Node, default = empty list
        Converted child nodes
    content : str or None, default = None
        Raw text carried by the source token, if any
    info_string : str or None, default = None
        Extra descriptive text, if any

    """

    name: str = "custom_block"
    children: list[Node] = field(default_factory=list)
    content: Optional[str] = None
    info_string: Optional[str] = None

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.name

    @property
    def is_leaf(self) -> bool:  # type: ignore[override]
        return not self.children

    @property
    def is_block(self) -> bool:
        return True

    @property
    def literal(self) -> Optional[str]:
        return self.content

    @property
    def info(self) -> Optional[str]:
        return self.info_string


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node. ``content`` may be None when the source had none."""

    kind: ClassVar[str] = "text"
    is_leaf: ClassVar[bool] = True

    content: Optional[str] = ""

    @property
    def literal(self) -> Optional[str]:
        return self.content


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (a plain newline inside a paragraph),
        False for a hard break (trailing spaces or backslash)

    """

    is_leaf: ClassVar[bool] = True

    soft: bool = False

    @property
    def kind(self) -> str:  # type: ignore[override]
        return "softbreak" if self.soft else "linebreak"


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    kind: ClassVar[str] = "emph"

    children: list[Node] = field(default_factory=list)


@dataclass
class Strong(Node):
    """Strong emphasis (bold) node."""

    kind: ClassVar[str] = "strong"

    children: list[Node] = field(default_factory=list)


@dataclass
class Code(Node):
    """Inline code span node."""

    kind: ClassVar[str] = "code"
    is_leaf: ClassVar[bool] = True

    content: Optional[str] = ""

    @property
    def literal(self) -> Optional[str]:
        return self.content


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str or None, default = None
        Resolved link destination
    children : list of Node, default = empty list
        Link text
    title : str or None, default = None
        Optional link title (not re-emitted)

    """

    kind: ClassVar[str] = "link"

    url: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    @property
    def destination(self) -> Optional[str]:
        return self.url


@dataclass
class Image(Node):
    """Image node; the alt text is held as inline children."""

    kind: ClassVar[str] = "image"

    url: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    @property
    def destination(self) -> Optional[str]:
        return self.url


@dataclass
class HTMLInline(Node):
    """Raw inline HTML node."""

    kind: ClassVar[str] = "html_inline"
    is_leaf: ClassVar[bool] = True

    content: Optional[str] = ""

    @property
    def literal(self) -> Optional[str]:
        return self.content


@dataclass
class CustomInline(Node):
    """Inline node of a kind mdunwrap does not model (e.g. strikethrough)."""

    name: str = "custom_inline"
    children: list[Node] = field(default_factory=list)
    content: Optional[str] = None
    info_string: Optional[str] = None

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.name

    @property
    def is_leaf(self) -> bool:  # type: ignore[override]
        return not self.children

    @property
    def literal(self) -> Optional[str]:
        return self.content

    @property
    def info(self) -> Optional[str]:
        return self.info_string
