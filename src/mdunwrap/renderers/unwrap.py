#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/renderers/unwrap.py
"""Canonical Markdown rendering with line-wrapping removed.

This module provides the UnwrapRenderer class which turns an AST back into
Markdown text. Soft line breaks become single spaces, so every paragraph ends
up on one logical line, while block structure, inline formatting and code
blocks are preserved.

The renderer consumes the flat event stream produced by
:func:`mdunwrap.ast.walk` in a single forward pass. All mutable state lives in
a :class:`RenderState` created for each render: the output buffer, the stack
of line prefixes contributed by open list items and block quotes, and a flag
marking the first block inside the current container.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from mdunwrap.ast.nodes import CodeBlock, Document, Heading, ListItem, Node, ThematicBreak
from mdunwrap.ast.walker import WalkEvent, walk
from mdunwrap.constants import BLOCK_QUOTE_MARKER, INDENTED_CODE_PREFIX, PLACEHOLDER_NONE, THEMATIC_BREAK
from mdunwrap.options.markdown import UnwrapRendererOptions
from mdunwrap.renderers.base import BaseRenderer
from mdunwrap.renderers.prefix import PrefixStack
from mdunwrap.utils.escape import escape_text

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    """Mutable state of a single render pass.

    Parameters
    ----------
    parts : list of str
        Output fragments; only ever appended to
    prefix : PrefixStack
        Line prefixes of the open containers
    first_block : bool
        True until the first block inside the current container is entered

    """

    parts: list[str] = field(default_factory=list)
    prefix: PrefixStack = field(default_factory=PrefixStack)
    first_block: bool = True

    def emit(self, *fragments: str) -> None:
        self.parts.extend(fragments)

    def getvalue(self) -> str:
        return "".join(self.parts)


_Handler = Callable[[WalkEvent, RenderState], None]


class UnwrapRenderer(BaseRenderer):
    """Render an AST to canonical, unwrapped Markdown.

    Parameters
    ----------
    options : UnwrapRendererOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from mdunwrap.ast import Document, LineBreak, Paragraph, Text
        >>> doc = Document(children=[
        ...     Paragraph(children=[Text(content="one"), LineBreak(soft=True), Text(content="two")])
        ... ])
        >>> UnwrapRenderer().render_to_string(doc)
        'one two\\n'

    """

    def __init__(self, options: UnwrapRendererOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, UnwrapRendererOptions, "unwrap")
        options = options or UnwrapRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: UnwrapRendererOptions = options
        self._handlers: dict[str, _Handler] = {
            "document": self._render_document,
            "paragraph": self._render_paragraph,
            "heading": self._render_heading,
            "thematic_break": self._render_thematic_break,
            "code_block": self._render_code_block,
            "list": self._render_list,
            "item": self._render_item,
            "block_quote": self._render_block_quote,
            "text": self._render_text,
            "softbreak": self._render_softbreak,
            "linebreak": self._render_linebreak,
            "emph": self._render_emph,
            "strong": self._render_strong,
            "code": self._render_code,
            "link": self._render_link,
            "image": self._render_image,
        }

    def render_to_string(self, doc: Node) -> str:
        """Render a document AST to Markdown.

        Parameters
        ----------
        doc : Node
            Root of the tree, normally a :class:`Document`

        Returns
        -------
        str
            Canonical Markdown text

        """
        return self.render_events(walk(doc))

    def render_events(self, events: Iterable[WalkEvent]) -> str:
        """Render a pre-computed walk event stream.

        Parameters
        ----------
        events : iterable of WalkEvent
            Events in depth-first order, as produced by :func:`walk`

        Returns
        -------
        str
            Canonical Markdown text

        """
        state = RenderState()
        for event in events:
            self._dispatch(event, state)
        if state.prefix:
            logger.debug("Event stream ended with %d open container(s)", state.prefix.depth)
        return state.getvalue()

    def _dispatch(self, event: WalkEvent, state: RenderState) -> None:
        node = event.node
        if event.entering and node.is_block:
            self._separate_block(node, state)
        handler = self._handlers.get(node.kind)
        if handler is None:
            self._render_placeholder(event, state)
        else:
            handler(event, state)

    # ------------------------------------------------------------------
    # Block boundaries
    # ------------------------------------------------------------------

    @staticmethod
    def _separate_block(node: Node, state: RenderState) -> None:
        """Emit the separator that precedes a sibling block, if any.

        Blocks inside a tight list continue on the next line under the
        current prefix; everything else is preceded by a blank line.
        """
        if state.first_block:
            state.first_block = False
            return
        if _in_tight_list(node):
            state.emit(state.prefix.current())
            return
        state.emit(state.prefix.trimmed_for_blank_line(), "\n", state.prefix.current())

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def _render_document(self, event: WalkEvent, state: RenderState) -> None:
        pass

    def _render_paragraph(self, event: WalkEvent, state: RenderState) -> None:
        if not event.entering:
            state.emit("\n")

    def _render_heading(self, event: WalkEvent, state: RenderState) -> None:
        if event.entering:
            level = event.node.level if isinstance(event.node, Heading) else 1
            state.emit("#" * level, " ")
        else:
            state.emit("\n")

    def _render_thematic_break(self, event: WalkEvent, state: RenderState) -> None:
        state.emit(THEMATIC_BREAK, "\n")

    def _render_code_block(self, event: WalkEvent, state: RenderState) -> None:
        """Re-emit a code block line by line under the current prefix.

        The first line of an indented block follows the prefix or list
        marker already written, so it gets no prefix of its own.
        """
        node = event.node
        fenced = node.fenced if isinstance(node, CodeBlock) else True
        fence = self.options.code_fence
        prefix = state.prefix

        if fenced:
            state.emit(fence, node.info or "", "\n")

        contents = node.literal or ""
        if contents.endswith("\n"):
            contents = contents[:-1]

        if node.literal:
            first = True
            for line in contents.split("\n"):
                if line == "":
                    if not first or fenced:
                        state.emit(prefix.trimmed_for_blank_line())
                    else:
                        first = False
                    state.emit("\n")
                    continue

                if not first or fenced:
                    state.emit(prefix.current())
                else:
                    first = False
                if not fenced:
                    state.emit(INDENTED_CODE_PREFIX)
                state.emit(line, "\n")

        if fenced:
            state.emit(prefix.current(), fence, "\n")

    def _render_list(self, event: WalkEvent, state: RenderState) -> None:
        state.first_block = event.entering

    def _render_item(self, event: WalkEvent, state: RenderState) -> None:
        node = event.node
        if not event.entering:
            state.first_block = False
            state.prefix.pop()
            return

        if isinstance(node, ListItem) and node.list_type == "ordered":
            numbering = str(node.number)
            state.emit(numbering, node.list_delimiter, " ")
            state.prefix.push(" " * (len(numbering) + 2))
        else:
            state.emit(self.options.bullet_symbol, " ")
            state.prefix.push("  ")
        state.first_block = True

    def _render_block_quote(self, event: WalkEvent, state: RenderState) -> None:
        if event.entering:
            state.emit(BLOCK_QUOTE_MARKER)
            state.prefix.push(BLOCK_QUOTE_MARKER)
            state.first_block = True
        else:
            state.prefix.pop()
            state.first_block = False

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def _render_text(self, event: WalkEvent, state: RenderState) -> None:
        literal = event.node.literal
        if literal is None:
            state.emit(self.options.null_placeholder)
        else:
            state.emit(escape_text(literal))

    def _render_softbreak(self, event: WalkEvent, state: RenderState) -> None:
        state.emit(" ")

    def _render_linebreak(self, event: WalkEvent, state: RenderState) -> None:
        state.emit("\\\n", state.prefix.current())

    def _render_emph(self, event: WalkEvent, state: RenderState) -> None:
        state.emit(self.options.emphasis_symbol)

    def _render_strong(self, event: WalkEvent, state: RenderState) -> None:
        state.emit(self.options.strong_symbol)

    def _render_code(self, event: WalkEvent, state: RenderState) -> None:
        literal = event.node.literal
        state.emit("`", self.options.null_placeholder if literal is None else literal, "`")

    def _render_link(self, event: WalkEvent, state: RenderState) -> None:
        if event.entering:
            state.emit("[")
        else:
            state.emit("](", _destination(event.node), ")")

    def _render_image(self, event: WalkEvent, state: RenderState) -> None:
        if event.entering:
            state.emit("![")
        else:
            state.emit("](", _destination(event.node), ")")

    # ------------------------------------------------------------------
    # Fallback
    # ------------------------------------------------------------------

    def _render_placeholder(self, event: WalkEvent, state: RenderState) -> None:
        """Render an unhandled node kind as inert ``<kind literal (info)>`` text."""
        node = event.node
        if event.entering:
            logger.debug("No renderer for node kind %r; emitting placeholder", node.kind)
        state.emit(f"<{node.kind} {_show(node.literal)} ({_show(node.info)})>")


def _in_tight_list(node: Node) -> bool:
    if isinstance(node, ListItem):
        return node.list_tight
    # A thematic break directly under a paragraph would read as a setext underline.
    if isinstance(node, ThematicBreak):
        return False
    parent = node.parent
    return isinstance(parent, ListItem) and parent.list_tight


def _destination(node: Node) -> str:
    return getattr(node, "destination", None) or ""


def _show(value: Optional[str]) -> str:
    return PLACEHOLDER_NONE if value is None else value


def render_markdown(doc: Document, options: UnwrapRendererOptions | None = None) -> str:
    """Render ``doc`` with a fresh :class:`UnwrapRenderer`."""
    return UnwrapRenderer(options).render_to_string(doc)


__all__ = ["RenderState", "UnwrapRenderer", "render_markdown"]
