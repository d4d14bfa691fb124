#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown text into the mdunwrap AST using the mistune
CommonMark parser. mistune's token dictionaries are mapped onto node classes
that expose the attributes the unwrap renderer needs: list tightness, start
number and delimiter, fenced versus indented code, info strings, link
destinations and literal text.

Token types the converter does not model (those produced by optional mistune
plugins, for instance) are kept as custom nodes so nothing is silently lost.

"""

from __future__ import annotations

import logging
from typing import IO, Any, Callable, Union

import mistune
from mistune.util import unescape

from mdunwrap.ast import (
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
from mdunwrap.constants import ORDERED_LIST_DELIMITERS
from mdunwrap.exceptions import ParsingError
from mdunwrap.options.markdown import MarkdownParserOptions
from mdunwrap.parsers.base import BaseParser

logger = logging.getLogger(__name__)

# Tokens that carry no document content.
_SKIPPED_TOKENS = frozenset({"blank_line"})

_TokenHandler = Callable[[dict[str, Any]], Node]


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    With a plugin enabled:

        >>> options = MarkdownParserOptions(plugins=("strikethrough",))
        >>> doc = MarkdownToAstConverter(options).parse("~~gone~~")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._markdown = mistune.create_markdown(renderer=None, plugins=list(self.options.plugins))
        self._block_handlers: dict[str, _TokenHandler] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            # block_text is used for tight list items - treat like paragraph
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "thematic_break": self._process_thematic_break,
            "block_html": self._process_html_block,
        }
        self._inline_handlers: dict[str, _TokenHandler] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

    def parse(self, input_data: Union[str, bytes, IO[str], IO[bytes]]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, bytes, IO[str] or IO[bytes]
            Markdown content, UTF-8 bytes, or a readable stream

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If the input cannot be decoded or mistune fails on it

        """
        markdown_content = self._load_text_content(input_data)

        try:
            tokens, _state = self._markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Markdown parsing failed: {e}", parsing_stage="mistune", original_error=e) from e

        if not isinstance(tokens, list):
            raise ParsingError(
                f"Unexpected mistune result of type {type(tokens).__name__}", parsing_stage="mistune"
            )

        logger.debug("mistune produced %d top-level tokens", len(tokens))
        return Document(children=self._process_tokens(tokens))

    def _process_tokens(self, tokens: list[dict[str, Any]], inline: bool = False) -> list[Node]:
        """Process a list of mistune tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries
        inline : bool, default False
            Whether the tokens sit in inline context; decides the class of
            custom nodes made for unknown token types

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            node = self._process_token(token, inline)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any], inline: bool = False) -> Node | None:
        token_type = token.get("type", "")
        if token_type in _SKIPPED_TOKENS:
            return None

        handler = self._block_handlers.get(token_type) or self._inline_handlers.get(token_type)
        if handler is not None:
            return handler(token)
        return self._process_custom_token(token, inline)

    def _process_inline_tokens(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_tokens(children, inline=True)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        attrs = _attrs(token)
        level = attrs.get("level", 1)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, children=self._process_inline_tokens(token))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(children=self._process_inline_tokens(token))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        mistune marks fenced blocks with ``style == "fenced"`` and keeps the
        info string in ``attrs``; indented blocks have neither.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        """
        fenced = token.get("style") == "fenced" or "marker" in token
        info = _attrs(token).get("info")
        if not isinstance(info, str) or not info:
            info = None
        return CodeBlock(content=token.get("raw", ""), fenced=fenced, info_string=info)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        children = token.get("children", [])
        return BlockQuote(children=self._process_tokens(children) if isinstance(children, list) else [])

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight', 'bullet' and 'attrs'
            (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = _attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        if not isinstance(start, int) or start < 0:
            start = 1

        delimiter = token.get("bullet", ".") if ordered else "."
        if delimiter not in ORDERED_LIST_DELIMITERS:
            delimiter = "."

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items: list[Node] = []
        for child in children:
            if not isinstance(child, dict):
                continue
            if child.get("type") == "list_item":
                items.append(self._process_list_item(child))
            else:
                items.append(self._process_custom_token(child, inline=False))

        return List(
            ordered=ordered,
            start=start,
            delimiter=delimiter,
            tight=bool(token.get("tight", True)),
            children=items,
        )

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        children = token.get("children", [])
        return ListItem(children=self._process_tokens(children) if isinstance(children, list) else [])

    def _process_thematic_break(self, token: dict[str, Any]) -> ThematicBreak:
        return ThematicBreak()

    def _process_html_block(self, token: dict[str, Any]) -> HTMLBlock:
        return HTMLBlock(content=token.get("raw", ""))

    def _process_custom_token(self, token: dict[str, Any], inline: bool) -> Node:
        """Keep a token type the converter does not model as a custom node."""
        token_type = str(token.get("type", "")) or ("custom_inline" if inline else "custom_block")
        logger.debug("Keeping unmodelled mistune token %r as a custom node", token_type)

        children = token.get("children", [])
        converted = self._process_tokens(children, inline=inline) if isinstance(children, list) else []
        raw = token.get("raw")
        info = _attrs(token).get("info")
        node_class = CustomInline if inline else CustomBlock
        return node_class(
            name=token_type,
            children=converted,
            content=raw if isinstance(raw, str) else None,
            info_string=info if isinstance(info, str) else None,
        )

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token.

        mistune leaves entity and numeric character references undecoded in
        text. Backslash escapes arrive as separate tokens, so an escaped
        ``\\&amp;`` stays literal.
        """
        raw = token.get("raw", "")
        return Text(content=unescape(raw) if isinstance(raw, str) else raw)

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(children=self._process_inline_tokens(token))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(children=self._process_inline_tokens(token))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = _attrs(token)
        return Link(url=attrs.get("url", ""), children=self._process_inline_tokens(token), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text stays as inline children."""
        attrs = _attrs(token)
        return Image(url=attrs.get("url", ""), children=self._process_inline_tokens(token), title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle linebreak token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle softbreak token."""
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))


def _attrs(token: dict[str, Any]) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    """Convert Markdown content to AST Document.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown content to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)


__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
