#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and unwrap rendering.

Defaults reproduce the canonical output exactly: ``-`` bullets, ``*``
emphasis, backtick fences and ``<null>`` for text nodes without a literal.
"""
# src/mdunwrap/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdunwrap.constants import (
    BULLET_SYMBOLS,
    CODE_FENCE_CHARS,
    CODE_FENCE_LENGTH,
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_NULL_PLACEHOLDER,
    EMPHASIS_SYMBOLS,
    MISTUNE_PLUGINS,
    BulletSymbol,
    CodeFenceChar,
    EmphasisSymbol,
)
from mdunwrap.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    The parser is plain CommonMark by default. Extra mistune plugins can be
    switched on; the nodes they produce are not modelled by mdunwrap and come
    out of the renderer as inert placeholders.

    Parameters
    ----------
    plugins : tuple of str, default ()
        Names of mistune plugins to enable (e.g. ``"strikethrough"``).

    """

    plugins: tuple[str, ...] = field(
        default=(),
        metadata={
            "help": "Extra mistune plugins to enable; their nodes render as placeholders",
            "choices": sorted(MISTUNE_PLUGINS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Normalize and validate the plugin list.

        Raises
        ------
        ValueError
            If an unknown plugin name is given.

        """
        if isinstance(self.plugins, str):
            object.__setattr__(self, "plugins", (self.plugins,))
        else:
            object.__setattr__(self, "plugins", tuple(self.plugins))

        unknown = sorted(set(self.plugins) - MISTUNE_PLUGINS)
        if unknown:
            raise ValueError(f"Unknown mistune plugin(s): {', '.join(unknown)}")


@dataclass(frozen=True)
class UnwrapRendererOptions(BaseRendererOptions):
    r"""Configuration options for the unwrap renderer.

    Parameters
    ----------
    bullet_symbol : {"-", "\*", "+"}, default "-"
        Marker written before every bulleted list item.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Delimiter for emphasis; strong emphasis doubles it.
    code_fence_char : {"`", "~"}, default "`"
        Character repeated three times to open and close fenced code blocks.
    null_placeholder : str, default "<null>"
        Text emitted for text or code nodes that carry no literal.

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for bulleted list items", "choices": list(BULLET_SYMBOLS), "importance": "core"},
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={
            "help": "Symbol to use for emphasis/italic formatting",
            "choices": list(EMPHASIS_SYMBOLS),
            "importance": "core",
        },
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={
            "help": "Character used for fenced code blocks",
            "choices": list(CODE_FENCE_CHARS),
            "importance": "core",
        },
    )
    null_placeholder: str = field(
        default=DEFAULT_NULL_PLACEHOLDER,
        metadata={"help": "Text emitted for text nodes without a literal", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate symbol choices.

        Raises
        ------
        ValueError
            If any symbol is outside its allowed set.

        """
        if self.bullet_symbol not in BULLET_SYMBOLS:
            raise ValueError(f"bullet_symbol must be one of {BULLET_SYMBOLS}, got {self.bullet_symbol!r}")
        if self.emphasis_symbol not in EMPHASIS_SYMBOLS:
            raise ValueError(f"emphasis_symbol must be one of {EMPHASIS_SYMBOLS}, got {self.emphasis_symbol!r}")
        if self.code_fence_char not in CODE_FENCE_CHARS:
            raise ValueError(f"code_fence_char must be one of {CODE_FENCE_CHARS}, got {self.code_fence_char!r}")

    @property
    def strong_symbol(self) -> str:
        """Delimiter for strong emphasis."""
        return self.emphasis_symbol * 2

    @property
    def code_fence(self) -> str:
        """Opening and closing fence for fenced code blocks."""
        return self.code_fence_char * CODE_FENCE_LENGTH
