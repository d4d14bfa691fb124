#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/constants.py
"""Constants and default values shared across mdunwrap.

This module centralizes the fixed tables used by the renderer (escape
sequences, block kinds, placeholder text) together with the defaults for the
parser and renderer options and the CLI configuration layer.

"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Node kinds
# =============================================================================

NodeKind = Literal[
    "document",
    "paragraph",
    "heading",
    "code_block",
    "list",
    "item",
    "block_quote",
    "thematic_break",
    "html_block",
    "custom_block",
    "text",
    "linebreak",
    "softbreak",
    "emph",
    "strong",
    "code",
    "link",
    "image",
    "html_inline",
    "custom_inline",
]

# Kinds that take part in blank-line separation. ``document`` is excluded.
BLOCK_KINDS: frozenset[str] = frozenset(
    {
        "block_quote",
        "code_block",
        "custom_block",
        "heading",
        "html_block",
        "item",
        "list",
        "paragraph",
        "thematic_break",
    }
)

# =============================================================================
# Escaping
# =============================================================================

# Markdown-significant sequences escaped in literal text, listed in the order
# they are tested: longest first, then table order.
ESCAPE_SEQUENCES: tuple[str, ...] = (
    "![",
    "#",
    "&",
    "[",
    "*",
    "_",
    "|",
    "\\",
    "<",
    "`",
)

# =============================================================================
# Rendering
# =============================================================================

BulletSymbol = Literal["-", "*", "+"]
EmphasisSymbol = Literal["*", "_"]
CodeFenceChar = Literal["`", "~"]

DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_NULL_PLACEHOLDER = "<null>"

BULLET_SYMBOLS: tuple[str, ...] = ("-", "*", "+")
EMPHASIS_SYMBOLS: tuple[str, ...] = ("*", "_")
CODE_FENCE_CHARS: tuple[str, ...] = ("`", "~")

CODE_FENCE_LENGTH = 3
INDENTED_CODE_PREFIX = "    "
THEMATIC_BREAK = "---"
BLOCK_QUOTE_MARKER = "> "
ORDERED_LIST_DELIMITERS: tuple[str, ...] = (".", ")")

# Text used in placeholders where a value is absent.
PLACEHOLDER_NONE = "null"

# =============================================================================
# Parsing
# =============================================================================

# Plugins shipped with mistune that may be switched on through the parser
# options. Tokens produced by them are kept as custom nodes.
MISTUNE_PLUGINS: frozenset[str] = frozenset(
    {
        "abbr",
        "def_list",
        "footnotes",
        "insert",
        "mark",
        "math",
        "ruby",
        "spoiler",
        "strikethrough",
        "subscript",
        "superscript",
        "table",
        "task_lists",
        "url",
    }
)

# =============================================================================
# CLI and configuration
# =============================================================================

PROGRAM_NAME = "mdunwrap"
ENV_PREFIX = "MDUNWRAP_"
CONFIG_FILENAMES: tuple[str, ...] = (".mdunwrap.toml", ".mdunwrap.yaml", ".mdunwrap.yml", ".mdunwrap.json")
PYPROJECT_SECTION = "mdunwrap"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
