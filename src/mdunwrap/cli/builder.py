#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Argument parser construction for the mdunwrap CLI.

Option flags are generated from the fields of the option dataclasses, using
the ``help`` and ``choices`` entries of each field's metadata, so that the
CLI stays in step with :mod:`mdunwrap.options`.
"""

import argparse
from dataclasses import MISSING, fields
from typing import Any, Dict, Type

from mdunwrap import __version__
from mdunwrap.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
    EXIT_ERROR,
    EXIT_VALIDATION_ERROR,
    LOG_LEVELS,
    PROGRAM_NAME,
)
from mdunwrap.exceptions import ValidationError
from mdunwrap.options.markdown import MarkdownParserOptions, UnwrapRendererOptions

# Dest names of the generated option arguments, mapped to their options class.
OPTION_ARGUMENTS: Dict[str, Type[Any]] = {}


def snake_to_kebab(name: str) -> str:
    """Convert snake_case to kebab-case for CLI arguments.

    Examples
    --------
    >>> snake_to_kebab("bullet_symbol")
    'bullet-symbol'

    """
    return name.replace("_", "-")


def parse_str_list(value: str) -> list[str]:
    """Parse a comma-separated CLI value into a list of names."""
    return [item.strip() for item in value.split(",") if item.strip()]


def get_argument_kwargs(field: Any) -> Dict[str, Any]:
    """Build ``add_argument`` keyword arguments for an options field.

    The default is always None so that an absent flag can be told apart from
    one that was given; defaults from the environment, config files and the
    dataclass itself are layered in later.

    Parameters
    ----------
    field : dataclasses.Field
        Field of an options dataclass

    Returns
    -------
    dict
        Keyword arguments for ``ArgumentParser.add_argument``

    """
    metadata = field.metadata
    kwargs: Dict[str, Any] = {"dest": field.name, "default": None}

    help_text = metadata.get("help", "")
    default = field.default if field.default is not MISSING else None
    env_key = f"{ENV_PREFIX}{field.name.upper()}"

    if field.name == "plugins":
        kwargs["type"] = parse_str_list
        kwargs["metavar"] = "NAME[,NAME...]"
        choices = metadata.get("choices")
        if choices:
            help_text = f"{help_text} (available: {', '.join(choices)})"
    else:
        choices = metadata.get("choices")
        if choices:
            kwargs["choices"] = list(choices)
        if default not in (None, ""):
            help_text = f"{help_text} (default: {default})"

    kwargs["help"] = f"{help_text}. Environment: {env_key}"
    return kwargs


def add_options_class_arguments(
    parser: argparse.ArgumentParser, options_class: Type[Any], group_name: str
) -> argparse._ArgumentGroup:
    """Add one flag per field of ``options_class`` to ``parser``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend
    options_class : type
        Options dataclass to expose
    group_name : str
        Title of the argument group in ``--help`` output

    Returns
    -------
    argparse._ArgumentGroup
        The group holding the new arguments

    """
    group = parser.add_argument_group(group_name)
    for field in fields(options_class):
        if not field.init:
            continue
        group.add_argument(f"--{snake_to_kebab(field.name)}", **get_argument_kwargs(field))
        OPTION_ARGUMENTS[field.name] = options_class
    return group


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdunwrap command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Remove line-wrapping from Markdown. "
        "Reads standard input when no files are given and writes the result to standard output.",
        epilog=f"Every rendering option can also be set through {ENV_PREFIX}<OPTION> environment variables "
        f"or a configuration file (.mdunwrap.toml, .mdunwrap.yaml, .mdunwrap.json or [tool.mdunwrap] "
        "in pyproject.toml).",
    )

    parser.add_argument("files", nargs="*", metavar="FILE", help="Markdown files to unwrap")
    parser.add_argument(
        "-w",
        "--write",
        action="store_true",
        help="Rewrite each file in place instead of printing the result",
    )

    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to configuration file (TOML, YAML or JSON). "
        "If not specified, searches for .mdunwrap.* or pyproject.toml from the current directory upwards, "
        f"then in the home directory. Environment: {ENV_PREFIX}CONFIG",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help=f"Disable loading of configuration files, including {ENV_PREFIX}CONFIG and --config",
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=DEFAULT_LOG_LEVEL,
        help=f"Set logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to stderr",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging and per-stage timing information",
    )
    parser.add_argument("--version", "-V", action="version", version=f"{PROGRAM_NAME} {__version__}")

    add_options_class_arguments(parser, UnwrapRendererOptions, "Rendering options")
    add_options_class_arguments(parser, MarkdownParserOptions, "Parser options")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        ``EXIT_VALIDATION_ERROR`` for invalid options, ``EXIT_ERROR`` otherwise

    """
    if isinstance(exception, (ValidationError, ValueError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR
    return EXIT_ERROR
