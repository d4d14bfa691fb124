"""Command-line interface for mdunwrap.

This module provides the ``mdunwrap`` command, which removes line-wrapping
from Markdown read from standard input or from files.

Environment Variable Support
----------------------------
Rendering and parser options can be given defaults with environment
variables named MDUNWRAP_<OPTION_NAME>, where option names are upper-cased
with hyphens replaced by underscores. MDUNWRAP_CONFIG names a configuration
file. Precedence is: command-line flag, environment variable, configuration
file, built-in default.

Examples
--------
Filter standard input::

    $ fold -w 60 README.md | mdunwrap

Print the unwrapped form of several files::

    $ mdunwrap intro.md usage.md

Rewrite files in place::

    $ mdunwrap -w docs/*.md

Use asterisk bullets::

    $ mdunwrap --bullet-symbol '*' notes.md

"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, Iterable

from mdunwrap.api import unwrap, unwrap_file
from mdunwrap.cli.builder import OPTION_ARGUMENTS, create_parser, get_exit_code_for_exception
from mdunwrap.cli.config import CONFIG_ENV_VAR, load_config_with_priority, load_env_options, merge_configs
from mdunwrap.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR, PROGRAM_NAME
from mdunwrap.exceptions import FileError, MdunwrapError, OutputWriteError
from mdunwrap.logging_utils import configure_logging
from mdunwrap.options.markdown import MarkdownParserOptions, UnwrapRendererOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_options"]


def _report_error(message: str) -> None:
    print(f"{PROGRAM_NAME}: {message}", file=sys.stderr)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    log_level = "DEBUG" if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _cli_option_values(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Return the option values given explicitly on the command line."""
    values: Dict[str, Any] = {}
    for dest in OPTION_ARGUMENTS:
        value = getattr(parsed_args, dest, None)
        if value is not None:
            values[dest] = value
    return values


def build_options(
    parsed_args: argparse.Namespace, environ: Dict[str, str] | None = None
) -> tuple[MarkdownParserOptions, UnwrapRendererOptions]:
    """Resolve parser and renderer options from every configuration layer.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    environ : dict, optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    tuple of (MarkdownParserOptions, UnwrapRendererOptions)
        Options ready to pass to :func:`mdunwrap.unwrap`

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValueError
        If a resolved option value is invalid

    """
    if environ is None:
        environ = dict(os.environ)

    config: Dict[str, Any] = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, environ.get(CONFIG_ENV_VAR))

    values = merge_configs(config, load_env_options(environ))
    values = merge_configs(values, _cli_option_values(parsed_args))
    logger.debug("Resolved options: %s", values)

    return MarkdownParserOptions.from_mapping(values), UnwrapRendererOptions.from_mapping(values)


def _write_stdout(text: str) -> None:
    """Write ``text`` to stdout as UTF-8 regardless of the locale encoding."""
    binary = getattr(sys.stdout, "buffer", None)
    if binary is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    binary.write(text.encode("utf-8"))
    binary.flush()


def _process_stdin(parser_options: MarkdownParserOptions, renderer_options: UnwrapRendererOptions) -> None:
    source = getattr(sys.stdin, "buffer", sys.stdin)
    output = unwrap(source, parser_options=parser_options, renderer_options=renderer_options)
    _write_stdout(output)


def _process_files(
    files: Iterable[str],
    write: bool,
    parser_options: MarkdownParserOptions,
    renderer_options: UnwrapRendererOptions,
) -> int:
    """Unwrap each file in order, stopping at the first failure.

    Returns
    -------
    int
        Exit code

    """
    for path in files:
        logger.info("Processing %s", path)
        try:
            output = unwrap_file(path, write=write, parser_options=parser_options, renderer_options=renderer_options)
        except (FileError, OutputWriteError) as e:
            # These messages already name the file
            _report_error(str(e))
            return get_exit_code_for_exception(e)
        except MdunwrapError as e:
            _report_error(f"{path}: {e}")
            return get_exit_code_for_exception(e)
        if not write:
            _write_stdout(output)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the mdunwrap command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.write and not parsed_args.files:
        _report_error("must include filenames with -w option")
        return EXIT_VALIDATION_ERROR

    try:
        parser_options, renderer_options = build_options(parsed_args)
    except (argparse.ArgumentTypeError, ValueError) as e:
        _report_error(str(e))
        return get_exit_code_for_exception(e)

    try:
        if parsed_args.files:
            return _process_files(parsed_args.files, parsed_args.write, parser_options, renderer_options)
        _process_stdin(parser_options, renderer_options)
    except MdunwrapError as e:
        _report_error(str(e))
        return get_exit_code_for_exception(e)
    except OSError as e:
        _report_error(str(e))
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
