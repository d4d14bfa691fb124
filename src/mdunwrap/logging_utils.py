#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/logging_utils.py
"""Logging setup for the mdunwrap command-line tool.

stdout carries the unwrapped Markdown, so diagnostics are sent to stderr and,
optionally, appended to a log file. Handlers installed here are tagged; a
later call replaces only those and leaves handlers owned by an embedding
application or a test harness in place.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mdunwrap.constants import DEFAULT_LOG_LEVEL

_OWNED_HANDLER_ATTR = "_mdunwrap_owned"

PLAIN_FORMAT = "mdunwrap: %(levelname)s: %(message)s"
TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s: %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``.

    Unknown names resolve to the default level rather than failing, since the
    CLI has already restricted ``--log-level`` to the known names.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _OWNED_HANDLER_ATTR, False)]


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the stderr (and optional file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        Path of a file that receives a copy of every record
    trace_mode : bool, default False
        Use the timestamped format that also names the emitting logger

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    for handler in _owned_handlers(root):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        setattr(handler, _OWNED_HANDLER_ATTR, True)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        root.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        root.debug("Copying log records to %s", log_file)
    return root


__all__ = ["configure_logging", "resolve_level"]
