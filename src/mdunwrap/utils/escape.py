#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/utils/escape.py
"""Markdown text escaping utilities.

Literal text taken from the parsed tree has lost its source escapes. Before
it is written back out, every Markdown-significant sequence is escaped so the
output re-parses to the same text.

"""

from __future__ import annotations

from typing import Iterable

from mdunwrap.constants import ESCAPE_SEQUENCES


def order_escape_sequences(sequences: Iterable[str]) -> tuple[str, ...]:
    """Return escape sequences in matching priority order.

    Longer sequences are tried first so that ``![`` wins over any single
    character it starts with. Sequences of equal length keep their input
    order. Duplicates and empty strings are dropped.

    Parameters
    ----------
    sequences : iterable of str
        Candidate sequences

    Returns
    -------
    tuple of str
        Sequences sorted longest first, ties in input order

    Examples
    --------
        >>> order_escape_sequences(["#", "![", "["])
        ('![', '#', '[')

    """
    unique = [seq for seq in dict.fromkeys(sequences) if seq]
    return tuple(sorted(unique, key=len, reverse=True))


def escape_text(text: str, sequences: tuple[str, ...] = ESCAPE_SEQUENCES) -> str:
    r"""Escape Markdown-significant sequences in a literal text run.

    The text is scanned left to right. At each position the sequences are
    tested in the order given; on a match every character of the matched
    sequence is prefixed with a backslash and the scan resumes right after
    it. Other characters pass through unchanged.

    Parameters
    ----------
    text : str
        Literal text to escape
    sequences : tuple of str, default ESCAPE_SEQUENCES
        Sequences to escape, already in priority order
        (see :func:`order_escape_sequences`)

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_text("*bold*")
        '\\*bold\\*'
        >>> escape_text("![alt]")
        '\\!\\[alt]'

    """
    if not text:
        return text

    parts: list[str] = []
    start = 0
    i = 0
    length = len(text)
    while i < length:
        for seq in sequences:
            if text.startswith(seq, i):
                if start < i:
                    parts.append(text[start:i])
                parts.extend("\\" + char for char in seq)
                i += len(seq)
                start = i
                break
        else:
            i += 1

    if start < length:
        parts.append(text[start:])
    return "".join(parts)


__all__ = ["escape_text", "order_escape_sequences"]
