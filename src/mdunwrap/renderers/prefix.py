#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/renderers/prefix.py
"""Line prefix bookkeeping for nested container blocks.

Every open list item or block quote contributes one entry, a list item's
spaces or a quote's ``"> "``. Their concatenation starts every output line
inside those containers.

"""

from __future__ import annotations

from typing import Iterator

from mdunwrap.exceptions import RenderingError


class PrefixStack:
    """Ordered stack of line prefixes, root first.

    Examples
    --------
        >>> stack = PrefixStack()
        >>> stack.push("> ")
        >>> stack.push("  ")
        >>> stack.current()
        '>   '
        >>> stack.trimmed_for_blank_line()
        '>'

    """

    def __init__(self) -> None:
        self._entries: list[str] = []

    def push(self, prefix: str) -> None:
        """Open a container contributing ``prefix``."""
        self._entries.append(prefix)

    def pop(self) -> str:
        """Close the innermost container and return its prefix.

        Raises
        ------
        RenderingError
            If no container is open

        """
        if not self._entries:
            raise RenderingError("Cannot pop from an empty prefix stack", rendering_stage="prefix")
        return self._entries.pop()

    def current(self) -> str:
        """Return the prefix for an ordinary line."""
        return "".join(self._entries)

    def trimmed_for_blank_line(self) -> str:
        """Return the prefix for a blank separator line.

        Scanning from the innermost entry outward, entries that are blank
        once right-trimmed are dropped. The first non-blank entry is
        right-trimmed and everything closer to the root is kept verbatim.
        A stack holding only indentation yields the empty string.

        Returns
        -------
        str
            Prefix without trailing whitespace

        """
        for index in range(len(self._entries) - 1, -1, -1):
            trimmed = self._entries[index].rstrip()
            if trimmed:
                return "".join(self._entries[:index]) + trimmed
        return ""

    @property
    def depth(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"PrefixStack({self._entries!r})"
