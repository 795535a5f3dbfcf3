"""Append-only StringBuilder that knows its character length.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The running character count is what the
Debugger reads to mark where a node's text starts and ends, so the buffer
is never rewritten or truncated while a render is in progress.

Thread Safety:
StringBuilder instances are local to each render.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient append-only string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("a").append(" + ").append("b")
            >>> len(sb)
            5
            >>> sb.build()
            'a + b'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return the number of characters appended so far."""
        return self._length
