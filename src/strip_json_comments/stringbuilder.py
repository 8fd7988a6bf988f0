"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The scanner uses one builder for its
output and a second, short-lived one for text held behind a pending
trailing comma.

Thread Safety:
StringBuilder instances are local to each strip() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Appends to a list, joins once at the end.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append('{"a":').append("1}")
            >>> sb.build()
            '{"a":1}'
    
    Thread Safety:
        Instance is local to each strip() call.
        No shared mutable state.
        
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def absorb(self, other: StringBuilder) -> StringBuilder:
        """Move every part of another builder onto the end of this one.

        The other builder is left empty.

        Args:
            other: Builder whose parts are taken

        Returns:
            self for method chaining
        """
        self._parts.extend(other._parts)
        self._length += other._length
        other.clear()
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return total number of characters appended."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
