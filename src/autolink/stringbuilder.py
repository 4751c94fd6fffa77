"""StringBuilder for O(n) output assembly.

Appends segment text to a list and joins once at the end: O(n) total
vs O(n²) for repeated string concatenation on text with many links.

Thread Safety:
StringBuilder instances are local to each transform call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Visit ")
            >>> sb.append("<a href='http://example.com'>http://example.com</a>")
            >>> sb.build()
            "Visit <a href='http://example.com'>http://example.com</a>"

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)
