"""Tag-context tracking for URL candidates.

Decides whether a candidate already lives inside markup that represents it:
an attribute value such as ``<a href='...'>`` or ``<img src='...'>``, or
the content of an anchor (or any other element configured as skipped).

This is a lightweight forward tag scan, not an HTML parser. The tracker
makes a single lazy pass over the complete tags of the text, consuming
those that end before each candidate and keeping a depth counter per
skipped element. Only ``<name ...>`` with a closing ``>`` counts as a tag,
so comparisons such as ``a<b`` in prose are plain text. Outside quoted
attribute values a tag must fit on one line. Malformed or exotic nesting
is out of scope.

Thread Safety:
A tracker holds per-transform state and must not be shared. Create one per
input text (the linker does this on every call).

"""

import re
from collections.abc import Iterator
from enum import Enum, auto

from autolink.config import DEFAULT_SKIP_TAGS

# Complete tag. Quoted attribute values may contain ">"; unquoted text may
# not contain "<" or a newline, so a stray "a<b" in prose never swallows
# the rest of the line.
_TAG_RE = re.compile(
    r"""<(?P<close>/?)(?P<name>[A-Za-z][A-Za-z0-9:\-]*)"""
    r"""(?P<attrs>(?:[^<>"'\n]|"[^"]*"|'[^']*')*)>"""
)


class TagContext(Enum):
    """Where a candidate sits relative to surrounding markup."""

    TEXT = auto()  # Plain text: link it
    TAG = auto()  # Inside a tag, e.g. an href or src value
    SKIPPED_ELEMENT = auto()  # Inside <a>...</a> or another skipped element

    @property
    def linkable(self) -> bool:
        return self is TagContext.TEXT


class TagContextTracker:
    """Classify candidate offsets of one text, in document order.

    Usage:
        >>> tracker = TagContextTracker("<a href='http://x.io'>http://x.io</a>")
        >>> tracker.classify(9)
        <TagContext.TAG: 2>
        >>> tracker.classify(22)
        <TagContext.SKIPPED_ELEMENT: 3>

    """

    __slots__ = ("_depths", "_pending", "_pos", "_skip_tags", "_tags")

    def __init__(self, text: str, skip_tags: frozenset[str] = DEFAULT_SKIP_TAGS) -> None:
        self._skip_tags = skip_tags
        self._tags: Iterator[re.Match[str]] = _TAG_RE.finditer(text)
        self._pending: re.Match[str] | None = next(self._tags, None)
        self._pos = 0
        self._depths: dict[str, int] = {}

    def classify(self, start: int) -> TagContext:
        """Classify the candidate beginning at ``start``.

        Offsets must be passed in non-decreasing order.

        Raises:
            ValueError: If ``start`` lies before an offset already classified
        """
        if start < self._pos:
            raise ValueError(
                f"offset {start} precedes already scanned offset {self._pos}"
            )
        self._pos = start

        while self._pending is not None and self._pending.end() <= start:
            self._consume(self._pending)
            self._pending = next(self._tags, None)

        if self._pending is not None and self._pending.start() < start:
            return TagContext.TAG
        if any(self._depths.values()):
            return TagContext.SKIPPED_ELEMENT
        return TagContext.TEXT

    def _consume(self, tag: re.Match[str]) -> None:
        name = tag.group("name").lower()
        if name not in self._skip_tags:
            return
        if tag.group("close"):
            self._depths[name] = max(0, self._depths.get(name, 0) - 1)
        elif not tag.group("attrs").rstrip().endswith("/"):
            self._depths[name] = self._depths.get(name, 0) + 1
