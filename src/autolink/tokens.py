"""Candidate and Segment definitions for the autolink pipeline.

The scanner produces Candidate objects; the linker turns accepted candidates
into a stream of Segment objects whose concatenation is the output text.

Thread Safety:
Candidate and Segment are frozen (immutable) and safe to share across threads.
SegmentKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Candidate:
    """A URL occurrence detected in the input text.

    Offsets index into the input text: ``text[start:end] == raw``.
    Trimming keeps ``start`` and may only move ``end`` backwards.

    Attributes:
        start: Offset of the first character of the URL (the scheme)
        end: Offset one past the last character
        raw: The matched text

    """

    start: int
    end: int
    raw: str

    def truncate(self, length: int) -> "Candidate":
        """Return a candidate covering only the first ``length`` characters."""
        if length >= len(self.raw):
            return self
        return Candidate(start=self.start, end=self.start + length, raw=self.raw[:length])

    def __len__(self) -> int:
        return self.end - self.start


class SegmentKind(Enum):
    """Origin of a Segment in the output."""

    LITERAL = auto()  # Copied verbatim from the input
    LINK = auto()  # Produced by a renderer


@dataclass(frozen=True, slots=True)
class Segment:
    """A span of output text.

    Attributes:
        text: Output text of this span
        kind: Whether the span was copied or rendered
        candidate: The candidate a LINK segment was rendered from

    """

    text: str
    kind: SegmentKind = SegmentKind.LITERAL
    candidate: Candidate | None = None

    @property
    def is_link(self) -> bool:
        return self.kind is SegmentKind.LINK
