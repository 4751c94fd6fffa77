"""Link pipeline: scan, guard, trim, render, assemble.

    text ──scan──▶ candidates ──classify──▶ accepted ──trim──▶ links
                                      │
                                      └─ suppressed: copied verbatim

Every call builds its own tracker, segment stream and StringBuilder, so the
functions here are pure with respect to their arguments. A render callback
is invoked synchronously, in document order, at most once per accepted
candidate; anything it raises propagates and no partial output is returned.

"""

from collections.abc import Iterator

from autolink.boundary import trim
from autolink.config import LinkOptions
from autolink.context import TagContextTracker
from autolink.errors import InvalidInputError
from autolink.renderers.anchor import AnchorRenderer
from autolink.renderers.protocol import LinkRenderer
from autolink.scanner import scan
from autolink.stringbuilder import StringBuilder
from autolink.tokens import Candidate, Segment, SegmentKind
from autolink.utils.logger import get_logger

logger = get_logger(__name__)


def _require_text(text: object) -> None:
    if not isinstance(text, str):
        raise InvalidInputError(
            f"expected str, got {type(text).__name__}", field="text"
        )


def find_candidates(text: str, options: LinkOptions) -> Iterator[Candidate]:
    """Yield accepted, trimmed candidates in document order.

    Candidates inside tags or skipped elements are dropped.

    Raises:
        InvalidInputError: If text is not a str (raised immediately)
    """
    _require_text(text)
    return _accepted(text, options)


def _accepted(text: str, options: LinkOptions) -> Iterator[Candidate]:
    tracker = TagContextTracker(text, options.skip_tags)
    for candidate in scan(text, options.schemes):
        context = tracker.classify(candidate.start)
        if not context.linkable:
            logger.debug(
                "Suppressed %r at offset %d (%s)",
                candidate.raw,
                candidate.start,
                context.name,
            )
            continue
        yield trim(candidate)


def iter_segments(
    text: str,
    options: LinkOptions,
    renderer: LinkRenderer | None = None,
) -> Iterator[Segment]:
    """Yield output segments in document order.

    Literal segments cover everything that is not an accepted URL, including
    suppressed candidates and characters cut by the boundary trimmer.

    Args:
        text: Input text
        options: Link options
        renderer: Renderer for accepted URLs (AnchorRenderer(options) if None)

    Raises:
        InvalidInputError: If text is not a str (raised immediately)
    """
    _require_text(text)
    return _segments(text, options, renderer or AnchorRenderer(options))


def _segments(text: str, options: LinkOptions, renderer: LinkRenderer) -> Iterator[Segment]:
    last = 0
    for candidate in _accepted(text, options):
        if candidate.start > last:
            yield Segment(text[last : candidate.start])
        yield Segment(renderer.render(candidate.raw), SegmentKind.LINK, candidate)
        last = candidate.end
    if last < len(text):
        yield Segment(text[last:])


def link_text(
    text: str,
    options: LinkOptions,
    renderer: LinkRenderer | None = None,
) -> str:
    """Replace every accepted URL in text with rendered markup.

    Returns:
        The transformed text; equal to the input when nothing was linked.
    """
    sb = StringBuilder()
    links = 0
    for segment in iter_segments(text, options, renderer):
        sb.append(segment.text)
        links += segment.is_link
    if links:
        logger.debug("Linked %d URL(s) in %d characters", links, len(text))
    return sb.build()
