"""
autolink: turn plain URLs in text into hyperlinks

Finds http, https and ftp URLs in plain text or HTML fragments and wraps
them in anchor markup. URLs that are already linked (anchor content) or
embedded (``href``/``src`` attribute values) are left alone; trailing
punctuation and wrapping parentheses stay outside the link. Zero runtime
dependencies, no HTML parser.

Quick Start:
    >>> from autolink import auto_link
    >>> auto_link("Visit http://example.com!")
    "Visit <a href='http://example.com'>http://example.com</a>!"

    >>> auto_link("See http://example.com", target="_blank", rel="noreferrer")
    "See <a href='http://example.com' target='_blank' rel='noreferrer'>http://example.com</a>"

Custom Rendering:
    >>> def images(url):
    ...     if url.endswith(".png"):
    ...         return f"<img src='{url}'>"
    ...     return None  # default anchor for everything else
    >>> auto_link("Logo http://example.com/logo.png", callback=images)
    "Logo <img src='http://example.com/logo.png'>"

    >>> # Or use the reusable AutoLinker
    >>> from autolink import AutoLinker
    >>> linker = AutoLinker(rel="nofollow")
    >>> html = linker("Read http://example.com")
"""

from collections.abc import Iterable, Mapping
from typing import Any

from autolink.boundary import trim
from autolink.config import (
    DEFAULT_SCHEMES,
    DEFAULT_SKIP_TAGS,
    LinkCallback,
    LinkOptions,
    get_link_options,
    link_options_context,
    reset_link_options,
    resolve_options,
    set_link_options,
)
from autolink.context import TagContext, TagContextTracker
from autolink.errors import AutolinkError, InvalidInputError, RenderError
from autolink.linker import find_candidates as _find_candidates
from autolink.linker import iter_segments, link_text
from autolink.renderers import AnchorRenderer, LinkRenderer, render_link
from autolink.scanner import scan
from autolink.tokens import Candidate, Segment, SegmentKind

__version__ = "0.1.0"


def auto_link(
    text: str,
    options: LinkOptions | Mapping[str, Any] | None = None,
    *,
    target: str | None = None,
    rel: str | None = None,
    callback: LinkCallback | None = None,
    attributes: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
) -> str:
    """Convert plain URLs in text into anchor markup.

    Args:
        text: Plain text or HTML fragment
        options: LinkOptions, a mapping accepted by LinkOptions.from_dict,
            or None for the context default (see link_options_context)
        target: Overrides options.target
        rel: Overrides options.rel
        callback: Overrides options.callback. Receives each URL and returns
            replacement markup, or None for the default anchor
        attributes: Overrides options.attributes

    Returns:
        Transformed text (equal to the input when no URL was linked)

    Raises:
        InvalidInputError: If text is not a str or options are malformed
        RenderError: If the callback returns something other than str or None

    Example:
        >>> auto_link("Visit http://example.com")
        "Visit <a href='http://example.com'>http://example.com</a>"
    """
    resolved = resolve_options(
        options, target=target, rel=rel, callback=callback, attributes=attributes
    )
    return link_text(text, resolved)


def find_candidates(
    text: str,
    options: LinkOptions | Mapping[str, Any] | None = None,
) -> list[Candidate]:
    """Return the URLs auto_link() would link, without rendering them.

    Example:
        >>> [c.raw for c in find_candidates("(see http://example.com).")]
        ['http://example.com']
    """
    return list(_find_candidates(text, resolve_options(options)))


class AutoLinker:
    """Reusable link processor with fixed options.

    Usage:
        >>> linker = AutoLinker(target="_blank")
        >>> linker("See http://example.com")
        "See <a href='http://example.com' target='_blank'>http://example.com</a>"

        >>> # Inspect instead of rendering
        >>> [c.raw for c in linker.candidates("a http://x.io b")]
        ['http://x.io']

    Thread Safety:
        Options and renderer are immutable after construction. Safe to share
        one instance across threads as long as the callback is thread-safe.

    """

    __slots__ = ("_options", "_renderer")

    def __init__(
        self,
        options: LinkOptions | Mapping[str, Any] | None = None,
        *,
        renderer: LinkRenderer | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the linker.

        Args:
            options: LinkOptions, a mapping, or None for the context default
                at construction time
            renderer: Custom renderer (AnchorRenderer built from the options
                if None)
            **overrides: Field overrides applied on top of options
        """
        self._options = resolve_options(options, **overrides)
        self._renderer = renderer or AnchorRenderer(self._options)

    @property
    def options(self) -> LinkOptions:
        return self._options

    def __call__(self, text: str) -> str:
        return self.link(text)

    def link(self, text: str) -> str:
        """Link URLs in one text."""
        return link_text(text, self._options, self._renderer)

    def link_many(self, texts: Iterable[str]) -> list[str]:
        """Link URLs in each text, preserving order."""
        return [link_text(text, self._options, self._renderer) for text in texts]

    def candidates(self, text: str) -> list[Candidate]:
        """Accepted, trimmed candidates in document order."""
        return list(_find_candidates(text, self._options))

    def segments(self, text: str) -> list[Segment]:
        """Output segments in document order."""
        return list(iter_segments(text, self._options, self._renderer))


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "auto_link",
    "find_candidates",
    "AutoLinker",
    # Pipeline stages
    "scan",
    "trim",
    "iter_segments",
    "link_text",
    "TagContext",
    "TagContextTracker",
    # Data model
    "Candidate",
    "Segment",
    "SegmentKind",
    # Rendering
    "AnchorRenderer",
    "LinkRenderer",
    "render_link",
    # Configuration (ContextVar-based default)
    "DEFAULT_SCHEMES",
    "DEFAULT_SKIP_TAGS",
    "LinkCallback",
    "LinkOptions",
    "get_link_options",
    "set_link_options",
    "reset_link_options",
    "resolve_options",
    "link_options_context",
    # Errors
    "AutolinkError",
    "InvalidInputError",
    "RenderError",
]
