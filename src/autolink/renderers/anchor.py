"""Anchor renderer.

Renders a URL as ``<a href='URL' target='…' rel='…'>URL</a>``, or hands it
to a user callback first.

Attribute order is fixed: href, then target, then rel, then any extra
attributes in the order they were configured. Values are inserted
literally. The URL is not re-encoded; the only change is that an apostrophe
becomes ``&#39;`` inside ``href`` so the single-quoted attribute stays
intact. The link text is the URL exactly as written.

Callback contract:
- returns a str: used verbatim, no attributes added (the callback owns the
  whole markup, the empty string included)
- returns None: default rendering for this URL only
- returns anything else: RenderError
- raises: the exception propagates to the caller of the transform

Thread Safety:
AnchorRenderer precomputes its attribute string at construction and holds no
other state. Instances can be shared across threads (as long as the callback
itself is thread-safe).

"""

from autolink.config import LinkCallback, LinkOptions
from autolink.errors import RenderError
from autolink.utils.logger import get_logger

logger = get_logger(__name__)


def format_attributes(options: LinkOptions) -> str:
    """Build the attribute string appended after ``href``.

    Example:
        >>> format_attributes(LinkOptions(target="_blank", rel="noreferrer"))
        " target='_blank' rel='noreferrer'"
    """
    parts: list[str] = []
    if options.target is not None:
        parts.append(f" target='{options.target}'")
    if options.rel is not None:
        parts.append(f" rel='{options.rel}'")
    parts.extend(f" {name}='{value}'" for name, value in options.attributes)
    return "".join(parts)


class AnchorRenderer:
    """Render URLs as anchor elements.

    Usage:
        >>> renderer = AnchorRenderer(LinkOptions(target="_blank"))
        >>> renderer.render("http://example.com")
        "<a href='http://example.com' target='_blank'>http://example.com</a>"

    """

    __slots__ = ("_attributes", "_callback")

    def __init__(self, options: LinkOptions | None = None) -> None:
        options = options or LinkOptions()
        self._callback: LinkCallback | None = options.callback
        self._attributes = format_attributes(options)

    def render(self, url: str) -> str:
        """Render one URL, consulting the callback first."""
        if self._callback is not None:
            result = self._callback(url)
            if result is not None:
                if not isinstance(result, str):
                    raise RenderError(
                        url,
                        f"callback returned {type(result).__name__}, expected str or None",
                    )
                return result
            logger.debug("Callback deferred %r to default rendering", url)
        return self.render_default(url)

    def render_default(self, url: str) -> str:
        """Render the built-in anchor markup, ignoring the callback."""
        href = url.replace("'", "&#39;")
        return f"<a href='{href}'{self._attributes}>{url}</a>"


def render_link(url: str, options: LinkOptions | None = None) -> str:
    """Render a single URL with the given options.

    Convenience wrapper around AnchorRenderer for one-off use.
    """
    return AnchorRenderer(options).render(url)
