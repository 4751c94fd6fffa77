"""LinkRenderer protocol: stable interface for link renderers.

Any object implementing ``render(url) -> str`` conforms to this protocol.
The built-in ``AnchorRenderer`` is the reference implementation.

Example:
    from autolink.renderers.protocol import LinkRenderer

    def link_all(renderer: LinkRenderer, urls: list[str]) -> list[str]:
        return [renderer.render(url) for url in urls]

"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LinkRenderer(Protocol):
    """Protocol for link renderers.

    Implementations turn one URL into the markup that replaces it.
    The built-in ``AnchorRenderer`` conforms to this protocol.

    """

    def render(self, url: str) -> str:
        """Render markup for a URL.

        Args:
            url: The trimmed URL text, exactly as it appeared in the input.

        Returns:
            Replacement markup.

        """
        ...
