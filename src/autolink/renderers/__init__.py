"""autolink renderers.

Renderers turn an accepted URL into its replacement markup.

Available Renderers:
- AnchorRenderer: callback override, falling back to ``<a href='…'>`` markup

Thread Safety:
Renderers hold only immutable configuration.
Safe for concurrent use from multiple threads.

"""

from autolink.renderers.anchor import AnchorRenderer, format_attributes, render_link
from autolink.renderers.protocol import LinkRenderer

__all__ = ["AnchorRenderer", "LinkRenderer", "format_attributes", "render_link"]
