"""ElementRenderer protocol: stable interface for element renderers.

Any renderer that implements ``render(markdown, style)`` conforms to this
protocol. The built-in ``SectionRenderer`` is the reference implementation.

Example:
    from hana.renderers.protocol import ElementRenderer

    def build_page(renderer: ElementRenderer, doc: Markdown, style: MarkdownStyle):
        return renderer.render(doc, style)

"""

from typing import Any, Protocol

from hana.elements import Markdown
from hana.style import MarkdownStyle


class ElementRenderer(Protocol):
    """Protocol for renderers consuming a finished document and its style."""

    def render(self, markdown: Markdown, style: MarkdownStyle) -> Any:
        """Render a document with its resolved style.

        Args:
            markdown: The parsed document
            style: The resolved style document

        Returns:
            Renderer-specific output.

        """
        ...
