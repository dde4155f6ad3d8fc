"""Text section renderer.

Flattens a document into a sequence of styled text sections, the shape a
UI text widget consumes: text-bearing elements become sections in the body
style, ``LineBreak`` becomes a newline section.

Images, code blocks and horizontal rules need richer visual primitives than
a text section. They are routed to ``render_image``, ``render_code_block``
and ``render_horizontal_rule``, which skip the element by default; subclass
and override them to draw something.

Thread Safety:
SectionRenderer holds no per-render state. Safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass

from hana.elements import (
    STANDARD,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineStyle,
    LineBreak,
    Markdown,
    MarkdownElement,
    OrderedListItem,
    Text,
    UnorderedListItem,
)
from hana.errors import RenderError
from hana.style import Color, MarkdownStyle
from hana.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Concrete text style for one section."""

    font: str
    font_size: float
    color: Color

    @classmethod
    def from_style(cls, style: MarkdownStyle) -> TextStyle:
        return cls(font=style.font, font_size=style.body_size, color=style.body_color)


@dataclass(frozen=True, slots=True)
class TextSection:
    """A piece of text with its text style.

    ``inline`` keeps the run's inline style and ``heading_level`` the level of
    the heading it came from (0 otherwise), so a consumer can vary weight or
    size further.
    """

    value: str
    style: TextStyle
    inline: InlineStyle = STANDARD
    heading_level: int = 0


class SectionRenderer:
    """Render a document into text sections.

    Usage:
        >>> renderer = SectionRenderer()
        >>> sections = renderer.render(doc, style)
        >>> "".join(section.value for section in sections)
        'hello world'

    """

    __slots__ = ()

    def render(self, markdown: Markdown, style: MarkdownStyle) -> tuple[TextSection, ...]:
        """Render every element of the document in order."""
        body = TextStyle.from_style(style)
        sections: list[TextSection] = []
        for element in markdown.content:
            sections.extend(self.render_element(element, body))
        return tuple(sections)

    def render_element(self, element: MarkdownElement, body: TextStyle) -> list[TextSection]:
        """Render one element.

        Raises:
            RenderError: Unknown element type
        """
        match element:
            case Text(run):
                return [TextSection(run.text, body, run.style)]
            case Heading(run, level):
                return [TextSection(run.text, body, run.style, heading_level=level)]
            case OrderedListItem(run) | UnorderedListItem(run):
                return [TextSection(run.text, body, run.style)]
            case LineBreak():
                return [TextSection("\n", body)]
            case Image():
                return self.render_image(element, body)
            case CodeBlock():
                return self.render_code_block(element, body)
            case HorizontalRule():
                return self.render_horizontal_rule(element, body)
        raise RenderError(f"cannot render element {element!r}")

    def render_image(self, element: Image, body: TextStyle) -> list[TextSection]:
        logger.debug("Skipping image %s", element.image_reference.path)
        return []

    def render_code_block(self, element: CodeBlock, body: TextStyle) -> list[TextSection]:
        logger.debug("Skipping code block (%d chars)", len(element.raw_text))
        return []

    def render_horizontal_rule(self, element: HorizontalRule, body: TextStyle) -> list[TextSection]:
        logger.debug("Skipping horizontal rule")
        return []
