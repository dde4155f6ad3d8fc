"""Typed presentation elements for Hana.

All elements are frozen dataclasses with slots for:
- Immutability: a parsed document can be shared freely between consumers
- Pattern matching: ``match element: case Heading(run, level): ...``
- Cheap equality for tests and caching

Element Hierarchy:
MarkdownElement
├── Text              one styled run
├── Heading           styled run + level (1-6)
├── HorizontalRule
├── Image             alt text + unresolved ImageReference
├── OrderedListItem   styled run
├── UnorderedListItem styled run
├── CodeBlock         verbatim fenced text
└── LineBreak

InlineStyle
├── Standard
├── Bold
├── Italic
├── Link              target + optional title
└── Code

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

# =============================================================================
# Inline styles
# =============================================================================


@dataclass(frozen=True, slots=True)
class Standard:
    """Unstyled body text."""


@dataclass(frozen=True, slots=True)
class Bold:
    """Strong text.

    Markdown: **text** or __text__

    """


@dataclass(frozen=True, slots=True)
class Italic:
    """Emphasized text.

    Markdown: *text* or _text_

    """


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlinked text.

    Markdown: [text](target "title")

    """

    target: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code span.

    Markdown: `code`

    """


InlineStyle: TypeAlias = Standard | Bold | Italic | Link | Code

# Shared instances for the payload-free styles
STANDARD = Standard()
BOLD = Bold()
ITALIC = Italic()
CODE = Code()


@dataclass(frozen=True, slots=True)
class MarkdownText:
    """A contiguous piece of text tagged with exactly one inline style."""

    style: InlineStyle
    text: str


# =============================================================================
# Asset references
# =============================================================================


@dataclass(frozen=True, slots=True)
class ImageReference:
    """Unresolved image handle.

    The path is passed through verbatim; loading the image is the job of the
    host application's asset system.

    """

    path: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class StyleReference:
    """Unresolved reference to a style document (font, size, color)."""

    path: str


# =============================================================================
# Elements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """A standalone styled text run."""

    run: MarkdownText


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX heading.

    Markdown: # Heading ... ###### Heading

    """

    run: MarkdownText
    level: int


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """Horizontal rule: ---, ***, ___ (3+ of one character)."""


@dataclass(frozen=True, slots=True)
class Image:
    """Image.

    Markdown: ![alt](path "title")

    """

    alt_text: str
    image_reference: ImageReference


@dataclass(frozen=True, slots=True)
class OrderedListItem:
    """One entry of an ordered list (``1. item``)."""

    run: MarkdownText


@dataclass(frozen=True, slots=True)
class UnorderedListItem:
    """One entry of an unordered list (``- item``, ``* item``, ``+ item``)."""

    run: MarkdownText


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block.

    ``raw_text`` holds the lines between the fences joined by newlines, with
    no inline scanning applied. ``language`` is the first word of the info
    string, or empty.

    """

    raw_text: str
    language: str = ""


@dataclass(frozen=True, slots=True)
class LineBreak:
    """Explicit paragraph/line separator."""


MarkdownElement: TypeAlias = (
    Text
    | Heading
    | HorizontalRule
    | Image
    | OrderedListItem
    | UnorderedListItem
    | CodeBlock
    | LineBreak
)

# Pieces produced by the inline scanner for one line
InlinePiece: TypeAlias = MarkdownText | Image

LINE_BREAK = LineBreak()
HORIZONTAL_RULE = HorizontalRule()


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Markdown:
    """A parsed markdown document.

    The style reference must be resolved (see ``hana.style.StyleLoader``)
    before the content is rendered.

    """

    content: tuple[MarkdownElement, ...]
    style: StyleReference | None = None

    def __iter__(self) -> Iterator[MarkdownElement]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)


__all__ = [
    "BOLD",
    "CODE",
    "HORIZONTAL_RULE",
    "ITALIC",
    "LINE_BREAK",
    "STANDARD",
    "Bold",
    "Code",
    "CodeBlock",
    "Heading",
    "HorizontalRule",
    "Image",
    "ImageReference",
    "InlinePiece",
    "InlineStyle",
    "Italic",
    "LineBreak",
    "Link",
    "Markdown",
    "MarkdownElement",
    "MarkdownText",
    "OrderedListItem",
    "Standard",
    "StyleReference",
    "Text",
    "UnorderedListItem",
]
