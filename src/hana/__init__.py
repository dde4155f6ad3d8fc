"""
Hana: streaming markdown tokenizer for UI text

Converts markdown-like text, one line at a time, into an ordered sequence of
typed presentation elements (text runs, headings, list items, code blocks,
images, horizontal rules and explicit line breaks) ready for a text layout
stage. Zero runtime dependencies.

Quick Start:
    >>> from hana import parse
    >>> doc = parse("# Hello\\nSome **bold** text", style="style.toml")
    >>> doc.content[0]
    Heading(run=MarkdownText(style=Standard(), text='Hello'), level=1)

    >>> # Resolve the style and flatten to text sections
    >>> from hana import SectionRenderer, StyleLoader
    >>> style = StyleLoader().resolve(doc.style, root="assets")
    >>> sections = SectionRenderer().render(doc, style)

Streams:
    >>> with open("README.md", "rb") as f:
    ...     doc = parse(f, style="style.toml")

    >>> doc = await parse_async(stream_reader, style="style.toml")
"""

from typing import Any

from hana.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from hana.elements import (
    Bold,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    ImageReference,
    InlineStyle,
    Italic,
    LineBreak,
    Link,
    Markdown,
    MarkdownElement,
    MarkdownText,
    OrderedListItem,
    Standard,
    StyleReference,
    Text,
    UnorderedListItem,
)
from hana.errors import (
    HanaError,
    LoaderError,
    ParseError,
    ReadError,
    RenderError,
    StyleError,
    StyleFormatError,
    StyleNotFoundError,
)
from hana.inline import InlineScanner, scan_inline
from hana.lexer import LineClassifier
from hana.loader import LoaderSettings, MarkdownLoader
from hana.parser import Parser, parse_lines, parse_lines_async
from hana.renderers import SectionRenderer, TextSection, TextStyle
from hana.serialization import from_dict, from_json, to_dict, to_json
from hana.style import Color, MarkdownStyle, StyleLoader

__version__ = "0.1.0"


def parse(
    source: Any,
    *,
    style: str | StyleReference | None = None,
    source_file: str | None = None,
) -> Markdown:
    """Parse markdown into a document.

    Args:
        source: Text, bytes, a text/binary stream, or an iterable of lines
        style: Style document reference, left unresolved
        source_file: Optional source file path for error messages

    Returns:
        Markdown document

    Raises:
        ReadError: The source failed; no document is returned

    Example:
        >>> parse("hello world").content
        (Text(run=MarkdownText(style=Standard(), text='hello world')),)
    """
    content = parse_lines(source, source_file=source_file)
    return Markdown(content=content, style=_style_reference(style))


async def parse_async(
    source: Any,
    *,
    style: str | StyleReference | None = None,
    source_file: str | None = None,
) -> Markdown:
    """Parse markdown from an async line source into a document.

    Accepts async iterables of lines, async readers with ``readline()``
    (e.g. ``asyncio.StreamReader``), or anything ``parse`` accepts.

    Raises:
        ReadError: The source failed; no document is returned
    """
    content = await parse_lines_async(source, source_file=source_file)
    return Markdown(content=content, style=_style_reference(style))


def parse_elements(source: Any, *, source_file: str | None = None) -> tuple[MarkdownElement, ...]:
    """Parse markdown and return only the element stream."""
    return parse_lines(source, source_file=source_file)


def _style_reference(style: str | StyleReference | None) -> StyleReference | None:
    if style is None or isinstance(style, StyleReference):
        return style
    return StyleReference(style)


__all__ = [
    "Bold",
    "Code",
    "CodeBlock",
    "Color",
    "HanaError",
    "Heading",
    "HorizontalRule",
    "Image",
    "ImageReference",
    "InlineScanner",
    "InlineStyle",
    "Italic",
    "LineBreak",
    "LineClassifier",
    "Link",
    "LoaderError",
    "LoaderSettings",
    "Markdown",
    "MarkdownElement",
    "MarkdownLoader",
    "MarkdownStyle",
    "MarkdownText",
    "OrderedListItem",
    "ParseConfig",
    "ParseError",
    "Parser",
    "ReadError",
    "RenderError",
    "SectionRenderer",
    "Standard",
    "StyleError",
    "StyleFormatError",
    "StyleLoader",
    "StyleNotFoundError",
    "StyleReference",
    "Text",
    "TextSection",
    "TextStyle",
    "UnorderedListItem",
    "__version__",
    "from_dict",
    "from_json",
    "get_parse_config",
    "parse",
    "parse_async",
    "parse_config_context",
    "parse_elements",
    "parse_lines",
    "parse_lines_async",
    "reset_parse_config",
    "scan_inline",
    "set_parse_config",
    "to_dict",
    "to_json",
]
