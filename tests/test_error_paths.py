"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for odd input. These complement the happy-path tests in test_api.py.
"""

import pytest

from hana import Parser, parse
from hana.elements import STANDARD, CodeBlock, LineBreak, MarkdownText, Text
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

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("oops", lineno=3, source_file="docs/a.md")
        assert str(err) == "docs/a.md:3 oops"
        assert err.source_file == "docs/a.md"

    def test_read_error(self) -> None:
        cause = OSError("broken pipe")
        err = ReadError(cause, lineno=7)
        assert err.cause is cause
        assert str(err) == "7 Failed reading line: broken pipe"


class TestHierarchy:
    """All Hana errors share one base."""

    @pytest.mark.parametrize(
        "error_type",
        [ParseError, ReadError, LoaderError, StyleError, StyleFormatError, StyleNotFoundError, RenderError],
    )
    def test_base(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, HanaError)

    def test_style_errors(self) -> None:
        assert issubclass(StyleFormatError, StyleError)
        assert issubclass(StyleNotFoundError, StyleError)
        assert str(StyleNotFoundError(None, "no style")) == "no style"


# =========================================================================
# Parser misuse
# =========================================================================


class TestParserMisuse:
    """Incremental API used out of order."""

    def test_feed_after_finish(self) -> None:
        parser = Parser("a.md")
        parser.feed("x")
        parser.finish()
        with pytest.raises(ParseError, match="already finished"):
            parser.feed("y")

    def test_lineno_tracks_feeds(self) -> None:
        parser = Parser()
        parser.feed("a")
        parser.feed("")
        assert parser.lineno == 2


# =========================================================================
# Malformed input degrades to text
# =========================================================================


class TestMalformedInput:
    """Malformed markdown never raises."""

    @pytest.mark.parametrize(
        "source",
        ["**", "`", "[", "![", "](", "\\", "#######", "* *", "1.", "~~~~~~"],
    )
    def test_no_exception(self, source: str) -> None:
        parse(source)

    def test_control_characters(self) -> None:
        doc = parse("a\x00b\x07c")
        assert doc.content == (Text(MarkdownText(STANDARD, "a\x00b\x07c")),)

    def test_only_blank_lines(self) -> None:
        assert parse("\n\n\n\n").content == (LineBreak(), LineBreak())

    def test_whitespace_only_lines_are_blank(self) -> None:
        assert parse("a\n   \n\t\nb").content == (
            Text(MarkdownText(STANDARD, "a")),
            LineBreak(),
            LineBreak(),
            Text(MarkdownText(STANDARD, "b")),
        )

    def test_lone_fence_char_line(self) -> None:
        assert parse("~~~~~~").content == (CodeBlock(""),)

    def test_very_long_line(self) -> None:
        line = "word " * 10_000
        doc = parse(line)
        assert doc.content[0].run.text == line.strip()  # type: ignore[union-attr]
