"""Tests for the inline span scanner."""

import pytest

from hana.elements import (
    BOLD,
    CODE,
    ITALIC,
    STANDARD,
    Image,
    ImageReference,
    Link,
    MarkdownText,
)
from hana.inline import InlineScanner, scan_inline


def run(style, text: str) -> MarkdownText:  # type: ignore[no-untyped-def]
    return MarkdownText(style, text)


class TestPlainText:
    """Lines without markers."""

    def test_single_standard_run(self) -> None:
        assert scan_inline("hello world") == (run(STANDARD, "hello world"),)

    def test_empty(self) -> None:
        assert scan_inline("") == ()

    def test_backslash_escape(self) -> None:
        assert scan_inline(r"\*not italic\*") == (run(STANDARD, "*not italic*"),)

    def test_backslash_before_letter_is_literal(self) -> None:
        assert scan_inline(r"C:\dir") == (run(STANDARD, r"C:\dir"),)


class TestEmphasis:
    """Bold and italic markers."""

    @pytest.mark.parametrize("source", ["*hello world*", "_hello world_"])
    def test_italic(self, source: str) -> None:
        assert scan_inline(source) == (run(ITALIC, "hello world"),)

    @pytest.mark.parametrize("source", ["**hello world**", "__hello world__"])
    def test_bold(self, source: str) -> None:
        assert scan_inline(source) == (run(BOLD, "hello world"),)

    def test_runs_in_source_order(self) -> None:
        assert scan_inline("a **b** c *d*") == (
            run(STANDARD, "a "),
            run(BOLD, "b"),
            run(STANDARD, " c "),
            run(ITALIC, "d"),
        )

    def test_italic_inside_bold_keeps_own_style(self) -> None:
        assert scan_inline("**bold *it* more**") == (
            run(BOLD, "bold "),
            run(ITALIC, "it"),
            run(BOLD, " more"),
        )

    def test_intraword_underscore_is_literal(self) -> None:
        assert scan_inline("snake_case_name") == (run(STANDARD, "snake_case_name"),)

    def test_intraword_asterisk_emphasis(self) -> None:
        assert scan_inline("un*frigging*believable") == (
            run(STANDARD, "un"),
            run(ITALIC, "frigging"),
            run(STANDARD, "believable"),
        )

    def test_spaced_asterisks_are_literal(self) -> None:
        assert scan_inline("2 * 3 * 4") == (run(STANDARD, "2 * 3 * 4"),)

    def test_triple_marker_is_literal(self) -> None:
        assert scan_inline("***x***") == (run(STANDARD, "***x***"),)


class TestUnmatchedMarkers:
    """Unmatched openers must survive as literal text."""

    @pytest.mark.parametrize(
        "source",
        ["**bold", "*italic", "_x", "`code", "[text", "[text](", "![alt](x"],
    )
    def test_unmatched_opener_is_literal(self, source: str) -> None:
        assert scan_inline(source) == (run(STANDARD, source),)

    def test_mismatched_nesting(self) -> None:
        assert scan_inline("*a **b* c") == (
            run(ITALIC, "a **b"),
            run(STANDARD, " c"),
        )

    def test_text_is_fully_covered(self) -> None:
        source = "x **y `z` w"
        assert "".join(piece.text for piece in scan_inline(source)) == "x **y z w"


class TestCodeSpans:
    """Backtick code spans."""

    def test_code(self) -> None:
        assert scan_inline("use `print()` here") == (
            run(STANDARD, "use "),
            run(CODE, "print()"),
            run(STANDARD, " here"),
        )

    def test_code_suppresses_markers(self) -> None:
        assert scan_inline("`**not bold**`") == (run(CODE, "**not bold**"),)

    def test_double_backticks(self) -> None:
        assert scan_inline("``a ` b``") == (run(CODE, "a ` b"),)

    def test_single_space_padding_stripped(self) -> None:
        assert scan_inline("`` `x` ``") == (run(CODE, "`x`"),)

    def test_code_inside_bold(self) -> None:
        assert scan_inline("**a `b` c**") == (
            run(BOLD, "a "),
            run(CODE, "b"),
            run(BOLD, " c"),
        )


class TestLinks:
    """Inline links."""

    def test_link(self) -> None:
        assert scan_inline("see [docs](https://example.com)") == (
            run(STANDARD, "see "),
            run(Link("https://example.com"), "docs"),
        )

    @pytest.mark.parametrize("title", ['"The Title"', "'The Title'", "(The Title)"])
    def test_link_title(self, title: str) -> None:
        assert scan_inline(f"[docs](/path {title})") == (
            run(Link("/path", "The Title"), "docs"),
        )

    def test_angle_bracket_target(self) -> None:
        assert scan_inline("[a](<my file.md>)") == (run(Link("my file.md"), "a"),)

    def test_link_text_not_scanned(self) -> None:
        assert scan_inline("[**x**](y)") == (run(Link("y"), "**x**"),)

    def test_empty_link_text_uses_target(self) -> None:
        assert scan_inline("[](https://example.com)") == (
            run(Link("https://example.com"), "https://example.com"),
        )

    @pytest.mark.parametrize("source", ["[]()", "a []() b", "[]( )"])
    def test_empty_label_and_target_is_literal(self, source: str) -> None:
        assert scan_inline(source) == (run(STANDARD, source),)

    def test_brackets_without_destination_are_literal(self) -> None:
        assert scan_inline("[x] done") == (run(STANDARD, "[x] done"),)

    def test_balanced_parens_in_target(self) -> None:
        assert scan_inline("[w](https://en.wikipedia.org/wiki/Foo_(bar))") == (
            run(Link("https://en.wikipedia.org/wiki/Foo_(bar)"), "w"),
        )


class TestImages:
    """Inline images."""

    def test_image(self) -> None:
        assert scan_inline('![logo](img/logo.png "Logo")') == (
            Image("logo", ImageReference("img/logo.png", "Logo")),
        )

    def test_image_between_text(self) -> None:
        pieces = scan_inline("a ![i](p.png) b")
        assert pieces == (
            run(STANDARD, "a "),
            Image("i", ImageReference("p.png")),
            run(STANDARD, " b"),
        )

    def test_images_disabled(self) -> None:
        scanner = InlineScanner(images_enabled=False)
        assert scanner.scan("![i](p.png)") == (run(STANDARD, "![i](p.png)"),)

    def test_bang_without_bracket(self) -> None:
        assert scan_inline("wow!") == (run(STANDARD, "wow!"),)
