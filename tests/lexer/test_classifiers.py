"""Tests for per-line block classification."""

import pytest

from hana.lexer import LexerMode, LineClassifier
from hana.tokens import LineTokenType


def classify(line: str) -> tuple[LineTokenType, str]:
    token = LineClassifier().classify(line, 1)
    return token.type, token.value


class TestHeadings:
    """ATX heading classification."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, level: int) -> None:
        token = LineClassifier().classify("#" * level + " Title", 1)
        assert token.type == LineTokenType.HEADING
        assert token.level == level
        assert token.value == "Title"

    def test_seven_hashes_is_paragraph(self) -> None:
        assert classify("####### Title") == (LineTokenType.PARAGRAPH_LINE, "####### Title")

    def test_requires_whitespace(self) -> None:
        assert classify("#hashtag") == (LineTokenType.PARAGRAPH_LINE, "#hashtag")

    def test_tab_after_marker(self) -> None:
        assert classify("##\tTitle") == (LineTokenType.HEADING, "Title")

    def test_closing_sequence_removed(self) -> None:
        assert classify("## Title ##") == (LineTokenType.HEADING, "Title")

    def test_closing_sequence_needs_space(self) -> None:
        assert classify("# C#") == (LineTokenType.HEADING, "C#")

    def test_empty_heading(self) -> None:
        assert classify("#") == (LineTokenType.HEADING, "")
        assert classify("### ###") == (LineTokenType.HEADING, "")


class TestHorizontalRules:
    """Horizontal rule classification."""

    @pytest.mark.parametrize("line", ["---", "***", "___", "- - -", "*  *  *", "-----"])
    def test_rules(self, line: str) -> None:
        assert classify(line)[0] == LineTokenType.THEMATIC_BREAK

    @pytest.mark.parametrize("line", ["--", "-*-", "---a", "__"])
    def test_not_rules(self, line: str) -> None:
        assert classify(line)[0] != LineTokenType.THEMATIC_BREAK

    def test_rule_wins_over_list(self) -> None:
        assert classify("* * *")[0] == LineTokenType.THEMATIC_BREAK


class TestLists:
    """List item classification."""

    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_unordered(self, marker: str) -> None:
        assert classify(f"{marker} item") == (LineTokenType.UNORDERED_ITEM, "item")

    @pytest.mark.parametrize("marker", ["1.", "10.", "3)"])
    def test_ordered(self, marker: str) -> None:
        assert classify(f"{marker} item") == (LineTokenType.ORDERED_ITEM, "item")

    def test_marker_needs_whitespace(self) -> None:
        assert classify("-item") == (LineTokenType.PARAGRAPH_LINE, "-item")
        assert classify("1.5 apples") == (LineTokenType.PARAGRAPH_LINE, "1.5 apples")

    def test_too_many_digits(self) -> None:
        assert classify("1234567890. item")[0] == LineTokenType.PARAGRAPH_LINE

    def test_empty_item(self) -> None:
        assert classify("- ") == (LineTokenType.UNORDERED_ITEM, "")


class TestFences:
    """Code fence open/close and mode switching."""

    def test_fence_switches_mode(self) -> None:
        classifier = LineClassifier()
        token = classifier.classify("```rust", 1)
        assert token.type == LineTokenType.FENCE_START
        assert token.value == "rust"
        assert classifier.mode == LexerMode.CODE_FENCE

    def test_lines_inside_fence_are_verbatim(self) -> None:
        classifier = LineClassifier()
        classifier.classify("~~~", 1)
        token = classifier.classify("  # not a heading  ", 2)
        assert token.type == LineTokenType.CODE_LINE
        assert token.value == "  # not a heading  "

    def test_closing_fence(self) -> None:
        classifier = LineClassifier()
        classifier.classify("````", 1)
        assert classifier.classify("```", 2).type == LineTokenType.CODE_LINE
        assert classifier.classify("`````", 3).type == LineTokenType.FENCE_END
        assert classifier.mode == LexerMode.NORMAL

    def test_closing_fence_must_match_char(self) -> None:
        classifier = LineClassifier()
        classifier.classify("```", 1)
        assert classifier.classify("~~~", 2).type == LineTokenType.CODE_LINE

    def test_indented_closing_fence(self) -> None:
        classifier = LineClassifier()
        classifier.classify("```", 1)
        assert classifier.classify("    ```", 2).type == LineTokenType.CODE_LINE
        assert classifier.classify("   ```", 3).type == LineTokenType.FENCE_END

    def test_backtick_in_info_string(self) -> None:
        assert classify("``` a`b")[0] == LineTokenType.PARAGRAPH_LINE

    def test_two_backticks_are_not_a_fence(self) -> None:
        assert classify("``code``")[0] == LineTokenType.PARAGRAPH_LINE


class TestParagraphs:
    """Blank and paragraph lines."""

    @pytest.mark.parametrize("line", ["", " ", "\t  "])
    def test_blank(self, line: str) -> None:
        assert classify(line)[0] == LineTokenType.BLANK_LINE

    def test_trimmed(self) -> None:
        assert classify("  some text  ") == (LineTokenType.PARAGRAPH_LINE, "some text")

    def test_hard_break_flag(self) -> None:
        classifier = LineClassifier()
        assert classifier.classify("text  ", 1).hard_break is True
        assert classifier.classify("text ", 2).hard_break is False

    def test_lineno(self) -> None:
        assert LineClassifier().classify("x", 42).lineno == 42
