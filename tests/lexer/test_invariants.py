"""Property-based tests for tokenizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from hana import parse_elements
from hana.elements import (
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    MarkdownText,
    OrderedListItem,
    Standard,
    Text,
    UnorderedListItem,
)
from hana.normalizer import trailing_breaks

_ELEMENT_TYPES = (
    Text,
    Heading,
    HorizontalRule,
    Image,
    OrderedListItem,
    UnorderedListItem,
    CodeBlock,
    LineBreak,
)

# Lines that can never open a code fence
_fence_free_lines = st.lists(
    st.text(alphabet=st.characters(blacklist_characters="`~\n\r"), max_size=40),
    max_size=20,
)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_never_raises_on_text(self, source: str) -> None:
        """Any text tokenizes into known element types."""
        elements = parse_elements(source)
        assert all(isinstance(element, _ELEMENT_TYPES) for element in elements)

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_no_empty_runs(self, source: str) -> None:
        """Headings, list items and text elements never carry empty text."""
        for element in parse_elements(source):
            if isinstance(element, (Text, Heading, OrderedListItem, UnorderedListItem)):
                assert element.run.text, f"Empty run in {element!r}"

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_heading_followed_by_break(self, source: str) -> None:
        elements = parse_elements(source)
        for index, element in enumerate(elements):
            if isinstance(element, Heading):
                assert isinstance(elements[index + 1], LineBreak)
                assert 1 <= element.level <= 6


class TestBlankLineInvariants:
    """Paragraph gaps produced by blank lines."""

    @given(_fence_free_lines, st.integers(min_value=1, max_value=6))
    @settings(max_examples=200)
    def test_blank_lines_end_in_two_breaks(self, lines: list[str], blanks: int) -> None:
        """Any run of blank lines leaves exactly two trailing breaks."""
        source = "\n".join([*lines, *[""] * blanks, "end"])
        elements = parse_elements(source)
        assert elements[-1] == Text(MarkdownText(Standard(), "end"))
        assert trailing_breaks(elements[:-1], cap=10) >= 2
        assert trailing_breaks(elements[:-1], cap=2) == 2

    @given(st.integers(min_value=1, max_value=20))
    def test_blank_run_never_exceeds_cap(self, blanks: int) -> None:
        elements = parse_elements("a" + "\n" * (blanks + 1) + "b")
        assert elements.count(LineBreak()) == 2


class TestPlainText:
    """Lines without any markdown syntax."""

    @given(
        st.text(alphabet="abcdefghij XYZ", min_size=1, max_size=60).filter(
            lambda s: s.strip()
        )
    )
    @settings(max_examples=200)
    def test_plain_line_is_trimmed_text(self, line: str) -> None:
        elements = parse_elements(line)
        assert elements[0] == Text(MarkdownText(Standard(), line.strip()))
        if line.endswith("  "):
            assert elements[1:] == (LineBreak(),)
        else:
            assert len(elements) == 1


class TestSpecialCharacterHandling:
    """Marker characters in arbitrary positions."""

    @given(st.text(alphabet="*_`[]()!#-+~\\ a", max_size=200))
    @settings(max_examples=300)
    def test_marker_soup(self, source: str) -> None:
        elements = parse_elements(source)
        assert all(isinstance(element, _ELEMENT_TYPES) for element in elements)
