"""Line-at-a-time block classifier.

Classifies each source line on its own, carrying only the
``NORMAL ⇄ CODE_FENCE`` state between lines. No lookahead: a line's
classification never depends on lines that follow it.

Thread Safety:
LineClassifier instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from hana.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
)
from hana.lexer.modes import LexerMode
from hana.tokens import LineToken, LineTokenType


class LineClassifier(
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    FenceClassifierMixin,
    ListClassifierMixin,
):
    """Two-state line classifier.

    Classification order in NORMAL mode (first match wins):
    blank line, heading, horizontal rule, fence start, list item, paragraph.

    Usage:
            >>> classifier = LineClassifier()
            >>> classifier.classify("# Hello", 1)
        LineToken(HEADING, 'Hello', 1)
            >>> classifier.classify("World  ", 2)
        LineToken(PARAGRAPH_LINE, 'World', 2)

    """

    __slots__ = (
        "_mode",
        "_lineno",
        "_hard_break",
        "_fence_char",
        "_fence_count",
    )

    def __init__(self) -> None:
        self._mode = LexerMode.NORMAL
        self._lineno = 0
        self._hard_break = False

        # Fenced code state
        self._fence_char: str = ""
        self._fence_count: int = 0

    @property
    def mode(self) -> LexerMode:
        """Current lexer mode."""
        return self._mode

    def classify(self, line: str, lineno: int) -> LineToken:
        """Classify one line (terminator already stripped).

        Args:
            line: Raw line text
            lineno: Line number (1-indexed)

        Returns:
            The line's token. Switches mode on fence start/end.
        """
        self._lineno = lineno
        self._hard_break = line.endswith("  ")

        if self._mode == LexerMode.CODE_FENCE:
            return self._classify_code_fence_line(line)
        return self._classify_normal_line(line)

    def _classify_code_fence_line(self, line: str) -> LineToken:
        if self._is_closing_fence(line):
            self._mode = LexerMode.NORMAL
            self._fence_char = ""
            self._fence_count = 0
            return self._make_token(LineTokenType.FENCE_END, "")
        return LineToken(LineTokenType.CODE_LINE, line, self._lineno)

    def _classify_normal_line(self, line: str) -> LineToken:
        content = line.strip()
        if not content:
            return LineToken(LineTokenType.BLANK_LINE, "", self._lineno)

        first = content[0]

        if first == "#":
            token = self._try_classify_atx_heading(content)
            if token:
                return token

        token = self._try_classify_thematic_break(content)
        if token:
            return token

        token = self._try_classify_fence_start(content)
        if token:
            return token

        token = self._try_classify_list_marker(content)
        if token:
            return token

        return self._make_token(LineTokenType.PARAGRAPH_LINE, content)

    def _make_token(
        self,
        token_type: LineTokenType,
        value: str,
        *,
        level: int = 0,
    ) -> LineToken:
        """Create a token for the line being classified."""
        return LineToken(
            token_type,
            value,
            self._lineno,
            level=level,
            hard_break=self._hard_break,
        )
