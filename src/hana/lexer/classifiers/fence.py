"""Fenced code block classifier mixin."""

from hana.lexer.modes import FENCE_CHARS, LexerMode
from hana.tokens import LineToken, LineTokenType


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the LineClassifier class
    _fence_char: str
    _fence_count: int
    _mode: LexerMode

    def _make_token(
        self,
        token_type: LineTokenType,
        value: str,
        *,
        level: int = 0,
    ) -> LineToken:
        """Create token for the current line. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_fence_start(self, content: str) -> LineToken | None:
        """Try to classify content as fenced code start.

        Fenced code blocks start with 3+ backticks or tildes.
        Backtick fences cannot have backticks in the info string.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token if valid fence, None otherwise. The token value is the
            first word of the info string.
        """
        if not content:
            return None

        fence_char = content[0]
        if fence_char not in FENCE_CHARS:
            return None

        count = 0
        while count < len(content) and content[count] == fence_char:
            count += 1

        if count < 3:
            return None

        info = content[count:].strip()
        if fence_char == "`" and "`" in info:
            return None

        self._fence_char = fence_char
        self._fence_count = count
        self._mode = LexerMode.CODE_FENCE

        return self._make_token(LineTokenType.FENCE_START, info.split()[0] if info else "")

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence for the open code block.

        Closing fences may be indented 0-3 spaces, use the opening fence
        character at least as many times, and carry nothing else.

        Args:
            line: Full line including leading whitespace

        Returns:
            True if this is a valid closing fence.
        """
        if not self._fence_char:
            return False

        indent = len(line) - len(line.lstrip(" "))
        if indent >= 4:
            return False

        content = line[indent:]
        count = 0
        while count < len(content) and content[count] == self._fence_char:
            count += 1

        if count < self._fence_count:
            return False

        return content[count:].strip() == ""
