"""Horizontal rule classifier mixin."""

from __future__ import annotations

from hana.lexer.modes import THEMATIC_BREAK_CHARS
from hana.tokens import LineToken, LineTokenType


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _make_token(
        self,
        token_type: LineTokenType,
        value: str,
        *,
        level: int = 0,
    ) -> LineToken:
        """Create token for the current line. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_thematic_break(self, content: str) -> LineToken | None:
        """Try to classify content as a horizontal rule.

        Horizontal rules are 3+ of the same character (-, *, _) with
        optional spaces/tabs between them.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token if valid rule, None otherwise.
        """
        if not content:
            return None

        char = content[0]
        if char not in THEMATIC_BREAK_CHARS:
            return None

        count = 0
        for c in content:
            if c == char:
                count += 1
            elif c in " \t":
                continue
            else:
                return None

        if count >= 3:
            return self._make_token(LineTokenType.THEMATIC_BREAK, "")

        return None
