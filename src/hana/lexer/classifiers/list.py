"""List marker classifier mixin."""

from __future__ import annotations

from hana.lexer.modes import (
    MAX_ORDERED_DIGITS,
    ORDERED_LIST_DELIMITERS,
    UNORDERED_LIST_MARKERS,
)
from hana.tokens import LineToken, LineTokenType


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    def _make_token(
        self,
        token_type: LineTokenType,
        value: str,
        *,
        level: int = 0,
    ) -> LineToken:
        """Create token for the current line. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_list_marker(self, content: str) -> LineToken | None:
        """Try to classify content as a list item.

        Unordered: ``-``, ``*`` or ``+`` followed by whitespace.
        Ordered: 1-9 digits, then ``.`` or ``)``, then whitespace.
        A marker alone on the line (trailing whitespace stripped) is an
        empty item.
        """
        if not content:
            return None

        if content[0] in UNORDERED_LIST_MARKERS:
            if len(content) == 1:
                return self._make_token(LineTokenType.UNORDERED_ITEM, "")
            if content[1] in " \t":
                return self._make_token(LineTokenType.UNORDERED_ITEM, content[2:].strip())
            return None

        if content[0].isdigit():
            pos = 0
            while pos < len(content) and content[pos].isdigit():
                pos += 1
            if pos > MAX_ORDERED_DIGITS:
                return None
            if pos < len(content) and content[pos] in ORDERED_LIST_DELIMITERS:
                if pos + 1 == len(content):
                    return self._make_token(LineTokenType.ORDERED_ITEM, "")
                if content[pos + 1] in " \t":
                    return self._make_token(
                        LineTokenType.ORDERED_ITEM, content[pos + 2 :].strip()
                    )
        return None
