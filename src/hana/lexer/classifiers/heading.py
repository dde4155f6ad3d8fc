"""ATX heading classifier mixin."""

from hana.lexer.modes import MAX_HEADING_LEVEL
from hana.tokens import LineToken, LineTokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _make_token(
        self,
        token_type: LineTokenType,
        value: str,
        *,
        level: int = 0,
    ) -> LineToken:
        """Create token for the current line. Implemented by LineClassifier."""
        raise NotImplementedError

    def _try_classify_atx_heading(self, content: str) -> LineToken | None:
        """Try to classify content as ATX heading.

        ATX headings start with 1-6 # characters followed by whitespace.
        A trailing # sequence is removed if preceded by whitespace.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token if valid heading, None otherwise.
        """
        level = 0
        content_len = len(content)
        while level < content_len and content[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        # "#" alone is stripped of its trailing whitespace already
        if level < content_len and content[level] not in " \t":
            return None

        heading_content = content[level:].strip()

        if heading_content.endswith("#"):
            trailing_start = len(heading_content)
            while trailing_start > 0 and heading_content[trailing_start - 1] == "#":
                trailing_start -= 1
            if trailing_start == 0:
                heading_content = ""
            elif heading_content[trailing_start - 1] in " \t":
                heading_content = heading_content[:trailing_start].rstrip()

        return self._make_token(LineTokenType.HEADING, heading_content, level=level)
