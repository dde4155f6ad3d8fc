"""LineToken and LineTokenType definitions for the Hana lexer.

The lexer classifies one source line at a time into a LineToken that the
parser turns into elements. Each token has a type, the textual remainder
of the line (block markers stripped), and the 1-indexed line number.

Thread Safety:
LineToken is frozen (immutable). LineTokenType is an enum.

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineTokenType(Enum):
    """Line classifications produced by the lexer."""

    BLANK_LINE = auto()  # empty or whitespace-only

    HEADING = auto()  # # Heading
    THEMATIC_BREAK = auto()  # ---, ***, ___

    FENCE_START = auto()  # ``` or ~~~
    FENCE_END = auto()
    CODE_LINE = auto()  # verbatim line inside a fence

    ORDERED_ITEM = auto()  # 1. item
    UNORDERED_ITEM = auto()  # - item, * item, + item

    PARAGRAPH_LINE = auto()  # everything else


@dataclass(frozen=True, slots=True)
class LineToken:
    """A classified source line.

    Attributes:
        type: The classification
        value: Textual remainder of the line. Trimmed for textual blocks,
            verbatim for CODE_LINE, the info string for FENCE_START.
        lineno: Line number (1-indexed)
        level: Heading level, 0 for other tokens
        hard_break: The raw line ended in two or more spaces

    """

    type: LineTokenType
    value: str
    lineno: int
    level: int = 0
    hard_break: bool = False

    def __repr__(self) -> str:
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"LineToken({self.type.name}, {val!r}, {self.lineno})"
