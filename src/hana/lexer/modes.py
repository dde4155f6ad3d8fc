"""Lexer operating modes.

This module defines the two-state machine of the line lexer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    - NORMAL: Between blocks, classifying each line
    - CODE_FENCE: Inside a fenced code block, collecting lines verbatim

    """

    NORMAL = auto()
    CODE_FENCE = auto()


# Characters that may open a fence
FENCE_CHARS = frozenset("`~")

# Characters that may form a horizontal rule
THEMATIC_BREAK_CHARS = frozenset("-*_")

# Unordered list bullets
UNORDERED_LIST_MARKERS = frozenset("-*+")

# Ordered list delimiters after the number
ORDERED_LIST_DELIMITERS = frozenset(".)")

# Longest ordered list number, in digits
MAX_ORDERED_DIGITS = 9

MAX_HEADING_LEVEL = 6
