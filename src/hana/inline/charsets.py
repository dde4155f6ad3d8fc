"""Character sets and classification helpers for inline scanning.

All sets are frozensets for O(1) membership testing.

Usage:
    from hana.inline.charsets import ASCII_PUNCTUATION

    if char in ASCII_PUNCTUATION:
        ...
"""

import unicodedata

# ASCII punctuation characters; also the set of backslash-escapable characters
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Characters that interrupt a literal text run
INLINE_SPECIAL: frozenset[str] = frozenset("*_`[!\\")

# Emphasis delimiter characters
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_unicode_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation or symbol (P* or S*)."""
    if not char:
        return False
    if char in ASCII_PUNCTUATION:
        return True
    cat = unicodedata.category(char)
    return cat.startswith("P") or cat.startswith("S")


def is_unicode_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace.

    The empty string counts as whitespace so line boundaries behave like
    spaces in flanking checks.
    """
    if not char:
        return True
    if char in WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs"


def is_left_flanking(before: str, after: str) -> bool:
    """Check if a delimiter run is left-flanking.

    Left-flanking: not followed by whitespace, and either not followed by
    punctuation, or preceded by whitespace or punctuation.
    """
    if is_unicode_whitespace(after):
        return False
    if not is_unicode_punctuation(after):
        return True
    return is_unicode_whitespace(before) or is_unicode_punctuation(before)


def is_right_flanking(before: str, after: str) -> bool:
    """Check if a delimiter run is right-flanking.

    Right-flanking: not preceded by whitespace, and either not preceded by
    punctuation, or followed by whitespace or punctuation.
    """
    if is_unicode_whitespace(before):
        return False
    if not is_unicode_punctuation(before):
        return True
    return is_unicode_whitespace(after) or is_unicode_punctuation(after)
