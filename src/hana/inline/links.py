"""Link and image syntax helpers for the inline scanner.

Inline links only: ``[text](target "title")`` and ``![alt](path "title")``.
Reference-style links are not recognized.

- Destinations can be angle-bracket delimited or raw
- Angle-bracket destinations can contain spaces
- Raw destinations: no spaces, no control chars, balanced parens
- Backslash escapes work in destinations and titles
"""

from __future__ import annotations

import re

from hana.inline.charsets import ASCII_PUNCTUATION

_ESCAPE_PATTERN = re.compile(r"\\([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])")


def process_escapes(text: str) -> str:
    """Replace each backslash + ASCII punctuation pair with the literal char."""
    return _ESCAPE_PATTERN.sub(r"\1", text)


def parse_link_destination(text: str, pos: int) -> tuple[str, int] | None:
    """Parse a link destination starting at pos.

    Args:
        text: The full text being parsed
        pos: Position after the opening (

    Returns:
        (url, end_pos) or None if invalid

    """
    text_len = len(text)
    while pos < text_len and text[pos] in " \t":
        pos += 1

    if pos >= text_len:
        return None

    if text[pos] == "<":
        pos += 1
        start = pos
        while pos < text_len:
            char = text[pos]
            if char == ">":
                return process_escapes(text[start:pos]), pos + 1
            if char == "<":
                return None
            if char == "\\" and pos + 1 < text_len:
                pos += 2
                continue
            pos += 1
        return None

    start = pos
    paren_depth = 0

    while pos < text_len:
        char = text[pos]

        if char in " \t" or ord(char) < 0x20:
            break

        if char == "(":
            paren_depth += 1
            pos += 1
            continue

        if char == ")":
            if paren_depth > 0:
                paren_depth -= 1
                pos += 1
                continue
            break

        if char == "\\" and pos + 1 < text_len and text[pos + 1] in ASCII_PUNCTUATION:
            pos += 2
            continue

        pos += 1

    return process_escapes(text[start:pos]), pos


def parse_link_title(text: str, pos: int) -> tuple[str | None, int]:
    """Parse an optional link title enclosed in ", ' or ().

    Returns:
        (title, end_pos); title is None if no valid title was found

    """
    text_len = len(text)
    while pos < text_len and text[pos] in " \t":
        pos += 1

    if pos >= text_len:
        return None, pos

    char = text[pos]
    if char == '"':
        closer = '"'
    elif char == "'":
        closer = "'"
    elif char == "(":
        closer = ")"
    else:
        return None, pos

    pos += 1
    start = pos

    while pos < text_len:
        c = text[pos]
        if c == closer:
            return process_escapes(text[start:pos]), pos + 1
        if c == "\\" and pos + 1 < text_len:
            pos += 2
            continue
        pos += 1

    return None, start - 1


def parse_inline_link(text: str, pos: int) -> tuple[str, str | None, int] | None:
    """Parse ``(url)``, ``(url "title")`` or ``(<url> 'title')`` at pos.

    Args:
        text: Full text being parsed
        pos: Position at the opening (

    Returns:
        (url, title, end_pos) or None if invalid

    """
    if pos >= len(text) or text[pos] != "(":
        return None

    pos += 1
    while pos < len(text) and text[pos] in " \t":
        pos += 1

    if pos < len(text) and text[pos] == ")":
        return "", None, pos + 1

    dest_result = parse_link_destination(text, pos)
    if dest_result is None:
        return None

    url, pos = dest_result

    while pos < len(text) and text[pos] in " \t":
        pos += 1

    if pos >= len(text):
        return None

    if text[pos] == ")":
        return url, None, pos + 1

    title, pos = parse_link_title(text, pos)
    if title is None:
        return None

    while pos < len(text) and text[pos] in " \t":
        pos += 1

    if pos >= len(text) or text[pos] != ")":
        return None

    return url, title, pos + 1


def find_closing_bracket(text: str, start: int) -> int:
    """Find the ] closing the bracket opened just before start.

    Nested brackets are balanced, backslash escapes are skipped, and
    brackets inside code spans do not count.

    Returns:
        Position of closing ] or -1 if not found

    """
    pos = start
    text_len = len(text)
    bracket_depth = 0

    while pos < text_len:
        char = text[pos]

        if char == "`":
            count = 0
            while pos < text_len and text[pos] == "`":
                count += 1
                pos += 1
            close_pos = find_code_span_close(text, pos, count)
            if close_pos != -1:
                pos = close_pos + count
            continue

        if char == "[":
            bracket_depth += 1
        elif char == "]":
            if bracket_depth == 0:
                return pos
            bracket_depth -= 1
        elif char == "\\":
            pos += 2
            continue

        pos += 1

    return -1


def find_code_span_close(text: str, start: int, backtick_count: int) -> int:
    """Find a backtick run of exactly backtick_count starting at or after start.

    Returns:
        Position of the closing run or -1 if none exists

    """
    pos = start
    text_len = len(text)
    while True:
        idx = text.find("`", pos)
        if idx == -1:
            return -1
        count = 0
        check_pos = idx
        while check_pos < text_len and text[check_pos] == "`":
            count += 1
            check_pos += 1
        if count == backtick_count:
            return idx
        pos = check_pos
