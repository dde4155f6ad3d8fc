"""Inline span scanner.

Splits the textual remainder of one line into styled runs, left to right,
with an open-marker stack for emphasis:

1. Code spans, links, images and escapes are recognized as they are reached.
   Code span contents are never scanned further.
2. Each ``*``/``_`` delimiter run either closes the nearest matching opener
   on the stack, opens a new one, or stays literal.
3. Whatever is still open at end of line is emitted as literal text.

A run carries exactly one style, so emphasis never nests: text inside a
``**...**`` pair that is already a code span, link or italic run keeps its
own style, and only the plain text around it becomes bold.

Thread Safety:
InlineScanner instances hold no state between calls. Safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from hana.elements import (
    BOLD,
    CODE,
    ITALIC,
    STANDARD,
    Image,
    ImageReference,
    InlinePiece,
    Link,
    MarkdownText,
)
from hana.inline.charsets import (
    ASCII_PUNCTUATION,
    EMPHASIS_DELIMITERS,
    INLINE_SPECIAL,
    is_left_flanking,
    is_right_flanking,
    is_unicode_punctuation,
)
from hana.inline.links import (
    find_closing_bracket,
    find_code_span_close,
    parse_inline_link,
    process_escapes,
)


@dataclass(slots=True)
class _Delimiter:
    """A ``*``/``_`` run waiting for its partner. Literal once deactivated."""

    marker: str
    active: bool = True


_Piece: TypeAlias = str | _Delimiter | MarkdownText | Image


class InlineScanner:
    """Scan one line of text into inline pieces.

    Usage:
        >>> InlineScanner().scan("plain **bold** `code`")
        (MarkdownText(style=Standard(), text='plain '),
         MarkdownText(style=Bold(), text='bold'),
         MarkdownText(style=Standard(), text=' '),
         MarkdownText(style=Code(), text='code'))

    """

    __slots__ = ("_images_enabled",)

    def __init__(self, *, images_enabled: bool = True) -> None:
        self._images_enabled = images_enabled

    def scan(self, text: str) -> tuple[InlinePiece, ...]:
        """Scan text into runs and images covering all of it, in source order."""
        if not text:
            return ()

        pieces: list[_Piece] = []
        openers: list[int] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            char = text[pos]

            if char == "`":
                pos = self._scan_code_span(text, pos, pieces)
                continue

            if char in EMPHASIS_DELIMITERS:
                pos = self._scan_delimiter_run(text, pos, pieces, openers)
                continue

            if char == "[":
                pos = self._scan_link(text, pos, pieces)
                continue

            if char == "!" and pos + 1 < text_len and text[pos + 1] == "[":
                pos = self._scan_image(text, pos, pieces)
                continue

            if char == "\\" and pos + 1 < text_len and text[pos + 1] in ASCII_PUNCTUATION:
                pieces.append(text[pos + 1])
                pos += 2
                continue

            # Plain text up to the next special character
            end = pos + 1
            while end < text_len and text[end] not in INLINE_SPECIAL:
                end += 1
            pieces.append(text[pos:end])
            pos = end

        return _merge_runs(pieces)

    # =========================================================================
    # Code spans
    # =========================================================================

    def _scan_code_span(self, text: str, pos: int, pieces: list[_Piece]) -> int:
        count = 0
        while pos < len(text) and text[pos] == "`":
            count += 1
            pos += 1

        close_pos = find_code_span_close(text, pos, count)
        if close_pos == -1:
            pieces.append("`" * count)
            return pos

        code = text[pos:close_pos]
        # Strip one space from each end if both present, unless all spaces
        if len(code) >= 2 and code[0] == " " and code[-1] == " " and code.strip():
            code = code[1:-1]
        pieces.append(MarkdownText(CODE, code))
        return close_pos + count

    # =========================================================================
    # Emphasis
    # =========================================================================

    def _scan_delimiter_run(
        self, text: str, pos: int, pieces: list[_Piece], openers: list[int]
    ) -> int:
        start = pos
        char = text[pos]
        while pos < len(text) and text[pos] == char:
            pos += 1
        marker = text[start:pos]

        # Runs of three or more have no single style to map to
        if len(marker) > 2:
            pieces.append(marker)
            return pos

        before = text[start - 1] if start > 0 else ""
        after = text[pos] if pos < len(text) else ""
        left = is_left_flanking(before, after)
        right = is_right_flanking(before, after)

        if char == "_":
            can_open = left and (not right or is_unicode_punctuation(before))
            can_close = right and (not left or is_unicode_punctuation(after))
        else:
            can_open = left
            can_close = right

        if can_close and self._close_emphasis(marker, pieces, openers):
            return pos

        if can_open:
            openers.append(len(pieces))
            pieces.append(_Delimiter(marker))
        else:
            pieces.append(marker)
        return pos

    def _close_emphasis(self, marker: str, pieces: list[_Piece], openers: list[int]) -> bool:
        """Close the nearest opener with the same marker, restyling what it spans.

        Openers above the match can no longer close and become literal.

        Returns:
            True if an opener was found.
        """
        for depth in range(len(openers) - 1, -1, -1):
            opener_index = openers[depth]
            opener = pieces[opener_index]
            if opener.marker != marker:  # type: ignore[union-attr]
                continue

            for unmatched in openers[depth + 1 :]:
                pieces[unmatched].active = False  # type: ignore[union-attr]
            del openers[depth:]

            style = BOLD if len(marker) == 2 else ITALIC
            restyled: list[_Piece] = []
            for piece in pieces[opener_index + 1 :]:
                if isinstance(piece, str):
                    restyled.append(MarkdownText(style, piece))
                elif isinstance(piece, _Delimiter):
                    restyled.append(MarkdownText(style, piece.marker))
                else:
                    restyled.append(piece)
            pieces[opener_index:] = restyled
            return True
        return False

    # =========================================================================
    # Links and images
    # =========================================================================

    def _scan_link(self, text: str, pos: int, pieces: list[_Piece]) -> int:
        parsed = self._parse_bracketed(text, pos)
        if parsed is None:
            pieces.append("[")
            return pos + 1

        label, url, title, end = parsed
        if not label and not url:
            pieces.append(text[pos:end])
            return end
        # An empty label would leave nothing to click on
        pieces.append(MarkdownText(Link(url, title), label or url))
        return end

    def _scan_image(self, text: str, pos: int, pieces: list[_Piece]) -> int:
        parsed = self._parse_bracketed(text, pos + 1)
        if parsed is None:
            pieces.append("!")
            return pos + 1

        alt, url, title, end = parsed
        if self._images_enabled:
            pieces.append(Image(alt, ImageReference(url, title)))
        else:
            pieces.append(text[pos:end])
        return end

    def _parse_bracketed(self, text: str, pos: int) -> tuple[str, str, str | None, int] | None:
        """Parse ``[label](url "title")`` with the bracket at pos."""
        close = find_closing_bracket(text, pos + 1)
        if close == -1:
            return None
        link = parse_inline_link(text, close + 1)
        if link is None:
            return None
        url, title, end = link
        return process_escapes(text[pos + 1 : close]), url, title, end


def _merge_runs(pieces: list[_Piece]) -> tuple[InlinePiece, ...]:
    """Turn leftover text into Standard runs and merge same-style neighbours."""
    result: list[InlinePiece] = []
    for piece in pieces:
        if isinstance(piece, str):
            run = MarkdownText(STANDARD, piece)
        elif isinstance(piece, _Delimiter):
            run = MarkdownText(STANDARD, piece.marker)
        else:
            run = piece

        if isinstance(run, MarkdownText):
            if not run.text:
                continue
            last = result[-1] if result else None
            if isinstance(last, MarkdownText) and last.style == run.style:
                result[-1] = MarkdownText(run.style, last.text + run.text)
                continue
        result.append(run)
    return tuple(result)


def scan_inline(text: str, *, images_enabled: bool = True) -> tuple[InlinePiece, ...]:
    """Scan one line of text into styled runs and images.

    Args:
        text: Trimmed textual remainder of a line
        images_enabled: Recognize ``![alt](path)``; otherwise it stays literal

    Returns:
        Pieces covering the whole input in source order. Never contains an
        empty run.
    """
    return InlineScanner(images_enabled=images_enabled).scan(text)
