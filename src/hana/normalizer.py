"""Blank-line normalizer.

Each blank source line tops the element stream up to a fixed number of
trailing LineBreak elements, never beyond it. Breaks already contributed by
a hard line break (two trailing spaces) count toward the same cap, so any
run of blank lines yields a bounded paragraph gap.

Only the last ``cap`` committed elements are ever inspected.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from hana.config import DEFAULT_PARAGRAPH_BREAKS
from hana.elements import LINE_BREAK, LineBreak, MarkdownElement


def trailing_breaks(elements: Sequence[MarkdownElement], cap: int = DEFAULT_PARAGRAPH_BREAKS) -> int:
    """Count the contiguous LineBreak elements at the end of elements, up to cap."""
    count = 0
    for element in reversed(elements):
        if count >= cap or not isinstance(element, LineBreak):
            break
        count += 1
    return count


def normalize_blank_line(
    elements: MutableSequence[MarkdownElement], cap: int = DEFAULT_PARAGRAPH_BREAKS
) -> int:
    """Register one blank line against the end of elements.

    Appends ``cap - trailing_breaks(elements, cap)`` LineBreak elements so the
    stream ends in exactly ``cap`` breaks. Idempotent once the tail is full.

    Returns:
        Number of breaks appended.
    """
    missing = cap - trailing_breaks(elements, cap)
    for _ in range(missing):
        elements.append(LINE_BREAK)
    return missing


__all__ = ["normalize_blank_line", "trailing_breaks"]
