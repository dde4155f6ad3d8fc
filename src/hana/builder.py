"""Element stream builder.

Accumulates elements in source order. Performs no reordering; the only
lookback is the blank-line normalizer's view of the trailing breaks.

Empty runs are rejected here: a heading, list item or text element whose
text is empty is never appended.

Thread Safety:
ElementStreamBuilder instances are single-use. Create one per document.

"""

from __future__ import annotations

from collections.abc import Sequence

from hana.config import DEFAULT_PARAGRAPH_BREAKS
from hana.elements import (
    LINE_BREAK,
    STANDARD,
    CodeBlock,
    Heading,
    Image,
    InlinePiece,
    MarkdownElement,
    MarkdownText,
    OrderedListItem,
    Text,
    UnorderedListItem,
)
from hana.normalizer import normalize_blank_line


class ElementStreamBuilder:
    """Append-only builder for one document's element stream.

    Usage:
        >>> builder = ElementStreamBuilder()
        >>> builder.append_pieces((MarkdownText(STANDARD, "hello"),))
        >>> builder.append_break()
        >>> builder.build()
        (Text(run=MarkdownText(style=Standard(), text='hello')), LineBreak())

    """

    __slots__ = ("_elements", "_paragraph_breaks")

    def __init__(self, *, paragraph_breaks: int = DEFAULT_PARAGRAPH_BREAKS) -> None:
        self._elements: list[MarkdownElement] = []
        self._paragraph_breaks = paragraph_breaks

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def elements(self) -> Sequence[MarkdownElement]:
        """Elements committed so far (read-only view)."""
        return tuple(self._elements)

    def append_element(self, element: MarkdownElement) -> bool:
        """Append any element, rejecting text-bearing ones with empty runs.

        Returns:
            True if the element was appended.
        """
        if isinstance(element, (Text, Heading, OrderedListItem, UnorderedListItem)):
            if not element.run.text:
                return False
        self._elements.append(element)
        return True

    def append_text(self, run: MarkdownText) -> bool:
        """Append a standalone run; empty runs are dropped."""
        return self.append_element(Text(run))

    def append_pieces(self, pieces: Sequence[InlinePiece]) -> None:
        """Append one line's runs as Text elements and images in order."""
        for piece in pieces:
            if isinstance(piece, MarkdownText):
                self.append_text(piece)
            else:
                self.append_element(piece)

    def append_heading(self, pieces: Sequence[InlinePiece], level: int) -> None:
        """Append a heading followed by exactly one LineBreak.

        A heading carries one run: a single run keeps its style, anything
        else is flattened to Standard text. An empty heading still
        contributes its break.
        """
        if len(pieces) == 1 and isinstance(pieces[0], MarkdownText):
            run = pieces[0]
        else:
            run = MarkdownText(STANDARD, "".join(_piece_text(p) for p in pieces))
        self.append_element(Heading(run, level))
        self.append_break()

    def append_list_item(self, pieces: Sequence[InlinePiece], *, ordered: bool) -> None:
        """Append a list item wrapping the line's first run.

        Further runs of the line follow as Text elements. A line that does not
        start with a run is appended as plain pieces.
        """
        if not pieces or not isinstance(pieces[0], MarkdownText):
            self.append_pieces(pieces)
            return
        item_type = OrderedListItem if ordered else UnorderedListItem
        self.append_element(item_type(pieces[0]))
        self.append_pieces(pieces[1:])

    def append_code_block(self, lines: Sequence[str], language: str = "") -> None:
        """Append a fenced code block; lines are joined verbatim."""
        self._elements.append(CodeBlock("\n".join(lines), language))

    def append_break(self) -> None:
        """Append one LineBreak (line terminator or hard break)."""
        self._elements.append(LINE_BREAK)

    def blank_line(self) -> int:
        """Register a blank source line.

        Returns:
            Number of breaks appended.
        """
        return normalize_blank_line(self._elements, self._paragraph_breaks)

    def build(self) -> tuple[MarkdownElement, ...]:
        """Return the finished, immutable element stream."""
        return tuple(self._elements)


def _piece_text(piece: InlinePiece) -> str:
    if isinstance(piece, Image):
        return piece.alt_text
    return piece.text
