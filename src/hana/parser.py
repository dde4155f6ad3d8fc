"""Streaming line-oriented tokenizer.

Consumes lines strictly in order and builds the element stream:

    line ─▶ LineClassifier ─▶ InlineScanner (textual blocks) ─▶ ElementStreamBuilder
                          └──▶ blank-line normalizer (blank lines) ──┘

Working memory is the current line, the open code fence (if any), and the
elements built so far. Nothing is published until ``finish()``: a parse that
fails part way leaves no document behind.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
document. Configuration is read from ContextVar when the parser is created.

"""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable
from typing import Any

from hana.builder import ElementStreamBuilder
from hana.config import ParseConfig, get_parse_config
from hana.elements import (
    HORIZONTAL_RULE,
    STANDARD,
    InlinePiece,
    MarkdownElement,
    MarkdownText,
)
from hana.errors import ParseError
from hana.inline import InlineScanner
from hana.lexer import LexerMode, LineClassifier
from hana.reader import aiter_lines, iter_lines
from hana.tokens import LineToken, LineTokenType
from hana.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Tokenize markdown lines into presentation elements.

    Usage:
            >>> parser = Parser()
            >>> parser.feed("# Hello")
            >>> parser.feed("World")
            >>> parser.finish()
        (Heading(run=MarkdownText(style=Standard(), text='Hello'), level=1),
         LineBreak(),
         Text(run=MarkdownText(style=Standard(), text='World')))

    Or in one call:
            >>> Parser().parse(["# Hello", "World"])

    """

    __slots__ = (
        "_config",
        "_source_file",
        "_classifier",
        "_scanner",
        "_builder",
        "_lineno",
        "_code_lines",
        "_code_language",
        "_finished",
    )

    def __init__(
        self,
        source_file: str | None = None,
        *,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            source_file: Optional source file path for error messages
            config: Explicit configuration; defaults to the active
                context configuration

        """
        self._config = config or get_parse_config()
        self._source_file = source_file
        self._classifier = LineClassifier()
        self._scanner = InlineScanner(images_enabled=self._config.images_enabled)
        self._builder = ElementStreamBuilder(paragraph_breaks=self._config.paragraph_breaks)
        self._lineno = 0

        # Open code fence state
        self._code_lines: list[str] = []
        self._code_language = ""

        self._finished = False

    @property
    def lineno(self) -> int:
        """Number of lines fed so far."""
        return self._lineno

    def feed(self, line: str) -> None:
        """Process one line (terminator already stripped)."""
        if self._finished:
            raise ParseError("parser already finished", source_file=self._source_file)

        self._lineno += 1
        token = self._classifier.classify(line, self._lineno)
        self._dispatch(token)

    def finish(self) -> tuple[MarkdownElement, ...]:
        """Close any open fence and return the finished element stream."""
        if not self._finished:
            if self._classifier.mode == LexerMode.CODE_FENCE:
                logger.debug(
                    "Unterminated code fence at end of %s; closing implicitly",
                    self._source_file or "input",
                )
                self._close_fence()
            self._finished = True

        elements = self._builder.build()
        logger.debug("Parsed %d lines into %d elements", self._lineno, len(elements))
        return elements

    def parse(self, lines: Iterable[str]) -> tuple[MarkdownElement, ...]:
        """Feed every line of an iterable and finish."""
        for line in lines:
            self.feed(line)
        return self.finish()

    async def parse_async(self, lines: AsyncIterable[str]) -> tuple[MarkdownElement, ...]:
        """Feed every line of an async iterable and finish.

        Waiting for the next line is the only suspension point.
        """
        async for line in lines:
            self.feed(line)
        return self.finish()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _dispatch(self, token: LineToken) -> None:
        match token.type:
            case LineTokenType.BLANK_LINE:
                self._builder.blank_line()
            case LineTokenType.CODE_LINE:
                self._code_lines.append(token.value)
            case LineTokenType.FENCE_START:
                self._code_lines = []
                self._code_language = token.value
            case LineTokenType.FENCE_END:
                self._close_fence()
            case LineTokenType.THEMATIC_BREAK:
                self._builder.append_element(HORIZONTAL_RULE)
            case LineTokenType.HEADING:
                self._builder.append_heading(self._scan(token.value), token.level)
            case LineTokenType.ORDERED_ITEM | LineTokenType.UNORDERED_ITEM:
                self._builder.append_list_item(
                    self._scan(token.value),
                    ordered=token.type == LineTokenType.ORDERED_ITEM,
                )
                self._hard_break(token)
            case LineTokenType.PARAGRAPH_LINE:
                self._builder.append_pieces(self._scan(token.value))
                self._hard_break(token)

    def _scan(self, text: str) -> tuple[InlinePiece, ...]:
        transformer = self._config.text_transformer
        if transformer is not None:
            text = transformer(text).strip()
        if not text:
            return ()
        if not self._config.inline_styles_enabled:
            return (MarkdownText(STANDARD, text),)
        return self._scanner.scan(text)

    def _hard_break(self, token: LineToken) -> None:
        if token.hard_break and self._config.hard_breaks_enabled:
            self._builder.append_break()

    def _close_fence(self) -> None:
        self._builder.append_code_block(self._code_lines, self._code_language)
        self._code_lines = []
        self._code_language = ""


def parse_lines(
    source: Any,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> tuple[MarkdownElement, ...]:
    """Tokenize any line source accepted by ``hana.reader.iter_lines``.

    Raises:
        ReadError: The source failed; no elements are returned
    """
    parser = Parser(source_file, config=config)
    return parser.parse(iter_lines(source, source_file=source_file))


async def parse_lines_async(
    source: Any,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> tuple[MarkdownElement, ...]:
    """Tokenize any line source accepted by ``hana.reader.aiter_lines``.

    Raises:
        ReadError: The source failed; no elements are returned
    """
    parser = Parser(source_file, config=config)
    return await parser.parse_async(aiter_lines(source, source_file=source_file))
