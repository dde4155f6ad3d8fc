"""Line reader: lazy UTF-8 lines from strings, bytes and streams.

The tokenizer consumes lines one at a time; this module adapts the usual
Python sources to that shape:

- ``str`` / ``bytes``: split on ``\\n`` (a trailing ``\\r`` is dropped)
- text or binary streams, or any iterable of ``str``/``bytes`` lines
- async iterables and async readers exposing ``readline()``

A final line terminator does not produce an extra empty line. A leading
UTF-8 byte order mark is dropped.

Any stream failure raised while reading (``OSError``, ``ValueError``, asyncio
line-limit errors) and any invalid UTF-8 is re-raised as
``ReadError`` chaining the original exception.

"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any, TypeAlias

from hana.errors import ReadError

LineSource: TypeAlias = str | bytes | bytearray | Iterable[str] | Iterable[bytes]

_BOM = "\ufeff"

# Failures a stream can raise part way through a read
_READ_FAILURES = (OSError, ValueError, asyncio.LimitOverrunError, asyncio.IncompleteReadError)


def iter_lines(source: LineSource, *, source_file: str | None = None) -> Iterator[str]:
    """Yield the lines of source with terminators stripped.

    Args:
        source: Text, bytes, a stream, or an iterable of lines
        source_file: Optional path used in error messages

    Raises:
        ReadError: The source failed or was not valid UTF-8
    """
    if isinstance(source, str):
        yield from _split_text(source)
        return

    if isinstance(source, (bytes, bytearray)):
        source = _split_bytes(bytes(source))

    iterator = iter(source)
    lineno = 0
    while True:
        lineno += 1
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except _READ_FAILURES as exc:
            raise ReadError(exc, lineno=lineno, source_file=source_file) from exc
        yield _decode_line(raw, lineno, source_file)


async def aiter_lines(
    source: AsyncIterable[Any] | Any, *, source_file: str | None = None
) -> AsyncIterator[str]:
    """Async counterpart of ``iter_lines``.

    Accepts an async iterable of lines, an async reader with a ``readline()``
    coroutine (returns empty at end of stream), or anything ``iter_lines``
    accepts.

    Raises:
        ReadError: The source failed or was not valid UTF-8
    """
    if hasattr(source, "__aiter__"):
        iterator = aiter(source)
        lineno = 0
        while True:
            lineno += 1
            try:
                raw = await anext(iterator)
            except StopAsyncIteration:
                return
            except _READ_FAILURES as exc:
                raise ReadError(exc, lineno=lineno, source_file=source_file) from exc
            yield _decode_line(raw, lineno, source_file)
        return

    if hasattr(source, "readline") and not _is_sync_stream(source):
        lineno = 0
        while True:
            lineno += 1
            try:
                raw = await source.readline()
            except _READ_FAILURES as exc:
                raise ReadError(exc, lineno=lineno, source_file=source_file) from exc
            if not raw:
                return
            yield _decode_line(raw, lineno, source_file)
        return

    for line in iter_lines(source, source_file=source_file):
        yield line


def _is_sync_stream(source: Any) -> bool:
    # io objects are iterable; async readers are not
    return hasattr(source, "__iter__")


def _split_text(text: str) -> Iterator[str]:
    if text.startswith(_BOM):
        text = text[1:]
    lines = text.split("\n")
    if lines and lines[-1] == "" and len(lines) > 1:
        lines.pop()
    elif lines == [""]:
        return
    for line in lines:
        yield line.removesuffix("\r")


def _split_bytes(data: bytes) -> Iterator[bytes]:
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    yield from lines


def _decode_line(raw: str | bytes, lineno: int, source_file: str | None) -> str:
    if isinstance(raw, (bytes, bytearray)):
        try:
            line = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ReadError(exc, lineno=lineno, source_file=source_file) from exc
    else:
        line = raw

    if lineno == 1 and line.startswith(_BOM):
        line = line[1:]
    return line.removesuffix("\n").removesuffix("\r")


__all__ = ["LineSource", "aiter_lines", "iter_lines"]
