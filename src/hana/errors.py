"""Exception classes for Hana.

Provides standardized exceptions for error handling throughout Hana.
"""

from __future__ import annotations


class HanaError(Exception):
    """Base exception for all Hana errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(HanaError):
    """Error during Markdown parsing.

    Raised when a document cannot be tokenized. A failed parse never
    yields a partial document.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ReadError(ParseError):
    """The line source failed while the document was being read.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        cause: BaseException,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(f"Failed reading line: {cause}", lineno=lineno, source_file=source_file)


class LoaderError(HanaError):
    """Error while loading a markdown asset (settings, meta file, I/O)."""

    pass


class StyleError(HanaError):
    """Error while loading or resolving a style document."""

    def __init__(self, path: str | None, message: str) -> None:
        self.path = path
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")


class StyleNotFoundError(StyleError):
    """The referenced style document does not exist."""

    pass


class StyleFormatError(StyleError):
    """The style document is not valid or has the wrong shape."""

    pass


class RenderError(HanaError):
    """Error while turning elements into renderable sections."""

    pass
