"""Markdown asset loader.

Turns a readable source plus loader settings into a ``Markdown`` document
whose style reference is left unresolved.

Each markdown file links its style document through loader settings. When
loading from disk without explicit settings, they are read from a sibling
meta file named ``<file>.meta``:

    # pages/home/README.md.meta
    meta_format_version = "1.0"

    [settings]
    style = "pages/home/style.toml"

"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hana.config import ParseConfig
from hana.elements import Markdown, StyleReference
from hana.errors import LoaderError
from hana.parser import parse_lines, parse_lines_async
from hana.utils.logger import get_logger

logger = get_logger(__name__)

META_SUFFIX = ".meta"


@dataclass(frozen=True, slots=True)
class LoaderSettings:
    """Per-document loader settings.

    Attributes:
        style: Path of the style document, relative to the asset root

    """

    style: str

    @classmethod
    def from_dict(cls, settings: dict[str, Any]) -> LoaderSettings:
        """Create settings from a dictionary; unknown keys are ignored.

        Raises:
            LoaderError: ``style`` is missing or not a string
        """
        style = settings.get("style")
        if not isinstance(style, str) or not style:
            raise LoaderError("loader settings require a 'style' path")
        return cls(style=style)

    @classmethod
    def from_meta(cls, path: str | Path) -> LoaderSettings:
        """Read settings from a meta file.

        Raises:
            LoaderError: Missing, unreadable or malformed meta file
        """
        path = Path(path)
        try:
            with path.open("rb") as f:
                meta = tomllib.load(f)
        except OSError as exc:
            raise LoaderError(f"could not read meta file {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise LoaderError(f"invalid meta file {path}: {exc}") from exc

        settings = meta.get("settings")
        if not isinstance(settings, dict):
            raise LoaderError(f"meta file {path} has no [settings] table")
        return cls.from_dict(settings)


class MarkdownLoader:
    """Load markdown documents.

    Usage:
        >>> loader = MarkdownLoader(LoaderSettings(style="style.toml"))
        >>> doc = loader.load("# Hello")
        >>> doc.style
        StyleReference(path='style.toml')

        >>> # Settings from README.md.meta
        >>> doc = MarkdownLoader().load_path("pages/README.md")

    """

    EXTENSIONS = ("md",)

    __slots__ = ("_settings", "_config")

    def __init__(
        self,
        settings: LoaderSettings | None = None,
        *,
        config: ParseConfig | None = None,
    ) -> None:
        self._settings = settings
        self._config = config

    @property
    def settings(self) -> LoaderSettings | None:
        return self._settings

    def load(self, reader: Any, *, source_file: str | None = None) -> Markdown:
        """Parse a line source into a document.

        Raises:
            ReadError: The source failed; no document is produced
        """
        content = parse_lines(reader, source_file=source_file, config=self._config)
        return Markdown(content=content, style=self._style_reference())

    async def load_async(self, reader: Any, *, source_file: str | None = None) -> Markdown:
        """Async variant of ``load``."""
        content = await parse_lines_async(reader, source_file=source_file, config=self._config)
        return Markdown(content=content, style=self._style_reference())

    def load_path(self, path: str | Path) -> Markdown:
        """Open and parse a markdown file.

        Without explicit settings, ``<path>.meta`` supplies them.

        Raises:
            LoaderError: The file or its meta file could not be opened
            ReadError: Reading failed part way
        """
        path = Path(path)
        settings = self._settings
        if settings is None:
            settings = LoaderSettings.from_meta(path.with_name(path.name + META_SUFFIX))

        try:
            f = path.open("rb")
        except OSError as exc:
            raise LoaderError(f"could not load asset {path}: {exc}") from exc

        with f:
            content = parse_lines(f, source_file=str(path), config=self._config)

        logger.debug("Loaded markdown %s with style %s", path, settings.style)
        return Markdown(content=content, style=StyleReference(settings.style))

    def _style_reference(self) -> StyleReference | None:
        if self._settings is None:
            return None
        return StyleReference(self._settings.style)


__all__ = ["META_SUFFIX", "LoaderSettings", "MarkdownLoader"]
