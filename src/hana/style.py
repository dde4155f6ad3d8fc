"""Style documents: font, body size and body color for rendered markdown.

A style document is a small declarative file next to the markdown it
styles. TOML and JSON are supported:

    # pages/home/style.toml
    font = "fonts/Ubuntu/Ubuntu-Regular.ttf"
    body_size = 12.0
    body_color = { red = 1.0, green = 1.0, blue = 1.0, alpha = 1.0 }

``font`` is passed through as a path; loading the font is up to the host.

Colors accept:
- a table ``{red, green, blue, alpha?}`` (optionally wrapped as ``{Srgba = {...}}``)
- a list ``[r, g, b]`` or ``[r, g, b, a]``
- a hex string ``"#rrggbb"`` or ``"#rrggbbaa"``

Components are floats in ``[0, 1]``.

"""

from __future__ import annotations

import json
import math
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hana.elements import StyleReference
from hana.errors import StyleFormatError, StyleNotFoundError
from hana.utils.logger import get_logger

logger = get_logger(__name__)

EXTENSIONS = (".style.toml", ".style.json")

_COLOR_KEYS = ("red", "green", "blue")


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with float components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"color component {name} out of range: {value}")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value.removeprefix("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"invalid hex color: {value!r}")
        channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class MarkdownStyle:
    """Resolved style for rendering a markdown document.

    Attributes:
        font: Path to the font, relative to the asset root
        body_size: Font size for body text, in points
        body_color: Color for body text

    """

    font: str
    body_size: float
    body_color: Color = WHITE


class StyleLoader:
    """Load and validate style documents.

    Usage:
        >>> loader = StyleLoader()
        >>> style = loader.load('font = "a.ttf"\\nbody_size = 12.0')
        >>> style.body_size
        12.0

        >>> # Resolve a document's style reference against an asset root
        >>> style = loader.resolve(markdown.style, root="assets")

    """

    __slots__ = ()

    def load(self, data: str | bytes, *, format: str = "toml", path: str | None = None) -> MarkdownStyle:
        """Parse a style document from its text.

        Args:
            data: Document contents
            format: ``"toml"`` or ``"json"``
            path: Source path for error messages

        Raises:
            StyleFormatError: Unparseable document or wrong shape
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise StyleFormatError(path, f"not valid UTF-8: {exc}") from exc

        try:
            if format == "toml":
                raw = tomllib.loads(data)
            elif format == "json":
                raw = json.loads(data)
            else:
                raise StyleFormatError(path, f"unsupported style format: {format!r}")
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
            raise StyleFormatError(path, f"could not parse style document: {exc}") from exc

        style = self.from_dict(raw, path=path)
        logger.debug("Markdown style loaded from %s", path or "<string>")
        return style

    def load_path(self, path: str | Path) -> MarkdownStyle:
        """Read and parse a style document from disk.

        The format follows the file extension (``.json`` or TOML otherwise).

        Raises:
            StyleNotFoundError: The file does not exist
            StyleFormatError: Unparseable document or wrong shape
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise StyleNotFoundError(str(path), "style document not found") from exc
        except OSError as exc:
            raise StyleNotFoundError(str(path), f"could not read style document: {exc}") from exc

        format = "json" if path.suffix == ".json" else "toml"
        return self.load(data, format=format, path=str(path))

    def resolve(self, reference: StyleReference | None, root: str | Path | None = None) -> MarkdownStyle:
        """Load the style a document refers to.

        Args:
            reference: The document's style reference
            root: Directory the reference is relative to

        Raises:
            StyleNotFoundError: No reference, or the file does not exist
            StyleFormatError: Unparseable document or wrong shape
        """
        if reference is None:
            raise StyleNotFoundError(None, "document has no style reference")
        path = Path(root) / reference.path if root is not None else Path(reference.path)
        return self.load_path(path)

    def from_dict(self, raw: Any, *, path: str | None = None) -> MarkdownStyle:
        """Validate a decoded style document.

        Raises:
            StyleFormatError: Missing fields or wrong types
        """
        if not isinstance(raw, dict):
            raise StyleFormatError(path, "style document must be a table")

        missing = [key for key in ("font", "body_size") if key not in raw]
        if missing:
            raise StyleFormatError(path, f"missing field(s): {', '.join(missing)}")

        font = raw["font"]
        if not isinstance(font, str) or not font:
            raise StyleFormatError(path, "font must be a non-empty path string")

        body_size = raw["body_size"]
        if isinstance(body_size, bool) or not isinstance(body_size, (int, float)):
            raise StyleFormatError(path, "body_size must be a number")
        if not math.isfinite(body_size):
            raise StyleFormatError(path, f"body_size must be finite, got {body_size}")
        if body_size <= 0:
            raise StyleFormatError(path, f"body_size must be positive, got {body_size}")

        color = WHITE
        if "body_color" in raw:
            try:
                color = parse_color(raw["body_color"])
            except (TypeError, ValueError) as exc:
                raise StyleFormatError(path, f"invalid body_color: {exc}") from exc

        return MarkdownStyle(font=font, body_size=float(body_size), body_color=color)


def parse_color(value: Any) -> Color:
    """Parse a color from any of the supported shapes.

    Raises:
        TypeError: Unsupported shape
        ValueError: Bad component values
    """
    if isinstance(value, str):
        return Color.from_hex(value)

    if isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            raise ValueError(f"expected 3 or 4 components, got {len(value)}")
        return Color(*(_component(v) for v in value))

    if isinstance(value, dict):
        # {Srgba = {red = ..., ...}} wrapper
        if len(value) == 1:
            (inner,) = value.values()
            if isinstance(inner, dict):
                value = inner
        missing = [key for key in _COLOR_KEYS if key not in value]
        if missing:
            raise ValueError(f"missing component(s): {', '.join(missing)}")
        return Color(
            _component(value["red"]),
            _component(value["green"]),
            _component(value["blue"]),
            _component(value.get("alpha", 1.0)),
        )

    raise TypeError(f"unsupported color value: {value!r}")


def _component(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"color component must be a number, got {value!r}")
    return float(value)


__all__ = [
    "EXTENSIONS",
    "WHITE",
    "Color",
    "MarkdownStyle",
    "StyleLoader",
    "parse_color",
]
