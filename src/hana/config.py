"""ContextVar-based parse configuration for Hana.

Provides context-local configuration using Python's ContextVars (PEP 567).
Because asyncio tasks copy the context they start in, a document parsed with
``parse_async`` sees the configuration that was active when its task began.

Usage:
    # Direct parser usage
    from hana.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(images_enabled=False))
    try:
        doc = parse(source)
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(hard_breaks_enabled=False)):
        doc = parse(source)

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

# Maximum number of consecutive LineBreak elements a run of blank lines yields
DEFAULT_PARAGRAPH_BREAKS = 2


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        paragraph_breaks: Number of trailing LineBreak elements a blank line
            tops the stream up to
        hard_breaks_enabled: Two trailing spaces emit a LineBreak
        inline_styles_enabled: Scan lines for emphasis, code and links; when
            disabled every line becomes a single Standard run
        images_enabled: Recognize ![alt](path) as Image elements
        text_transformer: Optional callback applied to each textual line
            before inline scanning

    """

    paragraph_breaks: int = DEFAULT_PARAGRAPH_BREAKS
    hard_breaks_enabled: bool = True
    inline_styles_enabled: bool = True
    images_enabled: bool = True
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if self.paragraph_breaks < 1:
            raise ValueError(f"paragraph_breaks must be >= 1, got {self.paragraph_breaks}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "images_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.images_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with parse_config_context(ParseConfig(images_enabled=False)):
        ...     doc = parse("![logo](logo.png)")
        >>> # Automatically reset to previous config

    Restores the previous config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_PARAGRAPH_BREAKS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
