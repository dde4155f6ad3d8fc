"""Document serialization: JSON round-trip for Hana documents.

Converts documents, elements and styles to/from JSON-compatible dicts.
Useful for caching parsed documents and shipping them to a separate
rendering process.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from hana import parse
    from hana.serialization import to_json, from_json

    doc = parse("# Hello **World**", style="style.toml")
    restored = from_json(to_json(doc))
    assert doc == restored

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from hana.elements import (
    Bold,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    ImageReference,
    Italic,
    LineBreak,
    Link,
    Markdown,
    MarkdownText,
    OrderedListItem,
    Standard,
    StyleReference,
    Text,
    UnorderedListItem,
)

# Registry of type names to classes for deserialization
_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Markdown,
        Text,
        Heading,
        HorizontalRule,
        Image,
        OrderedListItem,
        UnorderedListItem,
        CodeBlock,
        LineBreak,
        MarkdownText,
        Standard,
        Bold,
        Italic,
        Link,
        Code,
        ImageReference,
        StyleReference,
    )
}


def to_dict(value: Any) -> dict[str, Any]:
    """Convert a document, element or style to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        TypeError: value is not a Hana dataclass.

    """
    if not is_dataclass(value) or type(value).__name__ not in _TYPES:
        raise TypeError(f"Cannot serialize {type(value).__name__}")

    result: dict[str, Any] = {"_type": type(value).__name__}
    for f in fields(value):
        result[f.name] = _serialize_value(getattr(value, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if is_dataclass(value):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed value from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized value"
        raise ValueError(msg)

    cls = _TYPES.get(type_name)
    if cls is None:
        msg = f"Unknown type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict) and "_type" in value:
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Markdown, *, indent: int | None = None) -> str:
    """Serialize a document to a JSON string."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Markdown:
    """Deserialize a document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Markdown document.

    """
    value = from_dict(json.loads(data))
    if not isinstance(value, Markdown):
        msg = f"Expected Markdown, got {type(value).__name__}"
        raise ValueError(msg)
    return value


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
