"""Tests for hana.serialization: document JSON round-trip."""

import json

import pytest

from hana import parse
from hana.elements import (
    BOLD,
    STANDARD,
    Heading,
    Image,
    ImageReference,
    LineBreak,
    Link,
    Markdown,
    MarkdownText,
    StyleReference,
    Text,
)
from hana.serialization import from_dict, from_json, to_dict, to_json

SAMPLE = """# Welcome

Some **bold** and `code` with a [link](https://example.com "Example").
![logo](img/logo.png)

- first
1. second
---
```python
print("hi")
```
"""


class TestToDict:
    """Dict shape."""

    def test_type_discriminator(self) -> None:
        data = to_dict(Text(MarkdownText(BOLD, "x")))
        assert data == {
            "_type": "Text",
            "run": {"_type": "MarkdownText", "style": {"_type": "Bold"}, "text": "x"},
        }

    def test_content_is_list(self) -> None:
        data = to_dict(Markdown(content=(LineBreak(),)))
        assert data["content"] == [{"_type": "LineBreak"}]
        assert data["style"] is None

    def test_rejects_foreign_values(self) -> None:
        with pytest.raises(TypeError):
            to_dict({"a": 1})


class TestRoundTrip:
    """Documents survive JSON."""

    def test_sample_document(self) -> None:
        doc = parse(SAMPLE, style="style.toml")
        assert from_json(to_json(doc)) == doc

    def test_link_and_image(self) -> None:
        doc = Markdown(
            content=(
                Text(MarkdownText(Link("/a", "A"), "a")),
                Image("alt", ImageReference("i.png", None)),
            ),
            style=StyleReference("s.toml"),
        )
        assert from_json(to_json(doc)) == doc

    def test_element(self) -> None:
        heading = Heading(MarkdownText(STANDARD, "H"), 4)
        assert from_dict(to_dict(heading)) == heading

    def test_deterministic(self) -> None:
        doc = parse(SAMPLE)
        assert to_json(doc) == to_json(parse(SAMPLE))
        assert list(json.loads(to_json(doc))) == ["_type", "content", "style"]


class TestFromDictErrors:
    """Malformed input."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing"):
            from_dict({"text": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown type"):
            from_dict({"_type": "Paragraph"})

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Markdown"):
            from_json(json.dumps(to_dict(LineBreak())))
