"""Serialize a parsed document to JSON and back."""

from hana import from_json, parse, to_json

doc = parse("# Cached\n\nParse once, ship the JSON to the render process.", style="style.toml")
data = to_json(doc, indent=2)
print(data)

assert from_json(data) == doc
