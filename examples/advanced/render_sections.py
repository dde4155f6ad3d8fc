"""Resolve a style and flatten a document into styled text sections."""

from hana import SectionRenderer, StyleLoader, parse

STYLE = """
font = "fonts/Ubuntu/Ubuntu-Regular.ttf"
body_size = 12.0
body_color = "#202020"
"""

doc = parse("## Welcome\n\nThis is **hana**.\n\n- fast\n- small", style="style.toml")
style = StyleLoader().load(STYLE, path="style.toml")

for section in SectionRenderer().render(doc, style):
    print(repr(section.value), type(section.inline).__name__, section.heading_level)
