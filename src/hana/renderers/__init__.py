"""Renderers consuming a parsed document and its resolved style."""

from hana.renderers.protocol import ElementRenderer
from hana.renderers.sections import SectionRenderer, TextSection, TextStyle

__all__ = ["ElementRenderer", "SectionRenderer", "TextSection", "TextStyle"]
