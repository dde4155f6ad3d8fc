"""Inline span scanning for Hana.

Provides:
- scanner: InlineScanner and scan_inline (emphasis, code, links, images)
- links: link destination/title helpers
- charsets: character classification for flanking rules
"""

from hana.inline.scanner import InlineScanner, scan_inline

__all__ = ["InlineScanner", "scan_inline"]
